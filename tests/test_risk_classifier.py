"""
tests/test_risk_classifier.py

Pytest unit tests for the risk tier classifier.
"""

from __future__ import annotations

import pytest

from app.domain.audit import RiskLevel
from risk.classifier import HIGH_GAP, MEDIUM_GAP, RISK_MESSAGES, RiskThresholds, classify


@pytest.mark.parametrize(
    "dpd, eod, expected",
    [
        (0.0, 0.0, RiskLevel.LOW),
        (0.05, 0.099, RiskLevel.LOW),
        (0.10, 0.0, RiskLevel.MEDIUM),
        (0.0, 0.15, RiskLevel.MEDIUM),
        (0.19, 0.05, RiskLevel.MEDIUM),
        (0.20, 0.0, RiskLevel.HIGH),
        (0.05, 0.9, RiskLevel.HIGH),
    ],
)
def test_classify_uses_worst_gap(dpd: float, eod: float, expected: RiskLevel) -> None:
    assert classify(dpd, eod).level is expected


def test_default_thresholds() -> None:
    assert MEDIUM_GAP == pytest.approx(0.10)
    assert HIGH_GAP == pytest.approx(0.20)


def test_messages_are_fixed_per_level() -> None:
    assert classify(0.0, 0.0).message == (
        "Gaps are small in this audit. Continue monitoring and validate on additional data."
    )
    assert classify(0.15, 0.0).message == RISK_MESSAGES[RiskLevel.MEDIUM]
    assert classify(0.5, 0.0).message.startswith("Large fairness gaps detected.")


def test_custom_thresholds() -> None:
    thresholds = RiskThresholds(medium_gap=0.05, high_gap=0.3)
    assert classify(0.06, 0.0, thresholds).level is RiskLevel.MEDIUM
    assert classify(0.25, 0.0, thresholds).level is RiskLevel.MEDIUM


def test_thresholds_must_be_ordered() -> None:
    with pytest.raises(ValueError):
        RiskThresholds(medium_gap=0.3, high_gap=0.2)


def test_assessment_serializes() -> None:
    assert classify(0.3, 0.1).to_dict()["level"] == "High"
