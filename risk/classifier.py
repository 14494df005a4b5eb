"""
risk/classifier.py

Maps the worst disparity gap to a three-level risk rating.

Thresholds are educational defaults, not statistically derived. Boundaries
are inclusive lower bounds: a gap equal to ``medium_gap`` is Medium and a gap
equal to ``high_gap`` is High.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.audit import RiskAssessment, RiskLevel

MEDIUM_GAP: float = 0.10
HIGH_GAP: float = 0.20

RISK_MESSAGES: dict[RiskLevel, str] = {
    RiskLevel.LOW: (
        "Gaps are small in this audit. Continue monitoring and validate on additional data."
    ),
    RiskLevel.MEDIUM: (
        "Noticeable gaps detected. Consider reviewing features, thresholds, "
        "and subgroup performance before deployment."
    ),
    RiskLevel.HIGH: (
        "Large fairness gaps detected. Deployment is not recommended without mitigation "
        "(e.g., threshold tuning, reweighting, or additional data review)."
    ),
}


@dataclass(frozen=True)
class RiskThresholds:
    """Gap boundaries between risk tiers."""

    medium_gap: float = MEDIUM_GAP
    high_gap: float = HIGH_GAP

    def __post_init__(self) -> None:
        if self.medium_gap > self.high_gap:
            raise ValueError("medium_gap must not exceed high_gap.")


DEFAULT_THRESHOLDS = RiskThresholds()


def classify(
    dpd: float,
    eod: float,
    thresholds: RiskThresholds = DEFAULT_THRESHOLDS,
) -> RiskAssessment:
    """Classify an audit by ``max(dpd, eod)``.

    Args:
        dpd: Demographic parity difference.
        eod: Equal opportunity difference.
        thresholds: Tier boundaries; defaults to 0.10 / 0.20.

    Returns:
        RiskAssessment with the level and its fixed guidance message.
    """
    gap = max(dpd, eod)

    if gap < thresholds.medium_gap:
        level = RiskLevel.LOW
    elif gap < thresholds.high_gap:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.HIGH

    return RiskAssessment(level=level, message=RISK_MESSAGES[level])
