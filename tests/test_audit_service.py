"""
tests/test_audit_service.py

Pytest tests for the end-to-end audit pipeline.

Coverage
--------
- Demo audits (sex, race)
- Upload audit in label and score mode
- Merge + audit with merge stats attached
- Configuration errors raised before processing
- Insufficient rows keep the data quality summary
- Statelessness across runs
"""

from __future__ import annotations

import pytest

from app.domain.audit import AuditRequest, ColumnRoles, PredictionMode, RiskLevel
from app.domain.errors import (
    ColumnConfigurationError,
    InsufficientDataError,
    MergeConfigurationError,
    UnknownDemoDatasetError,
)
from app.services.audit_service import AuditService
from app.validators.row_cleaner import RowCleaner
from risk.classifier import RiskThresholds


@pytest.fixture()
def svc() -> AuditService:
    return AuditService(cleaner=RowCleaner(log_dropped_rows=False))


def _request(**overrides) -> AuditRequest:
    params = {
        "roles": ColumnRoles(true_col="income", pred_col="pred", group_col="sex"),
        "mode": PredictionMode.LABEL,
        "threshold": 0.5,
    }
    params.update(overrides)
    return AuditRequest(**params)


def _uploaded_rows() -> list[dict]:
    rows = []
    for _ in range(6):
        rows.append({"income": ">50K", "pred": "1", "sex": "Male"})
        rows.append({"income": ">50K", "pred": "1", "sex": "Female"})
    for _ in range(4):
        rows.append({"income": "<=50K", "pred": "0", "sex": "Male"})
        rows.append({"income": "<=50K", "pred": "0", "sex": "Female"})
    rows.append({"income": "unknown", "pred": "1", "sex": "Female"})
    rows.append({"income": "1", "pred": "1", "sex": ""})
    return rows


class TestDemoAudit:
    def test_sex_demo(self, svc: AuditService) -> None:
        result = svc.run_demo("sex")

        assert [item.group for item in result.group_metrics] == ["Male", "Female"]
        assert result.dpd == pytest.approx(0.5)
        assert result.eod == pytest.approx(2 / 3)
        assert result.accuracy == pytest.approx(7 / 11)
        assert result.risk.level is RiskLevel.HIGH
        assert result.data_quality is None
        assert result.merge_stats is None

    def test_race_demo(self, svc: AuditService) -> None:
        result = svc.run_demo("Race")

        assert [item.group for item in result.group_metrics] == ["White", "Black", "Asian-Pac-Islander"]
        assert result.eod == pytest.approx(1.0)
        assert result.risk.level is RiskLevel.HIGH

    def test_unknown_demo(self, svc: AuditService) -> None:
        with pytest.raises(UnknownDemoDatasetError):
            svc.run_demo("age")


class TestUploadAudit:
    def test_label_mode_with_dropped_rows(self, svc: AuditService) -> None:
        result = svc.run(_request(), _uploaded_rows())

        assert result.data_quality is not None
        assert result.data_quality.uploaded == 22
        assert result.data_quality.used == 20
        assert result.data_quality.reasons == {"invalid_y_true": 1, "missing_group": 1}
        assert result.dpd == 0.0
        assert result.eod == 0.0
        assert result.accuracy == 1.0
        assert result.risk.level is RiskLevel.LOW

    def test_score_mode_applies_threshold(self, svc: AuditService) -> None:
        rows = [{"y": "1", "p": "0.7", "g": "A"} for _ in range(5)]
        rows += [{"y": "1", "p": "0.3", "g": "B"} for _ in range(5)]
        request = _request(
            roles=ColumnRoles(true_col="y", pred_col="p", group_col="g"),
            mode=PredictionMode.SCORE,
            threshold=0.5,
        )

        result = svc.run(request, rows)

        by_group = {item.group: item for item in result.group_metrics}
        assert by_group["A"].selection_rate == 1.0
        assert by_group["B"].selection_rate == 0.0
        assert result.dpd == 1.0

    def test_custom_risk_thresholds(self) -> None:
        svc = AuditService(risk_thresholds=RiskThresholds(medium_gap=0.6, high_gap=0.9))
        assert svc.run_demo("sex").risk.level is RiskLevel.MEDIUM

    def test_runs_are_independent(self, svc: AuditService) -> None:
        first = svc.run(_request(), _uploaded_rows())
        svc.run_demo("race")
        second = svc.run(_request(), _uploaded_rows())
        assert first == second


class TestMergedAudit:
    def test_merge_then_audit(self, svc: AuditService) -> None:
        labels = [{"id": str(i), "income": str(i % 2), "sex": "M" if i < 6 else "F"} for i in range(12)]
        preds = [{"pid": str(i), "pred": str(i % 2)} for i in range(10)]
        request = _request(left_id_col="id", right_id_col="pid")

        result = svc.run(request, labels, preds)

        assert result.merge_stats is not None
        assert result.merge_stats.matched == 10
        assert result.merge_stats.left_only == 2
        assert result.merge_stats.right_only == 0
        assert result.data_quality is not None
        assert result.data_quality.uploaded == 10
        assert result.accuracy == 1.0

    def test_merge_without_id_columns_fails(self, svc: AuditService) -> None:
        with pytest.raises(MergeConfigurationError):
            svc.run(_request(), [{"id": 1}], [{"id": 1}])

    def test_empty_right_side_fails(self, svc: AuditService) -> None:
        with pytest.raises(MergeConfigurationError) as ctx:
            svc.run(_request(left_id_col="id", right_id_col="id"), [{"id": 1}], [])
        assert ctx.value.code == "empty_right_rows"


class TestFailures:
    def test_unset_role_fails_before_merge(self, svc: AuditService) -> None:
        request = _request(roles=ColumnRoles(true_col="income", pred_col="", group_col="sex"))
        with pytest.raises(ColumnConfigurationError):
            svc.run(request, [], [])

    def test_insufficient_rows_surface_summary(self, svc: AuditService) -> None:
        rows = _uploaded_rows()[:9]
        with pytest.raises(InsufficientDataError) as ctx:
            svc.run(_request(), rows)
        assert ctx.value.summary.uploaded == 9
        assert ctx.value.summary.used == 9
        assert ctx.value.code == "insufficient_usable_rows"
