from __future__ import annotations

import csv
import io

import pytest

from app.domain.audit import AuditRequest, ColumnRoles
from app.services.audit_service import AuditService
from app.services.report_export_service import ReportExportService


@pytest.fixture()
def exporter() -> ReportExportService:
    return ReportExportService()


def test_demo_export_has_one_row_per_group(exporter: ReportExportService) -> None:
    export = exporter.build_export(AuditService().run_demo("race"))

    assert [row["group"] for row in export.rows] == ["White", "Black", "Asian-Pac-Islander"]
    assert export.fields[:6] == ["group", "count", "selection_rate", "tpr", "fpr", "fnr"]
    assert "data_quality__used" not in export.fields
    assert all(row["risk_level"] == "High" for row in export.rows)


def test_export_flattens_data_quality(exporter: ReportExportService) -> None:
    rows = [{"y": "1", "p": "1", "g": "x"} for _ in range(10)] + [{"y": "1", "p": "1", "g": ""}]
    request = AuditRequest(roles=ColumnRoles(true_col="y", pred_col="p", group_col="g"))

    export = exporter.build_export(AuditService().run(request, rows))

    (row,) = export.rows
    assert row["data_quality__uploaded"] == 11
    assert row["data_quality__missing_group"] == 1
    assert row["dpd"] == 0.0


def test_csv_text_round_trips_through_reader(exporter: ReportExportService) -> None:
    text = exporter.to_csv(AuditService().run_demo("sex"))

    parsed = list(csv.DictReader(io.StringIO(text)))
    assert len(parsed) == 2
    assert parsed[0]["group"] == "Male"
    assert float(parsed[1]["selection_rate"]) == 0.0
