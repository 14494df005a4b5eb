"""
app/services/report_export_service.py

Flattens an audit result into tabular rows for CSV or spreadsheet consumption.

One row per group. Audit-level values (dpd, eod, accuracy, risk) are
repeated on every row so each row is self-describing; data quality and
merge counts are flattened with double-underscore prefixes
(e.g. ``data_quality__used``, ``merge__matched``).

No file or download handling lives here; callers decide where text goes.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Any

from app.domain.audit import AuditResult


@dataclass
class ExportResult:
    """
    Flat tabular data ready for CSV or JSON serialisation.

    Attributes
    ----------
    rows:   Flat dict per row; all values are JSON-safe scalars.
    fields: Ordered column names; deterministic for the same result shape.
    """

    rows: list[dict[str, Any]] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)


def _collect_fields(rows: list[dict[str, Any]]) -> list[str]:
    """
    Union all keys across rows while preserving first-seen insertion order.
    """
    seen: dict[str, None] = {}
    for row in rows:
        for k in row:
            seen.setdefault(k, None)
    return list(seen)


class ReportExportService:
    """
    Converts AuditResult objects into flat exports.
    """

    def build_export(self, result: AuditResult) -> ExportResult:
        shared: dict[str, Any] = {
            "dpd": result.dpd,
            "eod": result.eod,
            "accuracy": result.accuracy,
            "risk_level": result.risk.level.value,
            "risk_message": result.risk.message,
        }
        if result.data_quality is not None:
            summary = result.data_quality
            shared["data_quality__uploaded"] = summary.uploaded
            shared["data_quality__used"] = summary.used
            shared["data_quality__dropped"] = summary.dropped
            for reason, count in sorted(summary.reasons.items()):
                shared[f"data_quality__{reason}"] = count
        if result.merge_stats is not None:
            stats = result.merge_stats
            shared["merge__left_rows"] = stats.left_rows
            shared["merge__right_rows"] = stats.right_rows
            shared["merge__matched"] = stats.matched
            shared["merge__left_only"] = stats.left_only
            shared["merge__right_only"] = stats.right_only

        rows = [
            {
                "group": item.group,
                "count": item.count,
                "selection_rate": item.selection_rate,
                "tpr": item.tpr,
                "fpr": item.fpr,
                "fnr": item.fnr,
                **shared,
            }
            for item in result.group_metrics
        ]
        return ExportResult(rows=rows, fields=_collect_fields(rows))

    def to_csv(self, result: AuditResult) -> str:
        """
        Render the flat export as CSV text with a header row.
        """
        export = self.build_export(result)
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=export.fields, lineterminator="\n")
        writer.writeheader()
        writer.writerows(export.rows)
        return buffer.getvalue()
