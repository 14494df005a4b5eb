"""
app/domain/errors.py

Audit-level exceptions.

Only configuration and precondition violations raise. Rows that fail
normalization are counted in the data quality summary instead.
"""

from __future__ import annotations

from typing import Any, Sequence

from app.domain.audit import DataQualitySummary
from app.failure_codes import (
    COLUMN_ROLE_UNSET,
    INSUFFICIENT_USABLE_ROWS,
    NO_GROUPS,
    UNKNOWN_DEMO_DATASET,
)


class AuditError(ValueError):
    """Base exception for audit failures that stop a run."""

    code: str = "audit_error"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class ColumnConfigurationError(AuditError):
    """
    Raised when a required column role is unset.
    """

    code = COLUMN_ROLE_UNSET

    def __init__(self, missing_roles: Sequence[str]) -> None:
        self.missing_roles = tuple(missing_roles)
        roles = ", ".join(self.missing_roles)
        super().__init__(
            f"Please select columns for y_true, y_pred/score, and group. Unset roles: {roles}."
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["missing_roles"] = list(self.missing_roles)
        return payload


class InsufficientDataError(AuditError):
    """
    Raised when too few rows survive cleaning to compute metrics.

    The computed summary travels with the error so callers can show why.
    """

    code = INSUFFICIENT_USABLE_ROWS

    def __init__(self, *, summary: DataQualitySummary, min_rows: int) -> None:
        super().__init__(
            f"Not enough usable rows after cleaning: {summary.used} < {min_rows}."
        )
        self.summary = summary
        self.min_rows = min_rows

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["data_quality"] = self.summary.to_dict()
        payload["min_rows"] = self.min_rows
        return payload


class MergeConfigurationError(AuditError):
    """
    Raised when a merge cannot start: a side has no rows or an id column is unset.
    """

    def __init__(self, *, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class EmptyMetricsError(AuditError):
    """Raised when disparity is requested over zero groups."""

    code = NO_GROUPS

    def __init__(self) -> None:
        super().__init__("Disparity metrics require at least one group.")


class UnknownDemoDatasetError(AuditError):
    """Raised when a demo dataset name is not registered."""

    code = UNKNOWN_DEMO_DATASET

    def __init__(self, name: str, available: Sequence[str]) -> None:
        super().__init__(
            f"Unknown demo dataset '{name}'. Available: {', '.join(sorted(available))}."
        )
        self.name = name
