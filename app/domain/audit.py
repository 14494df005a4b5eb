"""
app/domain/audit.py

Domain models used by the fairness audit pipeline.

Every model is transient: it is created by one pipeline stage, handed to the
next and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

RawRow = Mapping[str, Any]


class PredictionMode(str, Enum):
    """
    How the prediction column is interpreted.
    """

    LABEL = "label"
    SCORE = "score"


class DropReason(str, Enum):
    """
    Stable identifiers for rows excluded during cleaning.
    """

    MISSING_GROUP = "missing_group"
    INVALID_Y_TRUE = "invalid_y_true"
    INVALID_Y_PRED = "invalid_y_pred"
    INVALID_SCORE = "invalid_score"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Row:
    """
    One clean observation eligible for metric computation.
    """

    y_true: int
    y_pred: int
    group: str


@dataclass(frozen=True)
class GroupMetrics:
    """
    Confusion-matrix rates for one group value.
    """

    group: str
    count: int
    selection_rate: float
    tpr: float
    fpr: float
    fnr: float


@dataclass(frozen=True)
class DataQualitySummary:
    """
    Row accounting produced by the cleaner.

    ``uploaded == used + dropped`` and ``dropped == sum(reasons.values())``.
    """

    uploaded: int
    used: int
    dropped: int
    reasons: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uploaded": self.uploaded,
            "used": self.used,
            "dropped": self.dropped,
            "reasons": dict(self.reasons),
        }


@dataclass(frozen=True)
class MergeStats:
    left_rows: int
    right_rows: int
    matched: int
    left_only: int
    right_only: int

    def to_dict(self) -> dict[str, int]:
        return {
            "leftRows": self.left_rows,
            "rightRows": self.right_rows,
            "matched": self.matched,
            "leftOnly": self.left_only,
            "rightOnly": self.right_only,
        }


@dataclass(frozen=True)
class MergeResult:
    merged: list[dict[str, Any]]
    stats: MergeStats


@dataclass(frozen=True)
class RiskAssessment:
    """
    Risk tier plus the fixed guidance message attached to it.
    """

    level: RiskLevel
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"level": self.level.value, "message": self.message}


@dataclass(frozen=True)
class ColumnRoles:
    """
    Caller-selected columns for the ground truth, prediction/score and group.
    """

    true_col: str
    pred_col: str
    group_col: str

    def missing_roles(self) -> list[str]:
        """
        Return the names of roles that are unset or blank.
        """

        missing: list[str] = []
        for role, column in (
            ("true_col", self.true_col),
            ("pred_col", self.pred_col),
            ("group_col", self.group_col),
        ):
            if column is None or not str(column).strip():
                missing.append(role)
        return missing


@dataclass(frozen=True)
class AuditRequest:
    """
    Immutable configuration for one audit run.

    ``left_id_col`` and ``right_id_col`` are only consulted when a second
    row set is supplied for merging.
    """

    roles: ColumnRoles
    mode: PredictionMode = PredictionMode.LABEL
    threshold: float = 0.5
    left_id_col: str | None = None
    right_id_col: str | None = None


@dataclass(frozen=True)
class AuditResult:
    """
    Output payload consumed by reporting and rendering layers.
    """

    group_metrics: list[GroupMetrics]
    dpd: float
    eod: float
    accuracy: float
    risk: RiskAssessment
    data_quality: DataQualitySummary | None = None
    merge_stats: MergeStats | None = None
