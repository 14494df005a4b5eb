"""
app/domain package marker.
"""

from app.domain.audit import (
    AuditRequest,
    AuditResult,
    ColumnRoles,
    DataQualitySummary,
    DropReason,
    GroupMetrics,
    MergeResult,
    MergeStats,
    PredictionMode,
    RiskAssessment,
    RiskLevel,
    Row,
)
from app.domain.errors import (
    AuditError,
    ColumnConfigurationError,
    EmptyMetricsError,
    InsufficientDataError,
    MergeConfigurationError,
    UnknownDemoDatasetError,
)

__all__ = [
    "AuditError",
    "AuditRequest",
    "AuditResult",
    "ColumnConfigurationError",
    "ColumnRoles",
    "DataQualitySummary",
    "DropReason",
    "EmptyMetricsError",
    "GroupMetrics",
    "InsufficientDataError",
    "MergeConfigurationError",
    "MergeResult",
    "MergeStats",
    "PredictionMode",
    "RiskAssessment",
    "RiskLevel",
    "Row",
    "UnknownDemoDatasetError",
]
