"""
app/schemas package marker.
"""

from app.schemas.audit import (
    AuditRequestModel,
    AuditResponse,
    DataQualityResponse,
    GroupMetricsResponse,
    MergeStatsResponse,
    RiskResponse,
)

__all__ = [
    "AuditRequestModel",
    "AuditResponse",
    "DataQualityResponse",
    "GroupMetricsResponse",
    "MergeStatsResponse",
    "RiskResponse",
]
