"""
app/schemas/audit.py

Request and response schemas for audit runs.

Response field names are camelCase because the payload is consumed as-is
by the reporting layer.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.audit import AuditRequest, AuditResult, ColumnRoles, PredictionMode


class AuditRequestModel(BaseModel):
    """
    Caller-supplied audit configuration.

    Column roles default to empty so that an unset role surfaces as the
    pipeline's column configuration error rather than a schema error.
    The threshold default is fixed at 0.5; AUDIT_DEFAULT_THRESHOLD only
    seeds the CLI flag.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    true_col: str = ""
    pred_col: str = ""
    group_col: str = ""
    mode: Literal["label", "score"] = "label"
    threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    left_id_col: str | None = None
    right_id_col: str | None = None

    def to_domain(self) -> AuditRequest:
        return AuditRequest(
            roles=ColumnRoles(
                true_col=self.true_col,
                pred_col=self.pred_col,
                group_col=self.group_col,
            ),
            mode=PredictionMode(self.mode),
            threshold=self.threshold,
            left_id_col=self.left_id_col or None,
            right_id_col=self.right_id_col or None,
        )


class GroupMetricsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    group: str = Field(min_length=1)
    count: int = Field(ge=1)
    selection_rate: float = Field(alias="selectionRate", ge=0.0, le=1.0)
    tpr: float = Field(ge=0.0, le=1.0)
    fpr: float = Field(ge=0.0, le=1.0)
    fnr: float = Field(ge=0.0, le=1.0)


class RiskResponse(BaseModel):
    level: Literal["Low", "Medium", "High"]
    message: str = Field(min_length=1)


class DataQualityResponse(BaseModel):
    uploaded: int = Field(ge=0)
    used: int = Field(ge=0)
    dropped: int = Field(ge=0)
    reasons: dict[str, int] = Field(default_factory=dict)


class MergeStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    left_rows: int = Field(alias="leftRows", ge=0)
    right_rows: int = Field(alias="rightRows", ge=0)
    matched: int = Field(ge=0)
    left_only: int = Field(alias="leftOnly", ge=0)
    right_only: int = Field(alias="rightOnly", ge=0)


class AuditResponse(BaseModel):
    """
    Output payload of one audit run.
    """

    model_config = ConfigDict(populate_by_name=True)

    group_metrics: list[GroupMetricsResponse] = Field(alias="groupMetrics")
    dpd: float = Field(ge=0.0, le=1.0)
    eod: float = Field(ge=0.0, le=1.0)
    accuracy: float = Field(ge=0.0, le=1.0)
    risk: RiskResponse
    data_quality: DataQualityResponse | None = Field(default=None, alias="dataQuality")
    merge_stats: MergeStatsResponse | None = Field(default=None, alias="mergeStats")

    @classmethod
    def from_result(cls, result: AuditResult) -> "AuditResponse":
        data_quality = None
        if result.data_quality is not None:
            data_quality = DataQualityResponse(**result.data_quality.to_dict())

        merge_stats = None
        if result.merge_stats is not None:
            merge_stats = MergeStatsResponse(**result.merge_stats.to_dict())

        return cls(
            group_metrics=[
                GroupMetricsResponse(
                    group=item.group,
                    count=item.count,
                    selection_rate=item.selection_rate,
                    tpr=item.tpr,
                    fpr=item.fpr,
                    fnr=item.fnr,
                )
                for item in result.group_metrics
            ],
            dpd=result.dpd,
            eod=result.eod,
            accuracy=result.accuracy,
            risk=RiskResponse(**result.risk.to_dict()),
            data_quality=data_quality,
            merge_stats=merge_stats,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
