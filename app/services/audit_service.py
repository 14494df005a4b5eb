"""
app/services/audit_service.py

Pure fairness audit pipeline.

Stages, in order:

    1. merge_on_id()                    - only when a second row set is supplied
    2. RowCleaner.clean()               - normalization + drop accounting
    3. compute_group_metrics()          - per-group confusion rates
    4. demographic_parity_difference()  - selection-rate gap
       equal_opportunity_difference()   - TPR gap
    5. classify()                       - Low / Medium / High

No stage keeps state between runs. Configuration errors are raised before
any row is processed; rows that fail normalization are counted, never raised.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from app.config import get_audit_settings
from app.domain.audit import (
    AuditRequest,
    AuditResult,
    DataQualitySummary,
    MergeStats,
    RawRow,
    Row,
)
from app.domain.demo_datasets import get_demo_rows
from app.domain.errors import InsufficientDataError
from app.logging_utils import log_event
from app.mappers.id_merger import merge_on_id
from app.validators.row_cleaner import RowCleaner, validate_roles
from fairness.disparity import demographic_parity_difference, equal_opportunity_difference
from fairness.metrics import accuracy, compute_group_metrics
from risk.classifier import RiskThresholds, classify

logger = logging.getLogger(__name__)


class AuditService:
    """
    Coordinates merging, cleaning, metric computation and risk classification.
    """

    def __init__(
        self,
        *,
        cleaner: RowCleaner | None = None,
        risk_thresholds: RiskThresholds | None = None,
    ) -> None:
        self._cleaner = cleaner or RowCleaner()
        self._risk_thresholds = risk_thresholds or RiskThresholds()

    def run(
        self,
        request: AuditRequest,
        rows: Sequence[RawRow],
        right_rows: Sequence[RawRow] | None = None,
    ) -> AuditResult:
        """
        Audit ``rows`` (optionally joined with ``right_rows``) under ``request``.

        Raises:
            ColumnConfigurationError: a column role is unset.
            MergeConfigurationError: merging was requested without rows or id columns.
            InsufficientDataError: too few rows survived cleaning; carries the summary.
        """

        validate_roles(request.roles)

        merge_stats: MergeStats | None = None
        source_rows: Sequence[RawRow] = rows
        if right_rows is not None:
            merge = merge_on_id(
                rows,
                right_rows,
                request.left_id_col,
                request.right_id_col,
            )
            source_rows = merge.merged
            merge_stats = merge.stats

        cleaning = self._cleaner.clean(
            source_rows,
            request.roles,
            mode=request.mode,
            threshold=request.threshold,
        )
        try:
            cleaning.raise_if_insufficient()
        except InsufficientDataError as exc:
            log_event(
                logger,
                logging.WARNING,
                "audit_rejected",
                code=exc.code,
                used=exc.summary.used,
                min_rows=exc.min_rows,
            )
            raise

        return self._evaluate(
            cleaning.rows,
            data_quality=cleaning.summary,
            merge_stats=merge_stats,
        )

    def run_demo(self, name: str) -> AuditResult:
        """
        Audit one of the bundled demo datasets. Demo rows are already clean,
        so no data quality summary is attached.
        """

        return self._evaluate(get_demo_rows(name))

    def _evaluate(
        self,
        rows: Sequence[Row],
        *,
        data_quality: DataQualitySummary | None = None,
        merge_stats: MergeStats | None = None,
    ) -> AuditResult:
        group_metrics = compute_group_metrics(rows)
        dpd = demographic_parity_difference(group_metrics)
        eod = equal_opportunity_difference(group_metrics)
        risk = classify(dpd, eod, self._risk_thresholds)
        overall_accuracy = accuracy(rows)

        log_event(
            logger,
            logging.INFO,
            "audit_completed",
            groups=len(group_metrics),
            rows=len(rows),
            dpd=round(dpd, 4),
            eod=round(eod, 4),
            accuracy=round(overall_accuracy, 4),
            risk_level=risk.level.value,
        )

        return AuditResult(
            group_metrics=group_metrics,
            dpd=dpd,
            eod=eod,
            accuracy=overall_accuracy,
            risk=risk,
            data_quality=data_quality,
            merge_stats=merge_stats,
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_audit_service() -> AuditService:
    """
    Build and cache the audit service with env-driven settings.
    """
    settings = get_audit_settings()
    return AuditService(
        cleaner=RowCleaner(
            min_usable_rows=settings.min_usable_rows,
            log_dropped_rows=settings.log_dropped_rows,
        ),
        risk_thresholds=RiskThresholds(
            medium_gap=settings.risk_medium_gap,
            high_gap=settings.risk_high_gap,
        ),
    )
