"""
app/validators/row_cleaner.py

Row-level validation and cleaning for audit inputs.

Each raw row is checked in a fixed order and dropped at the first failing
check, so exactly one drop reason is recorded per excluded row:

    1. group       -> missing_group
    2. y_true      -> invalid_y_true
    3. y_pred      -> invalid_y_pred (label mode) / invalid_score (score mode)
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Sequence

from app.domain.audit import (
    ColumnRoles,
    DataQualitySummary,
    DropReason,
    PredictionMode,
    RawRow,
    Row,
)
from app.domain.errors import ColumnConfigurationError, InsufficientDataError
from app.logging_utils import log_event
from app.validators.label_normalizer import (
    Invalid,
    cell_text,
    normalize_binary_label,
    normalize_score,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_USABLE_ROWS = 10


@dataclass(frozen=True)
class CleaningResult:
    """
    Clean rows plus the accounting that explains what was dropped.
    """

    rows: list[Row]
    summary: DataQualitySummary
    min_rows: int = DEFAULT_MIN_USABLE_ROWS

    @property
    def is_sufficient(self) -> bool:
        return self.summary.used >= self.min_rows

    def raise_if_insufficient(self) -> "CleaningResult":
        """
        Raise InsufficientDataError (carrying the summary) when too few rows remain.
        """

        if not self.is_sufficient:
            raise InsufficientDataError(summary=self.summary, min_rows=self.min_rows)
        return self


class RowCleaner:
    """
    Normalizes raw rows into clean binary observations.
    """

    def __init__(
        self,
        *,
        min_usable_rows: int = DEFAULT_MIN_USABLE_ROWS,
        log_dropped_rows: bool = True,
    ) -> None:
        self._min_usable_rows = max(1, min_usable_rows)
        self._log_dropped_rows = log_dropped_rows

    def clean(
        self,
        raw_rows: Sequence[RawRow],
        roles: ColumnRoles,
        *,
        mode: PredictionMode | str = PredictionMode.LABEL,
        threshold: float = 0.5,
    ) -> CleaningResult:
        """
        Clean ``raw_rows`` using the selected column roles.

        Raises ColumnConfigurationError before touching any row when a role
        is unset. Never raises for bad cell values; those rows are counted.
        """

        validate_roles(roles)
        mode = PredictionMode(mode)

        cleaned: list[Row] = []
        reasons: Counter[str] = Counter()

        for row_index, raw_row in enumerate(raw_rows, start=1):
            row, reason = self._clean_row(raw_row, roles, mode=mode, threshold=threshold)
            if reason is not None:
                reasons[reason.value] += 1
                self._record_drop(row_index, reason, raw_row, roles)
                continue
            cleaned.append(row)

        uploaded = len(raw_rows)
        summary = DataQualitySummary(
            uploaded=uploaded,
            used=len(cleaned),
            dropped=uploaded - len(cleaned),
            reasons=dict(reasons),
        )
        log_event(
            logger,
            logging.INFO,
            "rows_cleaned",
            mode=mode.value,
            uploaded=summary.uploaded,
            used=summary.used,
            dropped=summary.dropped,
            reasons=summary.reasons,
        )
        return CleaningResult(
            rows=cleaned,
            summary=summary,
            min_rows=self._min_usable_rows,
        )

    def _clean_row(
        self,
        raw_row: RawRow,
        roles: ColumnRoles,
        *,
        mode: PredictionMode,
        threshold: float,
    ) -> tuple[Row | None, DropReason | None]:
        group = _extract_group(raw_row.get(roles.group_col))
        if not group:
            return None, DropReason.MISSING_GROUP

        y_true = normalize_binary_label(raw_row.get(roles.true_col))
        if isinstance(y_true, Invalid):
            return None, DropReason.INVALID_Y_TRUE

        if mode is PredictionMode.SCORE:
            score = normalize_score(raw_row.get(roles.pred_col))
            if isinstance(score, Invalid):
                return None, DropReason.INVALID_SCORE
            y_pred = 1 if score.value >= threshold else 0
        else:
            label = normalize_binary_label(raw_row.get(roles.pred_col))
            if isinstance(label, Invalid):
                return None, DropReason.INVALID_Y_PRED
            y_pred = label.value

        return Row(y_true=y_true.value, y_pred=y_pred, group=group), None

    def _record_drop(
        self,
        row_index: int,
        reason: DropReason,
        raw_row: RawRow,
        roles: ColumnRoles,
    ) -> None:
        if not self._log_dropped_rows:
            return
        column = {
            DropReason.MISSING_GROUP: roles.group_col,
            DropReason.INVALID_Y_TRUE: roles.true_col,
            DropReason.INVALID_Y_PRED: roles.pred_col,
            DropReason.INVALID_SCORE: roles.pred_col,
        }[reason]
        logger.warning(
            "Audit row dropped row=%s reason=%s column=%s value=%r",
            row_index,
            reason.value,
            column,
            raw_row.get(column),
        )


def validate_roles(roles: ColumnRoles) -> None:
    """
    Raise ColumnConfigurationError when any column role is unset.
    """

    missing = roles.missing_roles()
    if missing:
        raise ColumnConfigurationError(missing)


def clean_rows(
    raw_rows: Sequence[RawRow],
    roles: ColumnRoles,
    *,
    mode: PredictionMode | str = PredictionMode.LABEL,
    threshold: float = 0.5,
    min_usable_rows: int = DEFAULT_MIN_USABLE_ROWS,
) -> tuple[list[Row], DataQualitySummary]:
    """
    Clean rows and fail with InsufficientDataError when fewer than
    ``min_usable_rows`` survive.
    """

    result = RowCleaner(min_usable_rows=min_usable_rows).clean(
        raw_rows,
        roles,
        mode=mode,
        threshold=threshold,
    )
    result.raise_if_insufficient()
    return result.rows, result.summary


def _extract_group(value: Any) -> str:
    return cell_text(value)
