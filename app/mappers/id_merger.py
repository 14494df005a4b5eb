"""
app/mappers/id_merger.py

Left-joins two independently uploaded row sets on an identifier column.

Policies
--------
- Duplicate right-side ids: last write wins.
- Name collisions: right-side values overwrite left-side values.
- ``right_only`` is ``max(0, right_rows - matched)``. Duplicate right ids
  collapse before matching, so this undercounts true right-only rows
  whenever duplicates exist. The approximation is kept deliberately.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from app.domain.audit import MergeResult, MergeStats, RawRow
from app.domain.errors import MergeConfigurationError
from app.failure_codes import EMPTY_LEFT_ROWS, EMPTY_RIGHT_ROWS, MERGE_ID_UNSET
from app.logging_utils import log_event
from app.validators.label_normalizer import cell_text

logger = logging.getLogger(__name__)


def merge_on_id(
    left_rows: Sequence[RawRow],
    right_rows: Sequence[RawRow],
    left_id_col: str | None,
    right_id_col: str | None,
) -> MergeResult:
    """
    Join ``left_rows`` to ``right_rows`` where ``left[left_id_col] == right[right_id_col]``.

    Ids are compared as trimmed strings. Left rows without a match are
    excluded from ``merged`` and counted in ``left_only``.

    Raises:
        MergeConfigurationError: a side has no rows or an id column is unset.
    """

    _validate_merge_inputs(left_rows, right_rows, left_id_col, right_id_col)

    lookup: dict[str, RawRow] = {}
    for right_row in right_rows:
        key = _id_key(right_row.get(right_id_col))
        if key is None:
            continue
        lookup[key] = right_row

    merged: list[dict[str, Any]] = []
    matched = 0
    left_only = 0

    for left_row in left_rows:
        key = _id_key(left_row.get(left_id_col))
        right_row = lookup.get(key) if key is not None else None
        if right_row is None:
            left_only += 1
            continue

        matched += 1
        merged.append({**left_row, **right_row})

    stats = MergeStats(
        left_rows=len(left_rows),
        right_rows=len(right_rows),
        matched=matched,
        left_only=left_only,
        right_only=max(0, len(right_rows) - matched),
    )
    log_event(
        logger,
        logging.INFO,
        "merge_completed",
        left_id_col=left_id_col,
        right_id_col=right_id_col,
        distinct_right_ids=len(lookup),
        **stats.to_dict(),
    )
    return MergeResult(merged=merged, stats=stats)


def _validate_merge_inputs(
    left_rows: Sequence[RawRow],
    right_rows: Sequence[RawRow],
    left_id_col: str | None,
    right_id_col: str | None,
) -> None:
    if not left_rows:
        raise MergeConfigurationError(
            code=EMPTY_LEFT_ROWS,
            message="Left dataset contains no rows.",
        )
    if not right_rows:
        raise MergeConfigurationError(
            code=EMPTY_RIGHT_ROWS,
            message="Right dataset contains no rows.",
        )
    if not (left_id_col or "").strip() or not (right_id_col or "").strip():
        raise MergeConfigurationError(
            code=MERGE_ID_UNSET,
            message="Please select an ID column for both datasets.",
        )


def _id_key(value: Any) -> str | None:
    return cell_text(value) or None
