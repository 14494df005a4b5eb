"""
app/mappers/column_suggester.py

Best-effort suggestion of column roles from CSV headers.

Suggestions are a convenience for pre-filling a form. They are never
applied implicitly; the audit pipeline validates whatever roles the
caller finally submits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from app.domain.audit import PredictionMode

DEFAULT_ROLE_ALIASES: dict[str, tuple[str, ...]] = {
    "true_col": ("y_true", "label", "target", "income"),
    "pred_col": ("y_pred", "pred", "prediction", "score", "prob", "probability"),
    "group_col": ("group", "sex", "gender", "race"),
}

SCORE_HINTS: tuple[str, ...] = ("score", "prob", "probability")


@dataclass(frozen=True)
class ColumnSuggestion:
    """
    Suggested role assignment; any role may be None when nothing matched.
    """

    true_col: str | None
    pred_col: str | None
    group_col: str | None
    mode: PredictionMode


def normalize_header(header: str) -> str:
    return header.strip().lower()


def suggest_columns(
    headers: Sequence[str],
    *,
    aliases: Mapping[str, Sequence[str]] | None = None,
) -> ColumnSuggestion:
    """
    Suggest role columns by exact alias match on trimmed, lower-cased headers.

    For each role the first header (in header order) matching any alias wins.
    Score mode is suggested when the chosen prediction column name contains a
    score/probability hint.
    """

    role_aliases = aliases or DEFAULT_ROLE_ALIASES
    source_headers = [header for header in headers if header and header.strip()]

    resolved: dict[str, str | None] = {}
    for role, options in role_aliases.items():
        wanted = {normalize_header(option) for option in options}
        resolved[role] = next(
            (header for header in source_headers if normalize_header(header) in wanted),
            None,
        )

    pred_col = resolved.get("pred_col")
    mode = PredictionMode.LABEL
    if pred_col and any(hint in pred_col.lower() for hint in SCORE_HINTS):
        mode = PredictionMode.SCORE

    return ColumnSuggestion(
        true_col=resolved.get("true_col"),
        pred_col=pred_col,
        group_col=resolved.get("group_col"),
        mode=mode,
    )
