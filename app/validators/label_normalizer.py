"""
app/validators/label_normalizer.py

Coercion of raw tabular cells into binary labels and numeric scores.

Both functions return a tagged result: ``Valid(value)`` or ``INVALID``.
Callers branch on the tag instead of relying on falsy or NaN checks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

_TRUE_TOKENS = frozenset({"1", "true"})
_FALSE_TOKENS = frozenset({"0", "false"})


@dataclass(frozen=True)
class Valid:
    """
    A successfully normalized value.
    """

    value: Any


@dataclass(frozen=True)
class Invalid:
    """
    Marker for a value that could not be normalized.
    """


INVALID = Invalid()

NormalizedValue = Union[Valid, Invalid]


def normalize_binary_label(raw: Any) -> NormalizedValue:
    """
    Convert an arbitrary label encoding into ``Valid(0)``, ``Valid(1)`` or ``INVALID``.

    Rules, in order, on the trimmed string form:
      1. ``"1"``/``"true"`` -> 1, ``"0"``/``"false"`` -> 0 (case-insensitive).
      2. Contains ``>`` -> 1, contains ``<`` -> 0 (income-style ``>50K``/``<=50K``).
      3. Numeric value exactly 0 or 1 -> that value; anything else is invalid.
    """

    if raw is None:
        return INVALID

    text = str(raw).strip()
    lowered = text.lower()

    if lowered in _TRUE_TOKENS:
        return Valid(1)
    if lowered in _FALSE_TOKENS:
        return Valid(0)

    if ">" in text:
        return Valid(1)
    if "<" in text:
        return Valid(0)

    number = _parse_number(text)
    if number == 1:
        return Valid(1)
    if number == 0:
        return Valid(0)
    return INVALID


def normalize_score(raw: Any) -> NormalizedValue:
    """
    Parse a prediction score.

    Any finite number is accepted; no range clamp is applied.
    """

    if raw is None:
        return INVALID

    number = _parse_number(str(raw).strip())
    if number is None or not math.isfinite(number):
        return INVALID
    return Valid(number)


def cell_text(value: Any) -> str:
    """
    Render a raw cell as trimmed text; integral floats drop their ``.0``.

    pandas widens an int column with a missing cell to float, so ``1.0``
    must still read as ``"1"`` when used as an id or group key.
    """

    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _parse_number(text: str) -> float | None:
    # float() accepts "1_000"; tabular cells never mean that.
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None
