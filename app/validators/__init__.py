"""
app/validators package marker.
"""

from app.validators.label_normalizer import (
    INVALID,
    Invalid,
    Valid,
    cell_text,
    normalize_binary_label,
    normalize_score,
)
from app.validators.row_cleaner import CleaningResult, RowCleaner, clean_rows

__all__ = [
    "CleaningResult",
    "INVALID",
    "Invalid",
    "RowCleaner",
    "Valid",
    "cell_text",
    "clean_rows",
    "normalize_binary_label",
    "normalize_score",
]
