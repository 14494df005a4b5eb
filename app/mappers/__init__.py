"""
app/mappers package marker.
"""

from app.mappers.column_suggester import ColumnSuggestion, suggest_columns
from app.mappers.id_merger import merge_on_id

__all__ = [
    "ColumnSuggestion",
    "merge_on_id",
    "suggest_columns",
]
