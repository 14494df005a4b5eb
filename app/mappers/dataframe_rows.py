"""
app/mappers/dataframe_rows.py

Adapter from a pandas DataFrame to the raw row mappings the audit consumes.
"""

from __future__ import annotations

from typing import Any

import pandas as pd


def dataframe_to_rows(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Convert ``frame`` into one dict per row keyed by column name.

    Missing cells (NaN, NA, NaT) become None so they are treated as blank.
    Columns with empty names are dropped.
    """

    columns = [column for column in frame.columns if str(column).strip()]
    subset = frame.loc[:, columns].astype(object)
    subset = subset.where(pd.notna(subset), None)
    return [
        {str(column): value for column, value in zip(columns, values)}
        for values in subset.itertuples(index=False, name=None)
    ]
