"""
app/domain/demo_datasets.py

Small illustrative row sets used to exercise the audit without an upload.
"""

from __future__ import annotations

from app.domain.audit import Row
from app.domain.errors import UnknownDemoDatasetError

DEMO_SEX_ROWS: tuple[Row, ...] = (
    Row(y_true=1, y_pred=1, group="Male"),
    Row(y_true=1, y_pred=1, group="Male"),
    Row(y_true=1, y_pred=0, group="Male"),
    Row(y_true=0, y_pred=1, group="Male"),
    Row(y_true=0, y_pred=0, group="Male"),
    Row(y_true=0, y_pred=0, group="Male"),
    Row(y_true=1, y_pred=0, group="Female"),
    Row(y_true=1, y_pred=0, group="Female"),
    Row(y_true=0, y_pred=0, group="Female"),
    Row(y_true=0, y_pred=0, group="Female"),
    Row(y_true=0, y_pred=0, group="Female"),
)

DEMO_RACE_ROWS: tuple[Row, ...] = (
    Row(y_true=1, y_pred=1, group="White"),
    Row(y_true=1, y_pred=1, group="White"),
    Row(y_true=1, y_pred=0, group="White"),
    Row(y_true=0, y_pred=1, group="White"),
    Row(y_true=0, y_pred=0, group="White"),
    Row(y_true=1, y_pred=0, group="Black"),
    Row(y_true=1, y_pred=0, group="Black"),
    Row(y_true=0, y_pred=0, group="Black"),
    Row(y_true=0, y_pred=0, group="Black"),
    Row(y_true=1, y_pred=1, group="Asian-Pac-Islander"),
    Row(y_true=1, y_pred=1, group="Asian-Pac-Islander"),
    Row(y_true=0, y_pred=1, group="Asian-Pac-Islander"),
    Row(y_true=0, y_pred=0, group="Asian-Pac-Islander"),
)

DEMO_DATASETS: dict[str, tuple[Row, ...]] = {
    "sex": DEMO_SEX_ROWS,
    "race": DEMO_RACE_ROWS,
}


def get_demo_rows(name: str) -> list[Row]:
    """
    Return a fresh list of clean rows for the named demo dataset.
    """

    key = name.strip().lower()
    if key not in DEMO_DATASETS:
        raise UnknownDemoDatasetError(name, available=tuple(DEMO_DATASETS))
    return list(DEMO_DATASETS[key])
