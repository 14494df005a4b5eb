"""
fairness/metrics.py

Per-group confusion-matrix rates for a binary classifier.

Formulas
--------
selection_rate = predicted positives / count
TPR            = TP / (TP + FN)
FPR            = FP / (FP + TN)
FNR            = FN / (TP + FN)

Any rate with a zero denominator is reported as 0.0 rather than NaN.
This keeps the output renderable; it is not a statistically rigorous
treatment of undefined rates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from app.domain.audit import GroupMetrics, Row


def safe_div(numerator: float, denominator: float) -> float:
    """Return numerator / denominator, or 0.0 when the denominator is zero."""
    return 0.0 if denominator == 0 else numerator / denominator


@dataclass
class _ConfusionCounts:
    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    @property
    def count(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def predicted_positive(self) -> int:
        return self.tp + self.fp

    def add(self, row: Row) -> None:
        if row.y_true == 1 and row.y_pred == 1:
            self.tp += 1
        elif row.y_true == 0 and row.y_pred == 0:
            self.tn += 1
        elif row.y_true == 0 and row.y_pred == 1:
            self.fp += 1
        else:
            self.fn += 1

    def to_metrics(self, group: str) -> GroupMetrics:
        return GroupMetrics(
            group=group,
            count=self.count,
            selection_rate=safe_div(self.predicted_positive, self.count),
            tpr=safe_div(self.tp, self.tp + self.fn),
            fpr=safe_div(self.fp, self.fp + self.tn),
            fnr=safe_div(self.fn, self.tp + self.fn),
        )


def compute_group_metrics(rows: Sequence[Row]) -> list[GroupMetrics]:
    """
    Compute metrics for every distinct group value.

    Groups are returned in order of first appearance in ``rows``.
    Returns an empty list for empty input.
    """

    counts: dict[str, _ConfusionCounts] = {}
    for row in rows:
        counts.setdefault(row.group, _ConfusionCounts()).add(row)
    return [group_counts.to_metrics(group) for group, group_counts in counts.items()]


def accuracy(rows: Sequence[Row]) -> float:
    """Fraction of rows where the prediction matches the ground truth (0.0 when empty)."""
    correct = sum(1 for row in rows if row.y_true == row.y_pred)
    return safe_div(correct, len(rows))
