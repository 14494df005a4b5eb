"""
fairness/disparity.py

Reduces per-group rates to scalar gap metrics.

DPD = max(selection_rate) - min(selection_rate)
EOD = max(tpr) - min(tpr)

Both are 0.0 for a single group and undefined for zero groups.
"""

from __future__ import annotations

from typing import Callable, Sequence

from app.domain.audit import GroupMetrics
from app.domain.errors import EmptyMetricsError


def _spread(metrics: Sequence[GroupMetrics], rate: Callable[[GroupMetrics], float]) -> float:
    if not metrics:
        raise EmptyMetricsError()
    values = [rate(item) for item in metrics]
    return max(values) - min(values)


def demographic_parity_difference(metrics: Sequence[GroupMetrics]) -> float:
    """Largest inter-group gap in selection rate."""
    return _spread(metrics, lambda item: item.selection_rate)


def equal_opportunity_difference(metrics: Sequence[GroupMetrics]) -> float:
    """Largest inter-group gap in true positive rate."""
    return _spread(metrics, lambda item: item.tpr)
