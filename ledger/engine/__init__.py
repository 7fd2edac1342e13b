from .pipeline import (
    apply_filters,
    matches_filters,
    sort_transactions,
    count_active_filters,
)
from .stats import calculate_stats, completed_total

__all__ = [
    "apply_filters",
    "matches_filters",
    "sort_transactions",
    "count_active_filters",
    "calculate_stats",
    "completed_total",
]
