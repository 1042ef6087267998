"""Domain layer for cashbook application.

Only the pure ledger functions are re-exported here. The services live in
``cashbook.domain.entry`` and ``cashbook.domain.reports`` and are imported
from there, since they depend on the database layer.
"""

from cashbook.domain.aggregation import (
    category_chart_slices,
    category_totals,
    signed_value,
    summarize,
)
from cashbook.domain.export import to_delimited_text
from cashbook.domain.filtering import filter_entries
from cashbook.domain.series import daily_series

__all__ = [
    "category_chart_slices",
    "category_totals",
    "daily_series",
    "filter_entries",
    "signed_value",
    "summarize",
    "to_delimited_text",
]
