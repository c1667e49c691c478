from .filters import FilterResult, InvalidFilterError, filter_entries
from .summary import budget_progress, monthly_category_expenses, net_savings
from .totals import TOTAL_KEY, NestedTotal, Totals, compute_totals

__all__ = [
    "FilterResult",
    "InvalidFilterError",
    "filter_entries",
    "budget_progress",
    "monthly_category_expenses",
    "net_savings",
    "TOTAL_KEY",
    "NestedTotal",
    "Totals",
    "compute_totals",
]
