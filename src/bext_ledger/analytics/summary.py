from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from ..ledger.models import Entry
from .totals import Totals


def net_savings(totals: Totals) -> Decimal:
    return totals.income - totals.expense


def budget_progress(totals: Totals) -> float:
    """Expense as a share of budget in percent, capped at 100."""
    if totals.budget <= 0:
        return 0.0
    pct = float(totals.expense / totals.budget * 100)
    return min(pct, 100.0)


def monthly_category_expenses(entries: Iterable[Entry]) -> dict[str, dict[str, Decimal]]:
    """
    YYYY-MM -> parent category -> spent amount, for dated expense entries.
    Months are chronological, categories alphabetical.
    """
    by_month: dict[str, dict[str, Decimal]] = defaultdict(lambda: defaultdict(Decimal))

    for e in entries:
        if e.kind != "expense" or e.timestamp is None or e.timestamp.at is None:
            continue
        month = e.timestamp.at.strftime("%Y-%m")
        for parent in e.categories:
            by_month[month][parent] += e.amount

    return {
        month: {cat: cats[cat] for cat in sorted(cats)}
        for month, cats in sorted(by_month.items())
    }
