from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Iterable

from .analytics.filters import FilterResult
from .analytics.summary import budget_progress, monthly_category_expenses, net_savings
from .analytics.totals import NestedTotal, Totals
from .ledger.models import Entry, Hierarchy

FLAT_KEY = ":flat"


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def hierarchy_to_dict(hierarchy: Hierarchy) -> dict[str, Any]:
    # flat labels render as `true`, labels with children as {child: true};
    # a label used both ways also carries `":flat": true`
    out: dict[str, Any] = {}
    for parent, node in hierarchy.items():
        if node.children:
            children: dict[str, Any] = {FLAT_KEY: True} if node.flat else {}
            children.update((child, True) for child in sorted(node.children))
            out[parent] = children
        else:
            out[parent] = True
    return out


def hierarchy_labels(hierarchy: Hierarchy) -> list[str]:
    labels: list[str] = []
    for parent, node in hierarchy.items():
        if node.flat:
            labels.append(parent)
        labels.extend(f"{parent}>{child}" for child in sorted(node.children))
    return labels


def entry_to_dict(e: Entry) -> dict[str, Any]:
    return {
        "type": e.sign,
        "amount": e.amount,
        "budget": e.budget,
        "accounts": hierarchy_to_dict(e.accounts),
        "persons": list(e.persons),
        "categories": hierarchy_to_dict(e.categories),
        "remarks": e.remarks,
        "method": e.method,
        "timestamp": e.timestamp.text if e.timestamp else None,
    }


def filter_result_to_dict(result: FilterResult) -> dict[str, Any]:
    return {
        "filter": result.filter,
        "totals": result.totals.to_dict(),
        "transactions": [entry_to_dict(e) for e in result.entries],
    }


def to_json(payload: Any) -> str:
    if isinstance(payload, Totals):
        payload = payload.to_dict()
    elif isinstance(payload, FilterResult):
        payload = filter_result_to_dict(payload)
    return json.dumps(payload, ensure_ascii=False, indent=4, default=_json_default)


def money(value: Decimal, currency: str = "") -> str:
    return f"{currency}{value:.2f}"


def section(title: str, lines: Iterable[str]) -> str:
    body = "\n".join(line for line in lines if line)
    return f"{title}:\n{body}".rstrip()


def bullets(items: dict[str, Decimal], currency: str = "", *, prefix: str = "- ") -> list[str]:
    return [f"{prefix}{k}: {money(v, currency)}" for k, v in items.items()]


def nested_lines(totals: dict[str, NestedTotal], currency: str = "") -> list[str]:
    lines: list[str] = []
    for parent, bucket in totals.items():
        lines.append(f"- {parent}: {money(bucket.total, currency)}")
        lines.extend(bullets(bucket.children, currency, prefix="  - "))
    return lines


def headline(totals: Totals, currency: str = "") -> list[str]:
    return [
        f"Total Income: {money(totals.income, currency)}",
        f"Total Expense: {money(totals.expense, currency)}",
        f"Total Budget: {money(totals.budget, currency)}",
    ]


def totals_text(totals: Totals, currency: str = "") -> str:
    parts = [
        "\n".join(headline(totals, currency)),
        section("Category Totals", nested_lines(totals.category, currency)),
        section("Account Totals", nested_lines(totals.account, currency)),
        section("Person Totals", bullets(totals.person, currency)),
        section("Payment Method Totals", bullets(totals.method, currency)),
        section("Budget Category Totals", nested_lines(totals.budget_category, currency)),
        section("Budget Person Totals", bullets(totals.budget_person, currency)),
        section("Budget Account Totals", nested_lines(totals.budget_account, currency)),
    ]
    return "\n\n".join(parts) + "\n"


def entry_line(e: Entry) -> str:
    value = e.budget if e.kind == "budget" else e.amount
    return (
        f"-> {e.sign or '?'} {value} @{';'.join(e.persons)} "
        f"#{';'.join(hierarchy_labels(e.categories))} ?{e.remarks}"
    )


def filter_result_text(result: FilterResult, currency: str = "") -> str:
    lines = [f"Transactions for {result.filter}:"]
    lines.extend(entry_line(e) for e in result.entries)
    return "\n".join(lines) + "\n\nTotals:\n" + "\n".join(headline(result.totals, currency)) + "\n"


def summary_to_dict(totals: Totals, entries: list[Entry]) -> dict[str, Any]:
    return {
        "income": totals.income,
        "expense": totals.expense,
        "budget": totals.budget,
        "net_savings": net_savings(totals),
        "budget_progress_pct": round(budget_progress(totals), 2),
        "monthly_category_expenses": monthly_category_expenses(entries),
    }


def summary_text(totals: Totals, entries: list[Entry], currency: str = "") -> str:
    data = summary_to_dict(totals, entries)
    lines = headline(totals, currency)
    lines.append(f"Net Savings: {money(data['net_savings'], currency)}")
    lines.append(f"Budget Used: {data['budget_progress_pct']:.1f}%")

    monthly: list[str] = []
    for month, cats in data["monthly_category_expenses"].items():
        monthly.append(f"- {month}")
        monthly.extend(bullets(cats, currency, prefix="  - "))

    return "\n".join(lines) + "\n\n" + section("Monthly Expenses by Category", monthly) + "\n"
