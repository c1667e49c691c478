from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable

from ..ledger.models import DEFAULT_LABEL, Entry, Hierarchy

TOTAL_KEY = ":total"


@dataclass
class NestedTotal:
    """Parent-level sum plus per-child sums of one hierarchy label."""

    total: Decimal = Decimal(0)
    children: dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Decimal]:
        out = {TOTAL_KEY: self.total}
        out.update(self.children)
        return out


@dataclass
class Totals:
    income: Decimal = Decimal(0)
    expense: Decimal = Decimal(0)
    budget: Decimal = Decimal(0)
    category: dict[str, NestedTotal] = field(default_factory=dict)
    account: dict[str, NestedTotal] = field(default_factory=dict)
    person: dict[str, Decimal] = field(default_factory=dict)
    method: dict[str, Decimal] = field(default_factory=dict)
    budget_category: dict[str, NestedTotal] = field(default_factory=dict)
    budget_person: dict[str, Decimal] = field(default_factory=dict)
    budget_account: dict[str, NestedTotal] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        def nested(m: dict[str, NestedTotal]) -> dict[str, Any]:
            return {k: v.to_dict() for k, v in m.items()}

        return {
            "income": self.income,
            "expense": self.expense,
            "budget": self.budget,
            "category": nested(self.category),
            "person": dict(self.person),
            "account": nested(self.account),
            "method": dict(self.method),
            "budget_category": nested(self.budget_category),
            "budget_person": dict(self.budget_person),
            "budget_account": nested(self.budget_account),
        }


def _add_nested(target: dict[str, NestedTotal], hierarchy: Hierarchy, delta: Decimal) -> None:
    for parent, node in hierarchy.items():
        bucket = target.setdefault(parent, NestedTotal())
        if node.flat:
            bucket.total += delta
        for child in sorted(node.children):
            bucket.children[child] = bucket.children.get(child, Decimal(0)) + delta
            bucket.total += delta


def compute_totals(entries: Iterable[Entry]) -> Totals:
    totals = Totals()

    for e in entries:
        if e.kind == "income":
            totals.income += e.amount
        elif e.kind == "expense":
            totals.expense += e.amount
        elif e.kind == "budget":
            totals.budget += e.budget

        delta = e.signed_amount

        _add_nested(totals.category, e.categories, delta)
        _add_nested(totals.account, e.accounts, delta)

        if e.kind == "budget":
            _add_nested(totals.budget_category, e.categories, e.budget)
            _add_nested(totals.budget_account, e.accounts, e.budget)
            for person in e.persons:
                totals.budget_person[person] = totals.budget_person.get(person, Decimal(0)) + e.budget
            continue

        for person in e.persons:
            # every listed person gets the full amount (no splitting)
            totals.person[person] = totals.person.get(person, Decimal(0)) + delta

        if e.method != DEFAULT_LABEL:
            totals.method[e.method] = totals.method.get(e.method, Decimal(0)) + delta

    return totals
