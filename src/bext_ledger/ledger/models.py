from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Literal

EntryKind = Literal["income", "expense", "budget", "unknown"]

KIND_BY_SIGN: dict[str, EntryKind] = {
    "+": "income",
    "-": "expense",
    "$": "budget",
}

SIGN_BY_KIND: dict[EntryKind, str] = {v: k for k, v in KIND_BY_SIGN.items()}

DEFAULT_LABEL = "Other"


@dataclass(frozen=True)
class HierarchyNode:
    """
    One top-level label of an account/category hierarchy.

    flat: the label was used on its own (`#Food`)
    children: labels used as `Food>child`
    """

    flat: bool = False
    children: frozenset[str] = frozenset()


class Hierarchy(Mapping[str, HierarchyNode]):
    """Read-only parent label -> HierarchyNode mapping, in first-seen order."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Mapping[str, HierarchyNode] | None = None):
        self._nodes: dict[str, HierarchyNode] = dict(nodes or {})

    def __getitem__(self, parent: str) -> HierarchyNode:
        return self._nodes[parent]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __hash__(self) -> int:
        return hash(frozenset(self._nodes.items()))

    def __repr__(self) -> str:
        return f"Hierarchy({self._nodes!r})"


@dataclass(frozen=True)
class Timestamp:
    text: str
    at: datetime | None = None

    @property
    def resolved(self) -> bool:
        return self.at is not None


@dataclass(frozen=True)
class Entry:
    kind: EntryKind = "unknown"
    amount: Decimal = Decimal(0)
    budget: Decimal = Decimal(0)
    persons: tuple[str, ...] = ()
    accounts: Hierarchy = field(default_factory=Hierarchy)
    categories: Hierarchy = field(default_factory=Hierarchy)
    remarks: str = DEFAULT_LABEL
    method: str = DEFAULT_LABEL
    timestamp: Timestamp | None = None

    @property
    def sign(self) -> str:
        return SIGN_BY_KIND.get(self.kind, "")

    @property
    def signed_amount(self) -> Decimal:
        # budget entries are not signed and never move income/expense totals
        if self.kind == "income":
            return self.amount
        if self.kind == "expense":
            return -self.amount
        return Decimal(0)
