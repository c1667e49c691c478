from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from ..core.time_ranges import PERIOD_TOKENS, DateRange, period_range
from ..ledger.hierarchy import split_label
from ..ledger.models import Entry, Hierarchy
from .totals import Totals, compute_totals

logger = logging.getLogger(__name__)

ENTITY_SIGILS = "@#~:"


class InvalidFilterError(ValueError):
    pass


@dataclass(frozen=True)
class FilterResult:
    filter: str
    entries: list[Entry]
    totals: Totals


def _in_hierarchy(hierarchy: Hierarchy, value: str) -> bool:
    parent, child = split_label(value)
    node = hierarchy.get(parent)
    if node is None:
        return False
    if child is None:
        return True
    return child in node.children


def entity_matcher(token: str) -> Callable[[Entry], bool]:
    sigil, value = token[0], token[1:]

    if sigil == "@":
        return lambda e: value in e.persons
    if sigil == "#":
        return lambda e: _in_hierarchy(e.categories, value)
    if sigil == "~":
        return lambda e: _in_hierarchy(e.accounts, value)
    if sigil == ":":
        return lambda e: e.method == value
    raise InvalidFilterError(f"Unknown filter sigil: {sigil!r}")


def date_matcher(dr: DateRange) -> Callable[[Entry], bool]:
    def match(e: Entry) -> bool:
        if e.timestamp is None or e.timestamp.at is None:
            return False
        return dr.contains(e.timestamp.at)

    return match


def build_matcher(token: str, now: datetime | None = None) -> Callable[[Entry], bool]:
    token = (token or "").strip()
    if not token:
        raise InvalidFilterError("Empty filter")

    if token[0] in ENTITY_SIGILS:
        return entity_matcher(token)

    if token in PERIOD_TOKENS:
        dr = period_range(token, now or datetime.now())
        logger.debug("Filter %s covers %s .. %s", token, dr.dt_from, dr.dt_to)
        return date_matcher(dr)

    raise InvalidFilterError(
        f"Unknown filter {token!r}: expected @person, #category, ~account, :method "
        f"or one of {', '.join(sorted(PERIOD_TOKENS))}"
    )


def filter_entries(entries: Iterable[Entry], token: str, now: datetime | None = None) -> FilterResult:
    """
    Keep entries matching one filter token and total them.

    now: reference time for date buckets (naive, local); defaults to datetime.now().
    """
    match = build_matcher(token, now=now)
    selected = [e for e in entries if match(e)]
    return FilterResult(filter=token.strip(), entries=selected, totals=compute_totals(selected))
