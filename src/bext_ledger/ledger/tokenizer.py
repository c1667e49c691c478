from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from .models import DEFAULT_LABEL, KIND_BY_SIGN, EntryKind


@dataclass(frozen=True)
class FieldRule:
    sigil: str
    stop_chars: str
    stop_at_space: bool = False

    def pattern(self) -> re.Pattern[str]:
        stops = re.escape(self.stop_chars)
        if self.stop_at_space:
            # method labels are single words
            return re.compile(rf"{re.escape(self.sigil)}([^\s{stops}]+)")
        return re.compile(rf"{re.escape(self.sigil)}([^{stops}]+)")


# Each field is extracted independently; a span ends at the first *other* sigil.
FIELD_RULES: dict[str, FieldRule] = {
    "persons": FieldRule("@", "#[]~?:"),
    "accounts": FieldRule("~", "#@[]?:"),
    "categories": FieldRule("#", "@[]~?:"),
    "remarks": FieldRule("?", "#[]~@:"),
    "method": FieldRule(":", "#[]~?:", stop_at_space=True),
}

_FIELD_PATTERNS = {name: rule.pattern() for name, rule in FIELD_RULES.items()}

_AMOUNT_RE = re.compile(r"^[+\-$]\s*(\d+(?:\.\d{1,2})?)")
_BRACKET_RE = re.compile(r"\[(.*?)\]")


@dataclass(frozen=True)
class RawFields:
    """Sigil spans of one ledger line, before hierarchy/timestamp resolution."""

    kind: EntryKind
    amount: Decimal
    budget: Decimal
    persons: list[str]
    accounts: list[str]
    categories: list[str]
    remarks: str
    method: str
    timestamp: str | None


def split_list(span: str | None) -> list[str]:
    if span is None:
        return []
    return [p.strip() for p in span.split(";") if p.strip()]


def _span(name: str, text: str) -> str | None:
    m = _FIELD_PATTERNS[name].search(text)
    return m.group(1) if m else None


def tokenize_line(line: str) -> RawFields:
    line = line.strip()

    kind: EntryKind = KIND_BY_SIGN.get(line[:1], "unknown")

    value = Decimal(0)
    if kind != "unknown":
        m = _AMOUNT_RE.match(line)
        if m:
            value = Decimal(m.group(1))

    timestamp: str | None = None
    ts_match = _BRACKET_RE.search(line)
    if ts_match:
        timestamp = ts_match.group(1)

    # a ':' inside the timestamp bracket is not a method sigil
    without_brackets = _BRACKET_RE.sub(" ", line)

    remarks = _span("remarks", line)
    method = _span("method", without_brackets)

    return RawFields(
        kind=kind,
        amount=value if kind in ("income", "expense") else Decimal(0),
        budget=value if kind == "budget" else Decimal(0),
        persons=split_list(_span("persons", line)),
        accounts=split_list(_span("accounts", line)),
        categories=split_list(_span("categories", line)),
        remarks=(remarks.strip() or DEFAULT_LABEL) if remarks else DEFAULT_LABEL,
        method=(method.strip() or DEFAULT_LABEL) if method else DEFAULT_LABEL,
        timestamp=timestamp,
    )
