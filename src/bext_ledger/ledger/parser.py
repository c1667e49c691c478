from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .hierarchy import build_hierarchy
from .models import Entry
from .timestamps import TimestampResolver
from .tokenizer import RawFields, tokenize_line

logger = logging.getLogger(__name__)

COMMENT_MARKER = "*"


def is_entry_line(line: str) -> bool:
    s = line.strip()
    return bool(s) and not s.startswith(COMMENT_MARKER)


def build_entry(raw: RawFields, resolver: TimestampResolver, line_no: int | None = None) -> Entry:
    timestamp = None
    if raw.timestamp is not None:
        timestamp = resolver.resolve(raw.timestamp, line_no=line_no)

    return Entry(
        kind=raw.kind,
        amount=raw.amount,
        budget=raw.budget,
        persons=tuple(raw.persons),
        accounts=build_hierarchy(raw.accounts),
        categories=build_hierarchy(raw.categories),
        remarks=raw.remarks,
        method=raw.method,
        timestamp=timestamp,
    )


def parse_lines(lines: Iterable[str]) -> list[Entry]:
    """
    Parse ledger lines in order. Blank lines and `*` comments are skipped.

    Raises DateInferenceError when a short date appears before any full date.
    """
    resolver = TimestampResolver()
    entries: list[Entry] = []
    for line_no, line in enumerate(lines, start=1):
        if not is_entry_line(line):
            continue
        entries.append(build_entry(tokenize_line(line), resolver, line_no=line_no))
    return entries


def parse_file(path: Path | str) -> list[Entry]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        entries = parse_lines(f)
    logger.debug("Parsed %s entries from %s", len(entries), path)
    return entries
