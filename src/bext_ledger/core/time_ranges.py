from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class DateRange:
    dt_from: datetime
    dt_to: datetime

    def contains(self, dt: datetime) -> bool:
        return self.dt_from <= dt <= self.dt_to


def _closed(start: date, next_start: date) -> DateRange:
    dt_from = datetime.combine(start, time.min)
    return DateRange(dt_from=dt_from, dt_to=datetime.combine(next_start, time.min) - _TICK)


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    idx = year * 12 + (month - 1) + months
    return idx // 12, idx % 12 + 1


def range_day(today: date, offset: int = 0) -> DateRange:
    day = today + timedelta(days=offset)
    return _closed(day, day + timedelta(days=1))


def range_week(today: date, offset: int = 0) -> DateRange:
    """ISO week: Monday 00:00 .. Sunday 23:59:59.999999"""
    monday = today - timedelta(days=today.weekday()) + timedelta(weeks=offset)
    return _closed(monday, monday + timedelta(days=7))


def range_month(today: date, offset: int = 0) -> DateRange:
    y, m = _shift_month(today.year, today.month, offset)
    ny, nm = _shift_month(y, m, 1)
    return _closed(date(y, m, 1), date(ny, nm, 1))


def range_quarter(today: date, offset: int = 0) -> DateRange:
    first_month = 3 * ((today.month - 1) // 3) + 1
    y, m = _shift_month(today.year, first_month, 3 * offset)
    ny, nm = _shift_month(y, m, 3)
    return _closed(date(y, m, 1), date(ny, nm, 1))


def range_year(today: date, offset: int = 0) -> DateRange:
    y = today.year + offset
    return _closed(date(y, 1, 1), date(y + 1, 1, 1))


PERIOD_RANGES: dict[str, Callable[[date, int], DateRange]] = {
    "d": range_day,
    "w": range_week,
    "m": range_month,
    "q": range_quarter,
    "y": range_year,
}

PERIOD_TOKENS = frozenset(PERIOD_RANGES) | frozenset(f"-{k}" for k in PERIOD_RANGES)


def period_range(token: str, now: datetime) -> DateRange:
    """
    'm' -> current calendar month, '-m' -> the month before it, etc.
    """
    if token not in PERIOD_TOKENS:
        raise ValueError(f"Unknown period: {token!r}")
    offset = -1 if token.startswith("-") else 0
    return PERIOD_RANGES[token.lstrip("-")](now.date(), offset)


def local_now(tz_name: str) -> datetime:
    """Wall-clock time in tz_name, without tzinfo (ledger timestamps are naive)."""
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {tz_name}") from e
    return datetime.now(tz=tz).replace(tzinfo=None)
