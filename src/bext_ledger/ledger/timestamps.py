from __future__ import annotations

import logging
import re
from datetime import datetime

from .models import Timestamp

logger = logging.getLogger(__name__)

# Short dates without a time of day are placed in the evening.
DEFAULT_SHORT_TIME = "18:00"

_SHORT_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}$")
_SHORT_DATETIME_RE = re.compile(r"^\d{1,2}/\d{1,2}\s\d{2}:\d{2}$")
_FULL_DATETIME_RE = re.compile(r"^\d{4}/\d{2}/\d{2}\s\d{2}:\d{2}$")


class DateInferenceError(ValueError):
    def __init__(self, token: str, line_no: int | None = None):
        self.token = token
        self.line_no = line_no
        where = f" on line {line_no}" if line_no is not None else ""
        super().__init__(
            f"Short date [{token}]{where} used without a preceding full date "
            "(YYYY/MM/DD HH:MM) to infer the year."
        )


def _to_datetime(text: str) -> datetime | None:
    # accepts both "2024/6/3 18:00" and "2024/06/03 18:00"
    try:
        date_part, time_part = text.split(None, 1)
        y, m, d = (int(x) for x in date_part.split("/"))
        hh, mm = (int(x) for x in time_part.split(":"))
        return datetime(y, m, d, hh, mm)
    except ValueError:
        return None


class TimestampResolver:
    """
    Resolves bracketed date tokens for one pass over one ledger.

    Carries the year of the last fully-qualified date seen; short dates
    (M/D, M/D HH:MM) borrow it. One resolver per parse.
    """

    def __init__(self) -> None:
        self.last_year: str | None = None

    def resolve(self, token: str, line_no: int | None = None) -> Timestamp:
        token = token.strip()

        if _SHORT_DATE_RE.match(token):
            return self._resolve_short(token, f"{token} {DEFAULT_SHORT_TIME}", line_no)

        if _SHORT_DATETIME_RE.match(token):
            return self._resolve_short(token, token, line_no)

        if _FULL_DATETIME_RE.match(token):
            at = _to_datetime(token)
            if at is None:
                logger.debug("Keeping impossible date as-is: [%s]", token)
                return Timestamp(text=token)
            self.last_year = token[:4]
            return Timestamp(text=token, at=at)

        logger.debug("Keeping unrecognized timestamp as-is: [%s]", token)
        return Timestamp(text=token)

    def _resolve_short(self, token: str, rest: str, line_no: int | None) -> Timestamp:
        if not self.last_year:
            raise DateInferenceError(token, line_no)
        text = f"{self.last_year}/{rest}"
        at = _to_datetime(text)
        if at is None:
            logger.debug("Keeping impossible date as-is: [%s]", text)
        return Timestamp(text=text, at=at)
