from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .config import load_settings
from .logging_setup import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bext-ledger")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Path to a .bext ledger. Defaults to BEXT_FILE.",
    )
    parser.add_argument(
        "filter",
        nargs="?",
        default=None,
        help="One filter: @person, #category[>sub], ~account[>sub], :method "
        "or a date bucket d, -d, w, -w, m, -m, q, -q, y, -y",
    )
    parser.add_argument("--text", action="store_true", help="Plain text output instead of JSON")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Net savings, budget usage and monthly expenses by category",
    )

    # date buckets such as -m look like options to argparse
    args, extra = parser.parse_known_args(argv)
    if extra:
        if args.filter is not None or len(extra) > 1:
            given = " ".join(x for x in [args.filter, *extra] if x)
            print(f"Error: only one filter is accepted, got: {given}")
            return 3
        args.filter = extra[0]

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    from .analytics.filters import InvalidFilterError, filter_entries
    from .analytics.totals import compute_totals
    from .core.time_ranges import local_now
    from .ledger.parser import parse_file
    from .ledger.timestamps import DateInferenceError
    from . import render

    path = Path(args.file) if args.file else settings.default_file
    if path is None or not path.is_file():
        logger.error("Ledger file not found: %s", path)
        print(f"File not found: {path}")
        return 1

    try:
        entries = parse_file(path)
    except DateInferenceError as e:
        logger.error("Parse of %s aborted: %s", path, e)
        print(f"Error: {e}")
        return 2

    currency = settings.currency_symbol

    if args.filter:
        try:
            result = filter_entries(entries, args.filter, now=local_now(settings.timezone))
        except InvalidFilterError as e:
            logger.error("%s", e)
            print(f"Error: {e}")
            return 3
        print(render.filter_result_text(result, currency) if args.text else render.to_json(result))
        return 0

    totals = compute_totals(entries)

    if args.summary:
        if args.text:
            print(render.summary_text(totals, entries, currency))
        else:
            print(render.to_json(render.summary_to_dict(totals, entries)))
        return 0

    print(render.totals_text(totals, currency) if args.text else render.to_json(totals))
    return 0
