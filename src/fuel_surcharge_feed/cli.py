"""Console entry point: fetch the feed and report the applicable rate."""

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from fuel_surcharge_feed.exceptions import FuelFeedException
from fuel_surcharge_feed.feed.models import RateEntry, format_rate_entry
from fuel_surcharge_feed.feed.parser import parse_feed
from fuel_surcharge_feed.feed.selector import select_latest, select_next
from fuel_surcharge_feed.transport.http import fetch_feed
from fuel_surcharge_feed.utils.config import load_feed_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class FeedRunResult:
    """Outcome of one fetch, parse and select run."""

    as_of_date: date
    current: RateEntry | None
    upcoming: RateEntry | None
    entry_count: int
    skipped: int

    def to_dict(self) -> dict[str, object]:
        return {
            "as_of": self.as_of_date.isoformat(),
            "current": self.current.to_dict() if self.current is not None else None,
            "next": self.upcoming.to_dict() if self.upcoming is not None else None,
            "skipped": self.skipped,
        }


def run(
    url: str,
    as_of_date: date,
    fetch: Callable[[str], str] = fetch_feed,
    logger: logging.Logger | None = None,
) -> FeedRunResult:
    """Fetch the feed at ``url`` and select the rate for ``as_of_date``.

    Skipped entries are logged at WARNING. Transport and malformed-document
    errors propagate unchanged.

    Args:
        url: Feed URL handed to ``fetch``
        as_of_date: Reference date for selection
        fetch: Callable returning the raw feed text for a URL
        logger: Logger receiving progress and diagnostics (default: this
            module's logger)

    Returns:
        FeedRunResult with the current and upcoming entries
    """
    log = logger or logging.getLogger(__name__)

    log.info("Fetching fuel surcharge feed from %s", url)
    raw_text = fetch(url)

    entries, diagnostics = parse_feed(raw_text)
    for message in diagnostics:
        log.warning("Skipped feed entry: %s", message)
    log.info("Parsed %d rate entries (%d skipped)", len(entries), len(diagnostics))

    current = select_latest(entries, as_of_date)
    upcoming = select_next(entries, as_of_date)
    if current is None:
        log.info("No rate is effective on or before %s", as_of_date.isoformat())
    else:
        log.info("Applicable rate: %s", format_rate_entry(current))

    return FeedRunResult(
        as_of_date=as_of_date,
        current=current,
        upcoming=upcoming,
        entry_count=len(entries),
        skipped=len(diagnostics),
    )


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}', expected YYYY-MM-DD"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``fuel-surcharge``."""
    parser = argparse.ArgumentParser(
        prog="fuel-surcharge",
        description="Report the fuel surcharge rate effective on a given date.",
    )
    parser.add_argument("--url", help="Feed URL (default: $FUEL_SURCHARGE_FEED_URL)")
    parser.add_argument(
        "--as-of",
        type=_iso_date,
        default=None,
        help="Reference date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="HTTP timeout in seconds"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _render(result: FeedRunResult) -> str:
    as_of = result.as_of_date.isoformat()
    if result.current is None:
        line = f"No fuel surcharge rate effective as of {as_of}"
    else:
        line = f"Fuel surcharge effective {format_rate_entry(result.current)}"
    if result.upcoming is not None:
        line = f"{line} (next: {format_rate_entry(result.upcoming)})"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit code: 0 on success, 1 on a fatal feed error
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_feed_settings(url=args.url, timeout=args.timeout)
    except FuelFeedException as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("%s", exc)
        return 1

    level = logging.DEBUG if args.verbose else settings.log_level_number
    logging.basicConfig(level=level, format=LOG_FORMAT)

    as_of_date = args.as_of or date.today()
    try:
        result = run(
            settings.feed_url,
            as_of_date,
            fetch=lambda url: fetch_feed(url, timeout=settings.timeout_seconds),
        )
    except FuelFeedException as exc:
        logger.error("Fuel surcharge run failed: %s", exc)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(_render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
