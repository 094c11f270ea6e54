"""Pick the applicable rate from parsed entries."""

from collections.abc import Sequence
from datetime import date, datetime

from fuel_surcharge_feed.feed.models import RateEntry


def _as_date(value: date) -> date:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(value, datetime):
        return value.date()
    return value


def select_latest(entries: Sequence[RateEntry], as_of_date: date) -> RateEntry | None:
    """Select the rate in effect on ``as_of_date``.

    The applicable rate is the entry with the latest effective date that is
    not after ``as_of_date``; an entry dated exactly ``as_of_date`` counts.
    When several entries share that date, the first one in input order wins.

    Args:
        entries: Parsed entries in feed order
        as_of_date: Reference date

    Returns:
        The applicable entry, or None if every entry takes effect later
    """
    as_of = _as_date(as_of_date)
    eligible = [entry for entry in entries if entry.effective_date <= as_of]
    if not eligible:
        return None

    max_date = max(entry.effective_date for entry in eligible)
    return next(entry for entry in eligible if entry.effective_date == max_date)


def select_next(entries: Sequence[RateEntry], as_of_date: date) -> RateEntry | None:
    """Select the earliest rate taking effect after ``as_of_date``.

    Ties go to the first entry in input order.
    """
    as_of = _as_date(as_of_date)
    upcoming = [entry for entry in entries if entry.effective_date > as_of]
    if not upcoming:
        return None

    min_date = min(entry.effective_date for entry in upcoming)
    return next(entry for entry in upcoming if entry.effective_date == min_date)
