"""Parse a fuel surcharge XML feed into rate entries.

Two failure levels apply. A document that is not XML at all raises
``MalformedFeedError``. A single ``rate`` element with a missing or
unparseable field is skipped and reported in the returned diagnostics, and
parsing continues with the next element.
"""

import re
import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal, InvalidOperation

from fuel_surcharge_feed.exceptions import MalformedFeedException
from fuel_surcharge_feed.feed.models import RateEntry

RATE_TAG = "rate"
DATE_FIELD = "effectiveDate"
RATE_FIELD = "ratePercent"

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
# Fixed English table; the process locale is never consulted.
_MONTHS: dict[str, int] = {
    name: number
    for number, full_name in enumerate(_MONTH_NAMES, start=1)
    for name in (full_name, full_name[:3])
}
_MONTHS["sept"] = 9

# ASCII digits only; \d would also match other scripts' digits.
_ISO_DATE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?",
    re.ASCII,
)
_YEAR_FIRST = re.compile(
    r"(?P<year>\d{4})(?P<sep>[/.])(?P<month>\d{1,2})(?P=sep)(?P<day>\d{1,2})",
    re.ASCII,
)
_COMPACT = re.compile(r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})", re.ASCII)
_DAY_MONTH_NAME = re.compile(
    r"(?P<day>\d{1,2})\s+(?P<month_name>[A-Za-z]+)\.?,?\s+(?P<year>\d{4})",
    re.ASCII,
)
_MONTH_NAME_DAY = re.compile(
    r"(?P<month_name>[A-Za-z]+)\.?\s+(?P<day>\d{1,2}),?\s+(?P<year>\d{4})",
    re.ASCII,
)
_DATE_PATTERNS = (
    _ISO_DATE,
    _YEAR_FIRST,
    _COMPACT,
    _DAY_MONTH_NAME,
    _MONTH_NAME_DAY,
)

# Plain ASCII decimal with '.' as the only separator: no grouping, exponent,
# NaN or non-ASCII digits.
_INVARIANT_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def parse_effective_date(text: str) -> date | None:
    """Parse a calendar date without consulting the locale.

    Accepts ISO dates (optionally with a time part, which is dropped),
    year-first dates separated by ``/`` or ``.``, compact ``yyyymmdd`` and
    dates written with an English month name. Forms where day and month
    order is ambiguous, such as ``01/06/2024``, are rejected.

    Args:
        text: Raw date text from the feed

    Returns:
        The parsed date, or None if the text is not a recognised date
    """
    value = text.strip()
    for pattern in _DATE_PATTERNS:
        match = pattern.fullmatch(value)
        if match is None:
            continue

        fields = match.groupdict()
        if "month_name" in fields:
            month = _MONTHS.get(fields["month_name"].lower())
            if month is None:
                return None
        else:
            month = int(fields["month"])

        try:
            return date(int(fields["year"]), month, int(fields["day"]))
        except ValueError:
            return None
    return None


def parse_rate_percent(text: str) -> Decimal | None:
    """Parse a percentage using an invariant numeric format.

    One trailing ``%`` is stripped, so ``"5.5%"`` and ``"5.5"`` give the same
    value. The decimal point must be ``.``; ``"4,10"`` is rejected.

    Args:
        text: Raw percentage text from the feed

    Returns:
        The exact decimal value, or None if the text is not a plain decimal
    """
    value = text.strip()
    if value.endswith("%"):
        value = value[:-1].rstrip()

    if not _INVARIANT_DECIMAL.fullmatch(value):
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        return None


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str | None:
    for child in element:
        if _local_name(child.tag) == name:
            text = (child.text or "").strip()
            return text or None
    return None


def parse_feed(raw_text: str | bytes) -> tuple[list[RateEntry], list[str]]:
    """Parse feed text into rate entries in document order.

    Args:
        raw_text: Complete XML document as downloaded

    Returns:
        A tuple of (entries, diagnostics). Entries keep document order and
        are not sorted. Diagnostics hold one message per skipped element.

    Raises:
        MalformedFeedError: If the text is not parseable as XML
    """
    try:
        root = ET.fromstring(raw_text)
    except ET.ParseError as exc:
        raise MalformedFeedException(
            f"Feed is not well-formed XML: {exc}",
            position=exc.position,
            original_error=exc,
        ) from exc

    entries: list[RateEntry] = []
    diagnostics: list[str] = []

    candidates = [el for el in root.iter() if _local_name(el.tag) == RATE_TAG]
    for index, element in enumerate(candidates, start=1):
        date_text = _child_text(element, DATE_FIELD)
        rate_text = _child_text(element, RATE_FIELD)

        if date_text is None or rate_text is None:
            missing = DATE_FIELD if date_text is None else RATE_FIELD
            diagnostics.append(f"rate #{index}: missing required field '{missing}'")
            continue

        effective_date = parse_effective_date(date_text)
        if effective_date is None:
            diagnostics.append(
                f"rate #{index}: unrecognized date format: '{date_text}'"
            )
            continue

        rate_percent = parse_rate_percent(rate_text)
        if rate_percent is None:
            diagnostics.append(
                f"rate #{index}: unrecognized rate format: '{rate_text}'"
            )
            continue

        entries.append(
            RateEntry(effective_date=effective_date, rate_percent=rate_percent)
        )

    return entries, diagnostics
