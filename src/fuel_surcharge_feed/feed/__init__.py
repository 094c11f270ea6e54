"""Feed parsing and rate selection."""

from .models import RateEntry, format_rate, format_rate_entry
from .parser import parse_effective_date, parse_feed, parse_rate_percent
from .selector import select_latest, select_next

__all__ = [
    "RateEntry",
    "format_rate",
    "format_rate_entry",
    "parse_feed",
    "parse_effective_date",
    "parse_rate_percent",
    "select_latest",
    "select_next",
]
