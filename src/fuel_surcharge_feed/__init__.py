"""Fuel Surcharge Feed - fetch a rate feed and select the rate in effect."""

__version__ = "0.1.0"

# Core parsing and selection
from .feed import (
    RateEntry,
    format_rate,
    format_rate_entry,
    parse_effective_date,
    parse_feed,
    parse_rate_percent,
    select_latest,
    select_next,
)

# Custom exceptions
from .exceptions import (
    ConfigurationException,
    FuelFeedException,
    MalformedFeedError,
    MalformedFeedException,
    TransportError,
    TransportException,
)

# Transport and configuration
from .transport import fetch_feed
from .utils import FeedSettings, load_environment, load_feed_settings

__all__ = [
    "__version__",
    "RateEntry",
    "format_rate",
    "format_rate_entry",
    "parse_feed",
    "parse_effective_date",
    "parse_rate_percent",
    "select_latest",
    "select_next",
    "fetch_feed",
    "FeedSettings",
    "load_environment",
    "load_feed_settings",
    # Exceptions
    "FuelFeedException",
    "ConfigurationException",
    "MalformedFeedError",
    "MalformedFeedException",
    "TransportError",
    "TransportException",
]
