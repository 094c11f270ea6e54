"""Configuration helpers."""

from .config import FeedSettings, load_environment, load_feed_settings

__all__ = [
    "FeedSettings",
    "load_environment",
    "load_feed_settings",
]
