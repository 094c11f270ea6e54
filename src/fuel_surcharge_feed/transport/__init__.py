"""Transport collaborators for fetching the feed."""

from .http import DEFAULT_TIMEOUT, fetch_feed

__all__ = ["DEFAULT_TIMEOUT", "fetch_feed"]
