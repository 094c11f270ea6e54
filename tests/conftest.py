"""Shared pytest configuration and fixtures for the test suite."""

from collections.abc import Callable

import pytest

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<fuelSurcharge>
  <rates>
    <rate>
      <effectiveDate>2024-01-01</effectiveDate>
      <ratePercent>3.25</ratePercent>
    </rate>
    <rate>
      <effectiveDate>2024-06-01</effectiveDate>
      <ratePercent>4.10%</ratePercent>
    </rate>
    <rate>
      <effectiveDate>2025-01-01</effectiveDate>
      <ratePercent>5.00</ratePercent>
    </rate>
  </rates>
</fuelSurcharge>
"""


def make_feed(*rates: tuple[str | None, str | None]) -> str:
    """Build a feed document from (date, rate) text pairs.

    A None value leaves that child element out.
    """
    parts = ["<rates>"]
    for date_text, rate_text in rates:
        parts.append("<rate>")
        if date_text is not None:
            parts.append(f"<effectiveDate>{date_text}</effectiveDate>")
        if rate_text is not None:
            parts.append(f"<ratePercent>{rate_text}</ratePercent>")
        parts.append("</rate>")
    parts.append("</rates>")
    return "".join(parts)


@pytest.fixture
def sample_feed() -> str:
    """Well-formed feed with one past, one current and one future rate."""
    return SAMPLE_FEED


@pytest.fixture
def feed_builder() -> Callable[..., str]:
    """Builder for small feed documents, see ``make_feed``."""
    return make_feed


@pytest.fixture
def sample_feed_url() -> str:
    """Sample feed URL for testing."""
    return "https://rates.example.com/fuel-surcharge.xml"


@pytest.fixture
def fake_fetch(sample_feed: str) -> Callable[[str], str]:
    """Fetch collaborator returning the sample feed and recording URLs."""
    calls: list[str] = []

    def _fetch(url: str) -> str:
        calls.append(url)
        return sample_feed

    _fetch.calls = calls  # type: ignore[attr-defined]
    return _fetch


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove feed settings from the environment and ignore any .env file."""
    for key in (
        "FUEL_SURCHARGE_FEED_URL",
        "FUEL_SURCHARGE_FEED_TIMEOUT",
        "FUEL_SURCHARGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        "fuel_surcharge_feed.utils.config.load_dotenv", lambda: False
    )
    return monkeypatch

