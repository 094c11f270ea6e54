"""Integration test against a real fuel surcharge feed."""

import os
from datetime import date

import pytest

from fuel_surcharge_feed import fetch_feed, parse_feed, select_latest

FEED_URL = os.getenv("FUEL_SURCHARGE_FEED_URL")


@pytest.mark.integration
@pytest.mark.skipif(not FEED_URL, reason="FUEL_SURCHARGE_FEED_URL not set")
def test_real_feed_yields_entries() -> None:
    """The configured feed downloads, parses and selects without errors."""
    raw_text = fetch_feed(FEED_URL or "")

    entries, diagnostics = parse_feed(raw_text)

    assert entries, f"No valid entries; diagnostics: {diagnostics}"
    current = select_latest(entries, date.today())
    if current is not None:
        assert current.effective_date <= date.today()
