"""Rate entry record and display helpers."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RateEntry(BaseModel):
    """A single fuel surcharge rate from the feed.

    Entries are only built from ``rate`` elements whose date and percentage
    both parsed; they are immutable once created.

    Attributes:
        effective_date: Calendar date from which the rate applies
        rate_percent: Surcharge percentage, kept exactly as published

    Example:
        ```python
        from datetime import date
        from decimal import Decimal
        from fuel_surcharge_feed.feed.models import RateEntry

        entry = RateEntry(
            effective_date=date(2024, 6, 1),
            rate_percent=Decimal("4.10"),
        )
        print(entry.to_dict())
        ```
    """

    model_config = ConfigDict(frozen=True)

    effective_date: date = Field(
        description="Calendar date from which the rate applies"
    )
    rate_percent: Decimal = Field(
        description="Surcharge percentage, kept exactly as published"
    )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping.

        The percentage is rendered as a string so no precision is lost.
        """
        return {
            "effective_date": self.effective_date.isoformat(),
            "rate_percent": str(self.rate_percent),
        }

    def __str__(self) -> str:
        return format_rate_entry(self)


def format_rate(value: Decimal) -> str:
    """Render a percentage exactly as parsed, e.g. ``Decimal("4.10")`` -> ``4.10%``."""
    return f"{value}%"


def format_rate_entry(entry: RateEntry) -> str:
    """Render an entry as ``<effective date>: <rate>``."""
    return f"{entry.effective_date.isoformat()}: {format_rate(entry.rate_percent)}"
