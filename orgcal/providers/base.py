"""Base protocol for calendar providers."""

from datetime import datetime
from typing import Iterable, Protocol

from orgcal.models.calendar import Calendar
from orgcal.models.event import Event


class CalendarProvider(Protocol):
    """Protocol for read-only calendar data sources."""

    def connect(self) -> None:
        """Prepare the provider for queries. Must be safe to call repeatedly."""
        ...

    def find_calendars(self, names: Iterable[str]) -> list[Calendar]:
        """Return calendars whose display name is one of names."""
        ...

    def list_events(
        self, calendar_id: str, start: datetime, end: datetime
    ) -> list[Event]:
        """Return events of one calendar in the given time range."""
        ...
