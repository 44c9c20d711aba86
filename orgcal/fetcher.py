"""Fetch events for named calendars from a provider."""

import logging
from datetime import date
from typing import Iterable

from orgcal.dates import DateRange
from orgcal.exceptions import CalendarNotFoundError, InvalidDateError
from orgcal.models.calendar import Calendar, CalendarEvents
from orgcal.providers.base import CalendarProvider

logger = logging.getLogger(__name__)


class CalendarFetcher:
    """Resolves calendar names and pulls their events from a provider.

    The provider is connected lazily on the first fetch and at most once per
    fetcher. Calendars are queried one at a time, in the order requested.

    Names with no matching provider calendar are skipped with a warning,
    unless strict is set, in which case the fetch fails before any events
    are queried.
    """

    def __init__(self, provider: CalendarProvider, strict: bool = False):
        self.provider = provider
        self.strict = strict
        self._ready = False

    def ensure_ready(self) -> None:
        """Connect the provider if this fetcher has not done so yet."""
        if self._ready:
            return
        logger.debug("Connecting calendar provider")
        self.provider.connect()
        self._ready = True

    def resolve(self, names: Iterable[str]) -> list[Calendar]:
        """Map display names to provider calendars, keeping request order.

        Raises:
            CalendarNotFoundError: In strict mode, if any name has no match
        """
        self.ensure_ready()
        requested = list(dict.fromkeys(names))
        if not requested:
            return []

        by_name: dict[str, list[Calendar]] = {}
        for calendar in self.provider.find_calendars(requested):
            by_name.setdefault(calendar.name, []).append(calendar)

        missing = [name for name in requested if name not in by_name]
        if missing:
            if self.strict:
                raise CalendarNotFoundError(
                    f"Calendar(s) not found: {', '.join(missing)}"
                )
            for name in missing:
                logger.warning(f"Calendar '{name}' not found, skipping")

        resolved = []
        for name in requested:
            resolved.extend(by_name.get(name, []))
        return resolved

    def fetch(
        self, names: Iterable[str], start: date, end: date
    ) -> list[CalendarEvents]:
        """Fetch events whose start falls within [start, end] for each calendar.

        Args:
            names: Calendar display names
            start: First day of the range (inclusive)
            end: Last day of the range (inclusive)

        Returns:
            One CalendarEvents per resolved calendar, events ordered by start

        Raises:
            InvalidDateError: If end is before start
            CalendarNotFoundError: In strict mode, if any name has no match
        """
        if end < start:
            raise InvalidDateError(
                f"End date {end.isoformat()} is before start date {start.isoformat()}"
            )
        date_range = DateRange(start=start, end=end)
        range_start = date_range.start_datetime
        range_end = date_range.end_datetime

        sections = []
        for calendar in self.resolve(names):
            events = self.provider.list_events(
                calendar.identifier, range_start, range_end
            )
            in_range = [e for e in events if range_start <= e.start <= range_end]
            in_range.sort(key=lambda e: e.start)
            logger.info(
                f"Fetched {len(in_range)} events from '{calendar.name}' "
                f"({start.isoformat()} to {end.isoformat()})"
            )
            sections.append(CalendarEvents(calendar=calendar, events=in_range))
        return sections
