"""macOS Calendar provider backed by EventKit (via PyObjC)."""

import importlib
import logging
import threading
from datetime import datetime
from types import ModuleType
from typing import Any, Iterable

from pydantic import ValidationError

from orgcal.exceptions import CalendarProviderError
from orgcal.models.calendar import Calendar
from orgcal.models.event import Event

logger = logging.getLogger(__name__)

# EKAuthorizationStatus values
AUTH_NOT_DETERMINED = 0
AUTH_RESTRICTED = 1
AUTH_DENIED = 2
AUTH_WRITE_ONLY = 4


def _load_eventkit() -> tuple[ModuleType, ModuleType]:
    """Import the EventKit and Foundation bridges.

    Raises:
        CalendarProviderError: If PyObjC's EventKit bindings are not installed
    """
    try:
        eventkit = importlib.import_module("EventKit")
        foundation = importlib.import_module("Foundation")
    except ImportError as e:
        raise CalendarProviderError(
            "EventKit is not available. Install pyobjc-framework-EventKit on macOS."
        ) from e
    return eventkit, foundation


class EventKitProvider:
    """Reads calendars and events from the macOS calendar database.

    The EventKit bridge is loaded and access is requested on the first
    call to connect(); later calls are no-ops.
    """

    def __init__(self, access_timeout: float = 10.0):
        self.access_timeout = access_timeout
        self._eventkit: ModuleType | None = None
        self._foundation: ModuleType | None = None
        self._store: Any = None

    @property
    def connected(self) -> bool:
        return self._store is not None

    def connect(self) -> None:
        """Load EventKit and obtain read access to calendars.

        Raises:
            CalendarProviderError: If EventKit is unavailable or access is refused
        """
        if self._store is not None:
            return

        eventkit, foundation = _load_eventkit()
        store = eventkit.EKEventStore.alloc().init()

        status = eventkit.EKEventStore.authorizationStatusForEntityType_(
            eventkit.EKEntityTypeEvent
        )
        if status in (AUTH_RESTRICTED, AUTH_DENIED, AUTH_WRITE_ONLY):
            raise CalendarProviderError(
                "Calendar access denied. Enable it in System Settings > "
                "Privacy & Security > Calendars"
            )
        if status == AUTH_NOT_DETERMINED:
            self._request_access(eventkit, store)

        self._eventkit = eventkit
        self._foundation = foundation
        self._store = store
        logger.debug("Connected to EventKit event store")

    def _request_access(self, eventkit: ModuleType, store: Any) -> None:
        done = threading.Event()
        result = {"granted": False}

        def _completion(granted, _error) -> None:
            result["granted"] = bool(granted)
            done.set()

        logger.info("Requesting calendar access")
        if hasattr(store, "requestFullAccessToEventsWithCompletion_"):
            store.requestFullAccessToEventsWithCompletion_(_completion)
        else:
            store.requestAccessToEntityType_completion_(
                eventkit.EKEntityTypeEvent, _completion
            )

        if not done.wait(timeout=self.access_timeout):
            raise CalendarProviderError(
                f"Timed out after {self.access_timeout}s waiting for calendar access"
            )
        if not result["granted"]:
            raise CalendarProviderError("Calendar access not granted")

    def _require_store(self) -> Any:
        if self._store is None:
            raise CalendarProviderError("Provider not connected; call connect() first")
        return self._store

    def find_calendars(self, names: Iterable[str]) -> list[Calendar]:
        """Return calendars whose title exactly matches one of names."""
        store = self._require_store()
        wanted = set(names)
        calendars = []
        for ek_calendar in store.calendarsForEntityType_(self._eventkit.EKEntityTypeEvent):
            title = str(ek_calendar.title())
            if title in wanted:
                calendars.append(
                    Calendar(
                        identifier=str(ek_calendar.calendarIdentifier()),
                        name=title,
                    )
                )
        return calendars

    def list_events(
        self, calendar_id: str, start: datetime, end: datetime
    ) -> list[Event]:
        """Return events of one calendar overlapping the given range.

        Raises:
            CalendarProviderError: If the calendar identifier is unknown or an
                event cannot be converted
        """
        store = self._require_store()
        ek_calendar = store.calendarWithIdentifier_(calendar_id)
        if ek_calendar is None:
            raise CalendarProviderError(f"Unknown calendar identifier: {calendar_id}")

        nsdate = self._foundation.NSDate
        predicate = store.predicateForEventsWithStartDate_endDate_calendars_(
            nsdate.dateWithTimeIntervalSince1970_(start.timestamp()),
            nsdate.dateWithTimeIntervalSince1970_(end.timestamp()),
            [ek_calendar],
        )
        events = []
        for ek_event in store.eventsMatchingPredicate_(predicate) or []:
            title = str(ek_event.title() or "")
            try:
                event = Event.from_datetimes(
                    title=title,
                    start=_to_datetime(ek_event.startDate()),
                    end=_to_datetime(ek_event.endDate()),
                )
            except ValidationError as e:
                raise CalendarProviderError(
                    f"Invalid event '{title}' in calendar {calendar_id}: {e}"
                ) from e
            events.append(event)
        logger.debug(f"EventKit returned {len(events)} events for {calendar_id}")
        return events


def _to_datetime(nsdate: Any) -> datetime:
    """Convert an NSDate to a naive local datetime."""
    return datetime.fromtimestamp(nsdate.timeIntervalSince1970())
