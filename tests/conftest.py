from datetime import datetime

import pytest

from orgcal.config import OrgCalConfig
from orgcal.models.calendar import Calendar
from orgcal.models.event import Event


class FakeProvider:
    """In-memory calendar provider that records how it is used."""

    def __init__(self, calendars: dict[str, list[Event]] | None = None):
        # Display name -> events; identifiers are derived from the name
        self.calendars = calendars or {}
        self.connect_calls = 0
        self.event_queries: list[tuple[str, datetime, datetime]] = []

    def connect(self) -> None:
        self.connect_calls += 1

    def find_calendars(self, names):
        wanted = set(names)
        return [
            Calendar(identifier=f"id-{name}", name=name)
            for name in self.calendars
            if name in wanted
        ]

    def list_events(self, calendar_id, start, end):
        self.event_queries.append((calendar_id, start, end))
        name = calendar_id.removeprefix("id-")
        return list(self.calendars[name])


@pytest.fixture
def standup() -> Event:
    return Event.from_datetimes(
        "Standup", datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 9, 30)
    )


@pytest.fixture
def provider(standup) -> FakeProvider:
    """Provider with a 'Work' calendar holding one event and an empty 'Home'."""
    return FakeProvider({"Work": [standup], "Home": []})


@pytest.fixture
def config(tmp_path) -> OrgCalConfig:
    """Config writing into a temporary directory."""
    return OrgCalConfig(
        output_path=tmp_path / "calendar.org",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def provider_factory():
    """Factory for providers with custom calendars."""
    return FakeProvider
