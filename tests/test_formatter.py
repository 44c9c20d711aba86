"""Tests for org formatting."""

from datetime import datetime

import pytest

from orgcal.models.calendar import Calendar, CalendarEvents
from orgcal.models.event import Event
from orgcal.output.org_formatter import (
    format_document,
    format_entry,
    format_heading,
    format_section,
    format_timestamp,
)


def make_section(name: str, events: list[Event]) -> CalendarEvents:
    """Helper to create a CalendarEvents section."""
    return CalendarEvents(calendar=Calendar(identifier=f"id-{name}", name=name), events=events)


def test_format_timestamp():
    """Test org timestamp layout."""
    assert format_timestamp(datetime(2025, 1, 6, 9, 5)) == "<2025-01-06 Mon 09:05>"
    assert format_timestamp(datetime(2024, 2, 29, 23, 59)) == "<2024-02-29 Thu 23:59>"


def test_format_entry_standup(standup):
    """Test the exact entry layout for a single event."""
    assert (
        format_entry(standup)
        == "* Standup\n<2025-01-06 Mon 09:00>-<2025-01-06 Mon 09:30>\n"
    )


@pytest.mark.parametrize("level", [1, 2, 3, 5])
def test_format_entry_marker_length(standup, level):
    """Test heading marker length equals the nesting level."""
    heading = format_entry(standup, level).splitlines()[0]
    marker, _, title = heading.partition(" ")
    assert marker == "*" * level
    assert title == "Standup"


def test_format_entry_multi_day():
    """Test an event spanning midnight keeps both dates."""
    event = Event.from_datetimes(
        "Night shift", datetime(2025, 1, 31, 22, 0), datetime(2025, 2, 1, 6, 0)
    )
    assert format_entry(event, 2).splitlines()[1] == (
        "<2025-01-31 Fri 22:00>-<2025-02-01 Sat 06:00>"
    )


def test_format_heading_invalid_level():
    """Test levels below 1 are rejected."""
    with pytest.raises(ValueError):
        format_heading("Nope", 0)


def test_format_section_with_events(standup):
    """Test entries are nested at level 2 and separated by a blank line."""
    retro = Event.from_datetimes(
        "Retro", datetime(2025, 1, 10, 15, 0), datetime(2025, 1, 10, 16, 0)
    )
    section = format_section(make_section("Work", [standup, retro]))
    assert section == (
        "* Work\n"
        "** Standup\n<2025-01-06 Mon 09:00>-<2025-01-06 Mon 09:30>\n"
        "\n"
        "** Retro\n<2025-01-10 Fri 15:00>-<2025-01-10 Fri 16:00>\n"
    )


def test_format_section_empty():
    """Test an empty calendar renders only its heading."""
    assert format_section(make_section("Home", [])) == "* Home\n"


def test_format_document_order_and_empty_section(standup):
    """Test two calendars keep input order, with an empty body for Home."""
    document = format_document(
        [make_section("Work", [standup]), make_section("Home", [])]
    )
    headings = [line for line in document.splitlines() if line.startswith("* ")]
    assert headings == ["* Work", "* Home"]
    work, home = document.split("\n\n* ")
    assert "** Standup" in work
    assert home == "Home\n"


def test_format_document_empty():
    """Test no sections gives an empty document."""
    assert format_document([]) == ""
