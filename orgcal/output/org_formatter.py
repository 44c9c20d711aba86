"""Pure formatting functions for org-mode output."""

from datetime import datetime
from typing import Iterable

from orgcal.constants import EVENT_LEVEL, HEADING_MARKER
from orgcal.models.calendar import CalendarEvents
from orgcal.models.event import Event


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as an active org timestamp.

    Args:
        dt: Local datetime.

    Returns:
        Timestamp string (e.g., "<2025-01-06 Mon 09:00>").
    """
    return dt.strftime("<%Y-%m-%d %a %H:%M>")


def format_heading(title: str, level: int = 1) -> str:
    """Format a heading line with the marker repeated level times."""
    if level < 1:
        raise ValueError(f"Heading level must be >= 1, got {level}")
    return f"{HEADING_MARKER * level} {title}"


def format_entry(event: Event, level: int = 1) -> str:
    """Format one event as an outline entry.

    Args:
        event: Event to format.
        level: Outline nesting level of the heading.

    Returns:
        Heading line and timestamp range line, newline terminated.
    """
    return (
        f"{format_heading(event.title, level)}\n"
        f"{format_timestamp(event.start)}-{format_timestamp(event.end)}\n"
    )


def format_section(section: CalendarEvents) -> str:
    """Format a calendar heading followed by its entries."""
    heading = format_heading(section.name, 1)
    entries = [format_entry(event, EVENT_LEVEL) for event in section.events]
    return f"{heading}\n" + "\n".join(entries)


def format_document(sections: Iterable[CalendarEvents]) -> str:
    """Join calendar sections into one document, in input order."""
    return "\n\n".join(format_section(section) for section in sections)
