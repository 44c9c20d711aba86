"""Pydantic models for calendar export."""

from orgcal.models.calendar import Calendar, CalendarEvents
from orgcal.models.event import Event

__all__ = [
    "Calendar",
    "CalendarEvents",
    "Event",
]
