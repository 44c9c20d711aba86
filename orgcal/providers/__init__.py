"""Calendar providers."""

from orgcal.providers.base import CalendarProvider
from orgcal.providers.eventkit import EventKitProvider

__all__ = [
    "CalendarProvider",
    "EventKitProvider",
]
