"""Export macOS calendar events to org-mode outline files."""

from orgcal.config import OrgCalConfig
from orgcal.export import build_document, write_calendars_to_file
from orgcal.fetcher import CalendarFetcher

__all__ = [
    "CalendarFetcher",
    "OrgCalConfig",
    "build_document",
    "write_calendars_to_file",
]
