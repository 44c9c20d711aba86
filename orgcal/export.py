"""Export calendars to an org file."""

import logging
from pathlib import Path
from typing import Iterable

from orgcal.config import OrgCalConfig
from orgcal.dates import DateBound, resolve_range
from orgcal.fetcher import CalendarFetcher
from orgcal.output.org_formatter import format_document
from orgcal.output.org_writer import OrgWriter
from orgcal.providers.base import CalendarProvider
from orgcal.providers.eventkit import EventKitProvider

logger = logging.getLogger(__name__)


def _make_fetcher(
    config: OrgCalConfig,
    provider: CalendarProvider | None,
    fetcher: CalendarFetcher | None,
) -> CalendarFetcher:
    if fetcher is not None:
        return fetcher
    if provider is None:
        provider = EventKitProvider(access_timeout=config.access_timeout)
    return CalendarFetcher(provider, strict=config.strict_calendars)


def build_document(
    calendar_names: Iterable[str] | None = None,
    start: DateBound | None = None,
    end: DateBound | None = None,
    *,
    config: OrgCalConfig | None = None,
    provider: CalendarProvider | None = None,
    fetcher: CalendarFetcher | None = None,
) -> str:
    """Build the outline document for the given calendars and range.

    Omitted arguments fall back to the configured defaults. The provider is
    not contacted when there are no calendars to fetch.

    Returns:
        Document text without the mode line
    """
    if config is None:
        config = OrgCalConfig()

    names = list(config.default_calendars if calendar_names is None else calendar_names)
    date_range = resolve_range(start, end, config)
    if not names:
        logger.info("No calendars selected")
        return ""

    fetcher = _make_fetcher(config, provider, fetcher)
    sections = fetcher.fetch(names, date_range.start, date_range.end)
    return format_document(sections)


def write_calendars_to_file(
    calendar_names: Iterable[str] | None = None,
    start: DateBound | None = None,
    end: DateBound | None = None,
    *,
    config: OrgCalConfig | None = None,
    provider: CalendarProvider | None = None,
    fetcher: CalendarFetcher | None = None,
) -> Path:
    """Write the selected calendars' events to the configured org file.

    Args:
        calendar_names: Calendar display names (default: config.default_calendars)
        start: Start date or day offset (default: config.start_offset_days)
        end: End date or day offset (default: config.end_offset_days)
        config: Export configuration (default: OrgCalConfig())
        provider: Calendar provider (default: EventKit)
        fetcher: Pre-built fetcher, overrides provider

    Returns:
        Path of the written file

    Raises:
        OrgCalError: On any provider, date, or write failure; nothing is written
    """
    if config is None:
        config = OrgCalConfig()

    document = build_document(
        calendar_names,
        start,
        end,
        config=config,
        provider=provider,
        fetcher=fetcher,
    )
    return OrgWriter().write(document, config.output_path)
