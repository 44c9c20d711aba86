"""CLI helpers shared by commands."""

from orgcal.dates import DateBound, parse_date_arg


def parse_bounds(
    start: str | None, end: str | None
) -> tuple[DateBound | None, DateBound | None]:
    """Parse --start/--end option values.

    Raises:
        InvalidDateError: If either value is not a date or day offset
    """
    start_bound = parse_date_arg(start) if start is not None else None
    end_bound = parse_date_arg(end) if end is not None else None
    return start_bound, end_bound


def calendar_names_or_default(names: list[str] | None) -> list[str] | None:
    """Treat an empty argument list as 'use the configured defaults'."""
    return names or None
