"""Date range resolution from day offsets."""

import re
from datetime import date, datetime, timedelta
from typing import Union

from pydantic import BaseModel, model_validator

from orgcal.config import OrgCalConfig
from orgcal.exceptions import InvalidDateError

DateBound = Union[date, datetime, int]

_OFFSET_PATTERN = re.compile(r"^[+-]?\d+$")


class DateRange(BaseModel):
    """Inclusive range of calendar days."""

    start: date
    end: date

    @model_validator(mode="after")
    def validate_order(self):
        if self.end < self.start:
            raise ValueError("end must be >= start")
        return self

    @property
    def start_datetime(self) -> datetime:
        """First instant of the start day."""
        return datetime.combine(self.start, datetime.min.time())

    @property
    def end_datetime(self) -> datetime:
        """Last instant of the end day."""
        return datetime.combine(self.end, datetime.max.time())


def offset_date(days: int, now: datetime | None = None) -> date:
    """Return the local date shifted by a number of days.

    Args:
        days: Signed day offset (negative goes into the past)
        now: Reference time, defaults to the current local time

    Returns:
        The shifted date
    """
    if now is None:
        now = datetime.now()
    return (now + timedelta(days=days)).date()


def _resolve_bound(value: DateBound | None, default_offset: int, now: datetime) -> date:
    if value is None:
        return offset_date(default_offset, now)
    if isinstance(value, bool):
        raise InvalidDateError(f"Invalid date bound: {value!r}")
    if isinstance(value, int):
        return offset_date(value, now)
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_range(
    start: DateBound | None = None,
    end: DateBound | None = None,
    config: OrgCalConfig | None = None,
    now: datetime | None = None,
) -> DateRange:
    """Resolve optional start/end bounds into a concrete date range.

    Omitted bounds fall back to the configured day offsets. Integer bounds
    are treated as offsets from today.

    Raises:
        InvalidDateError: If the resolved end falls before the start
    """
    if config is None:
        config = OrgCalConfig()
    if now is None:
        now = datetime.now()

    start_date = _resolve_bound(start, config.start_offset_days, now)
    end_date = _resolve_bound(end, config.end_offset_days, now)
    if end_date < start_date:
        raise InvalidDateError(
            f"End date {end_date.isoformat()} is before start date {start_date.isoformat()}"
        )
    return DateRange(start=start_date, end=end_date)


def parse_date_arg(value: str) -> date | int:
    """Parse a CLI date argument.

    A signed integer (e.g. "-7", "+30", "0") is a day offset; anything
    else must be an ISO date (YYYY-MM-DD).
    """
    text = value.strip()
    if _OFFSET_PATTERN.match(text):
        return int(text)
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDateError(
            f"Invalid date '{value}'. Use YYYY-MM-DD or a day offset like -7"
        ) from None
