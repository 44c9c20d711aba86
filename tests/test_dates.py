"""Tests for date range resolution."""

from datetime import date, datetime

import pytest

from orgcal.config import OrgCalConfig
from orgcal.dates import DateRange, offset_date, parse_date_arg, resolve_range
from orgcal.exceptions import InvalidDateError

NOW = datetime(2025, 1, 15, 10, 30)


def test_offset_date_zero():
    """Test zero offset is today."""
    assert offset_date(0, NOW) == date(2025, 1, 15)


def test_offset_date_is_deterministic():
    """Test resolving twice in succession yields the same date."""
    for days in (-400, -7, 0, 1, 30, 365):
        assert offset_date(days) == offset_date(days)


def test_offset_date_month_rollover():
    """Test offsets crossing month boundaries."""
    assert offset_date(17, NOW) == date(2025, 2, 1)
    assert offset_date(-15, NOW) == date(2024, 12, 31)


def test_offset_date_year_rollover():
    """Test offsets crossing year boundaries."""
    assert offset_date(30, datetime(2024, 12, 15)) == date(2025, 1, 14)
    assert offset_date(-365, NOW) == date(2024, 1, 16)


def test_offset_date_leap_year():
    """Test leap day handling."""
    assert offset_date(1, datetime(2024, 2, 28)) == date(2024, 2, 29)
    assert offset_date(1, datetime(2025, 2, 28)) == date(2025, 3, 1)
    assert offset_date(-1, datetime(2024, 3, 1)) == date(2024, 2, 29)


def test_offset_date_defaults_to_now():
    """Test offset_date uses the current local date when now is omitted."""
    assert offset_date(0) == datetime.now().date()


def test_resolve_range_defaults():
    """Test omitted bounds use the configured offsets."""
    date_range = resolve_range(now=NOW)
    assert date_range.start == date(2025, 1, 8)
    assert date_range.end == date(2025, 2, 14)


def test_resolve_range_custom_offsets():
    """Test configured offsets are honored."""
    config = OrgCalConfig(start_offset_days=0, end_offset_days=1)
    date_range = resolve_range(config=config, now=NOW)
    assert date_range == DateRange(start=date(2025, 1, 15), end=date(2025, 1, 16))


def test_resolve_range_explicit_bounds():
    """Test dates, datetimes and offsets as explicit bounds."""
    date_range = resolve_range(date(2025, 1, 1), datetime(2025, 1, 31, 18, 0), now=NOW)
    assert date_range.start == date(2025, 1, 1)
    assert date_range.end == date(2025, 1, 31)

    date_range = resolve_range(-1, 1, now=NOW)
    assert date_range.start == date(2025, 1, 14)
    assert date_range.end == date(2025, 1, 16)


def test_resolve_range_end_before_start():
    """Test an inverted range is rejected."""
    with pytest.raises(InvalidDateError):
        resolve_range(date(2025, 2, 1), date(2025, 1, 1), now=NOW)


def test_date_range_datetimes():
    """Test the range covers whole days."""
    date_range = DateRange(start=date(2025, 1, 6), end=date(2025, 1, 6))
    assert date_range.start_datetime == datetime(2025, 1, 6, 0, 0)
    assert date_range.end_datetime.date() == date(2025, 1, 6)
    assert date_range.end_datetime.hour == 23


@pytest.mark.parametrize(
    "value,expected",
    [
        ("-7", -7),
        ("+30", 30),
        ("0", 0),
        (" 12 ", 12),
        ("2025-01-06", date(2025, 1, 6)),
    ],
)
def test_parse_date_arg(value, expected):
    """Test parsing offsets and ISO dates."""
    assert parse_date_arg(value) == expected


@pytest.mark.parametrize("value", ["tomorrow", "2025-13-01", "06/01/2025", ""])
def test_parse_date_arg_invalid(value):
    """Test invalid arguments raise InvalidDateError."""
    with pytest.raises(InvalidDateError):
        parse_date_arg(value)
