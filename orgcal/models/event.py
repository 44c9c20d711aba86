"""Event model with Pydantic v2 validation."""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Event(BaseModel):
    """Calendar event with start/end split into date and time parts."""

    model_config = ConfigDict(frozen=True)

    title: str
    start_date: date
    start_time: time
    end_date: date
    end_time: time

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def convert_date_triple(cls, v):
        """Convert a (month, day, year) triple to a date object."""
        if isinstance(v, (tuple, list)):
            if len(v) != 3:
                raise ValueError(f"Invalid date triple: {v}")
            month, day, year = v
            return date(year, month, day)
        return v

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def convert_time_pair(cls, v):
        """Convert an (hour, minute) pair to a time object."""
        if isinstance(v, (tuple, list)):
            if len(v) != 2:
                raise ValueError(f"Invalid time pair: {v}")
            hour, minute = v
            return time(hour, minute)
        return v

    @model_validator(mode="after")
    def validate_order(self):
        """Validate that the event does not end before it starts."""
        if self.end < self.start:
            raise ValueError("event end must be >= start")
        return self

    @classmethod
    def from_datetimes(cls, title: str, start: datetime, end: datetime) -> "Event":
        """Build an event from start and end datetimes (seconds are dropped)."""
        return cls(
            title=title,
            start_date=start.date(),
            start_time=start.time().replace(second=0, microsecond=0),
            end_date=end.date(),
            end_time=end.time().replace(second=0, microsecond=0),
        )

    @property
    def start(self) -> datetime:
        """Start as a naive local datetime."""
        return datetime.combine(self.start_date, self.start_time)

    @property
    def end(self) -> datetime:
        """End as a naive local datetime."""
        return datetime.combine(self.end_date, self.end_time)
