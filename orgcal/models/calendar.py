"""Calendar models with Pydantic v2 validation."""

from pydantic import BaseModel, ConfigDict

from orgcal.models.event import Event


class Calendar(BaseModel):
    """A calendar as reported by the provider.

    The identifier is opaque and only meaningful to the provider that
    returned it. The name is the display title shown in the calendar app.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    name: str


class CalendarEvents(BaseModel):
    """A calendar together with the events fetched for it."""

    calendar: Calendar
    events: list[Event] = []

    @property
    def name(self) -> str:
        return self.calendar.name
