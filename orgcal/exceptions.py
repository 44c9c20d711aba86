"""Exception hierarchy for calendar export operations."""


class OrgCalError(Exception):
    """Base exception for calendar export operations."""

    pass


class CalendarProviderError(OrgCalError):
    """Calendar provider unavailable, access denied, or query failed."""

    pass


class CalendarNotFoundError(OrgCalError):
    """Requested calendar name has no match in the provider."""

    pass


class InvalidDateError(OrgCalError):
    """Date argument is neither an ISO date nor a day offset."""

    pass


class OutputWriteError(OrgCalError):
    """Error while writing the output file."""

    pass
