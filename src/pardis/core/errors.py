class PardisError(Exception):
    """Base error."""

class InvalidCalendarYear(PardisError, ValueError):
    """Raised when a Jalali year lies outside the break-point table domain."""

    def __init__(self, year: int):
        super().__init__(f"Invalid Jalali year: {year}")
        self.year = year

class UnknownCalendarError(PardisError, KeyError):
    """Raised when a calendar name is not registered."""
