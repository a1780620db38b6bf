class CalendarError(Exception):
    """Base class for every error raised by rentcal."""


class InvalidDate(CalendarError, ValueError):
    """A date argument is missing or does not resolve to a valid instant."""


class InvalidHolidayList(CalendarError, TypeError):
    """The holiday set is not a sequence, or one of its entries is malformed."""


class InvalidChargePeriod(CalendarError, ValueError):
    """The charge period is not a whole number >= 1."""


class MissingRequiredDate(CalendarError, ValueError):
    """A required order window field is absent or empty."""


class InvalidArgument(CalendarError, TypeError):
    """The order window record itself is missing or not a mapping."""
