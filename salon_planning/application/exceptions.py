class TimeParseError(ValueError):
    """Raised when an HH:MM time string cannot be parsed."""
    pass


class BookingApiUpstreamError(RuntimeError):
    """Raised when the booking API fails (timeouts, network errors, error status codes)."""
    pass


class BookingApiContractError(RuntimeError):
    """Raised when the booking API answers with a payload that does not match the expected schema."""
    pass


class StaffNotFoundError(LookupError):
    pass
