class RashiError(Exception):
    """Base error."""

class InvalidInputError(RashiError, ValueError):
    """Raised when a birth instant (or a number derived from it) is malformed or non-finite."""

class ResolutionError(RashiError):
    """Raised when a place cannot be resolved to a location and timezone."""

    def __init__(self, message: str = "location not found", *, place: str = ""):
        super().__init__(message)
        self.place = place

class ResolverUnavailableError(RashiError):
    """Raised when the geocoding service itself fails (network, timeout, quota)."""

    def __init__(self, message: str = "time resolution failed", *, place: str = ""):
        super().__init__(message)
        self.place = place

class InsightUnavailableError(RashiError):
    """Raised when an insight provider fails or returns incomplete data."""

    def __init__(self, message: str = "insights unavailable"):
        super().__init__(message)
