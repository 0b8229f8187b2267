"""
Domain-specific exception hierarchy for the gig schedule application.

The consolidation core never raises for bad schedule data; these errors
belong to the layers that read documents and payload metadata.
"""


class GigScheduleError(Exception):
    """Base class for all application-level errors."""


class DocumentLoadError(GigScheduleError):
    """Raised when a gig document cannot be read or parsed."""


class AvailabilityValidationError(GigScheduleError):
    """Raised when availability metadata has the wrong shape."""
