from __future__ import annotations


class CalendarServiceError(RuntimeError):
    """Base class for failures reported by the calendar service."""


class EventLoadError(CalendarServiceError):
    """Raised when the stored events cannot be fetched."""


class EventSaveError(CalendarServiceError):
    """Raised when creating, updating or deleting occurrences fails."""
