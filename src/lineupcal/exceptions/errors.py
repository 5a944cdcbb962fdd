"""Exception hierarchy for lineupcal."""

from typing import Optional


class LineupCalError(Exception):
    """Base exception for all lineupcal errors."""


class ConfigurationError(LineupCalError):
    """Raised when a parser configuration value is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ExportError(LineupCalError):
    """Raised when an event cannot be written to a calendar file."""

    def __init__(self, message: str, event_title: Optional[str] = None):
        super().__init__(message)
        self.event_title = event_title
