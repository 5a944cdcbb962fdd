"""Custom exceptions for lineupcal."""

from lineupcal.exceptions.errors import (
    LineupCalError,
    ConfigurationError,
    ExportError,
)

__all__ = [
    "LineupCalError",
    "ConfigurationError",
    "ExportError",
]
