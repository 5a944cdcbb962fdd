"""
lineupcal - Lineup Text to Calendar Converter

Turns a hand-typed running order of performances into timed events and
exports them as an iCalendar file.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from lineupcal.config.settings import ParserConfig, load_config
from lineupcal.exceptions.errors import (
    LineupCalError,
    ConfigurationError,
    ExportError,
)
from lineupcal.core.event_model import ParseResult, ParseWarning, ProvisionalEvent, Severity
from lineupcal.core.line_parser import parse_text
from lineupcal.core.ics_builder import build_ics_from_events, write_ics_file

__all__ = [
    # Version
    "__version__",
    # Config
    "ParserConfig",
    "load_config",
    # Exceptions
    "LineupCalError",
    "ConfigurationError",
    "ExportError",
    # Core
    "ParseResult",
    "ParseWarning",
    "ProvisionalEvent",
    "Severity",
    "parse_text",
    "build_ics_from_events",
    "write_ics_file",
]
