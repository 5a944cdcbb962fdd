"""Core parsing and export logic for lineupcal."""

from lineupcal.core.event_model import ParseResult, ParseWarning, ProvisionalEvent, Severity
from lineupcal.core.recognizers import Recognition, Recognizer, recognize, parse_duration
from lineupcal.core.line_parser import parse_text
from lineupcal.core.scheduler import resolve_start_times, round_up_to_interval
from lineupcal.core.ics_builder import build_ics_from_events, write_ics_file

__all__ = [
    "ParseResult",
    "ParseWarning",
    "ProvisionalEvent",
    "Severity",
    "Recognition",
    "Recognizer",
    "recognize",
    "parse_duration",
    "parse_text",
    "resolve_start_times",
    "round_up_to_interval",
    "build_ics_from_events",
    "write_ics_file",
]
