"""Utility functions for lineupcal."""

from lineupcal.utils.preview import format_event_datetime, format_event_preview, format_warning
from lineupcal.utils.text_editing import count_events, move_event, move_event_down, move_event_up

__all__ = [
    "format_event_datetime",
    "format_event_preview",
    "format_warning",
    "count_events",
    "move_event",
    "move_event_up",
    "move_event_down",
]
