"""Human-readable rendering of parsed events."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from lineupcal.core.event_model import ParseWarning, ProvisionalEvent

if TYPE_CHECKING:
    from lineupcal.config.settings import ParserConfig


def format_event_datetime(moment: datetime, timezone_label: Optional[str] = None) -> str:
    """Format a start time for display, e.g. "Wed, Oct 30, 2024, 5:00 AM".

    The timezone label is appended as-is; no conversion is applied.

    Args:
        moment: Naive local time.
        timezone_label: Optional label shown in parentheses.

    Returns:
        Formatted string.
    """
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    text = (
        f"{moment.strftime('%a')}, {moment.strftime('%b')} {moment.day}, {moment.year}, "
        f"{hour}:{moment.minute:02d} {meridiem}"
    )
    if timezone_label:
        text += f" ({timezone_label})"
    return text


def format_event_preview(event: ProvisionalEvent, config: "ParserConfig") -> str:
    """Render an event as the lines of a preview card.

    Args:
        event: A parsed event.
        config: Supplies the timezone label.

    Returns:
        Multi-line string: summary, artist, description (if any), start time.
    """
    lines = [event.summary, event.artist]
    if event.description:
        lines.append(event.description)
    if event.start_time is not None:
        lines.append(format_event_datetime(event.start_time, config.timezone_label))
    else:
        lines.append("(unscheduled)")
    return "\n".join(lines)


def format_warning(warning: ParseWarning) -> str:
    return f"Line {warning.line_number}: {warning.message}"
