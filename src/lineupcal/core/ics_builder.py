"""ICS file building for resolved events."""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from icalendar import Calendar, Event, vDatetime, vText

from lineupcal.config.constants import (
    DEFAULT_EXPORT_FILENAME,
    ICS_PRODID,
    ICS_VERSION,
)
from lineupcal.core.event_model import ProvisionalEvent
from lineupcal.exceptions.errors import ExportError

logger = logging.getLogger(__name__)


def build_ics_from_events(
    events: Iterable[ProvisionalEvent],
    now: Optional[datetime] = None,
) -> str:
    """Build one calendar holding a VEVENT per event.

    Times are written as floating local values (no UTC suffix, no TZID).

    Args:
        events: Resolved events, in the order they should appear.
        now: Creation timestamp for DTSTAMP (default: now).

    Returns:
        ICS content string with CRLF line endings.

    Raises:
        ExportError: If an event has no start time.
    """
    stamp = (now or datetime.now()).replace(microsecond=0)
    cal = _create_ics_calendar()

    count = 0
    for index, event in enumerate(events):
        _validate_event(event, index)
        cal.add_component(_create_ics_event(event, stamp))
        count += 1

    logger.info("Built calendar with %d event(s)", count)
    return _format_ics_output(cal)


def write_ics_file(
    events: Iterable[ProvisionalEvent],
    path: Union[str, Path] = DEFAULT_EXPORT_FILENAME,
    now: Optional[datetime] = None,
) -> Path:
    """Write events to an .ics file.

    Args:
        events: Resolved events.
        path: Target file (default: events.ics in the working directory).
        now: Creation timestamp for DTSTAMP.

    Returns:
        The path written to.
    """
    target = Path(path)
    content = build_ics_from_events(events, now=now)
    # newline="" keeps the CRLF endings intact on every platform
    with open(target, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    logger.info("Wrote calendar to %s", target)
    return target


def _validate_event(event: ProvisionalEvent, index: int) -> None:
    """Ensure the event can be serialized.

    Args:
        event: Event to check.
        index: Position of the event, for error messages.

    Raises:
        ExportError: If the start time is missing or the end time cannot
            be represented.
    """
    if event.start_time is None:
        title = event.title or f"Event {index + 1}"
        msg = f"Cannot export '{title}': start time was never resolved"
        logger.error(msg)
        raise ExportError(msg, event_title=title)
    if event.end_time is None:
        title = event.title or f"Event {index + 1}"
        msg = f"Cannot export '{title}': end time is out of range"
        logger.error(msg)
        raise ExportError(msg, event_title=title)


def _create_ics_calendar() -> Calendar:
    """Create a new ICS calendar with standard headers.

    Returns:
        A new Calendar object with required headers.
    """
    cal = Calendar()
    cal.add("VERSION", ICS_VERSION)
    cal.add("PRODID", ICS_PRODID)
    return cal


def _create_ics_event(event: ProvisionalEvent, stamp: datetime) -> Event:
    """Create an ICS event component.

    Args:
        event: A resolved event.
        stamp: Creation timestamp.

    Returns:
        An Event component ready to add to a calendar.
    """
    ve = Event()
    ve.add("UID", str(uuid.uuid4()))
    # add() would coerce DTSTAMP to UTC; keep it as local wall-clock time
    ve["DTSTAMP"] = vDatetime(stamp)
    ve.add("DTSTART", event.start_time.replace(microsecond=0))
    ve.add("DTEND", event.end_time.replace(microsecond=0))
    ve.add("SUMMARY", vText(event.summary))
    ve.add("DESCRIPTION", vText(event.calendar_description))
    return ve


def _format_ics_output(cal: Calendar) -> str:
    """Format calendar to ICS string with proper line endings.

    Args:
        cal: The Calendar object to format.

    Returns:
        ICS content string with CRLF line endings.
    """
    raw_ical = cal.to_ical()
    decoded_ical = raw_ical.decode("utf-8", errors="replace")
    # Ensure CRLF line endings per RFC5545
    crlf_ical = decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")
    return crlf_ical
