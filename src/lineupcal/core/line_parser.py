"""Turn a lineup text block into an ordered list of timed events.

The text is a sequence of two-line records:

    A | Performance Title | Artist Name | Additional Info
        Oct 30 05:00am

The header line holds pipe-separated fields; the line after it holds a date
and time, a bare duration ("1h30m"), or anything else. Lines that are not
headers are ignored.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from lineupcal.config.constants import (
    FIELD_DELIMITER,
    MIN_HEADER_FIELDS,
    WARNING_MISSING_DETAIL,
    WARNING_SHORT_HEADER,
    WARNING_UNRECOGNIZED_DETAIL,
)
from lineupcal.core.event_model import ParseResult, ParseWarning, ProvisionalEvent, Severity
from lineupcal.core.recognizers import recognize
from lineupcal.core.scheduler import resolve_start_times

if TYPE_CHECKING:
    from lineupcal.config.settings import ParserConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderFields:
    """Textual fields of a header line."""

    grade: str = ""
    title: str = ""
    artist: str = ""
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.grade or self.title or self.artist or self.description)


def is_header_line(line: str) -> bool:
    """Return True if a line holds pipe-separated event fields."""
    stripped = line.strip()
    return bool(stripped) and FIELD_DELIMITER in stripped


def split_header(line: str) -> Optional[HeaderFields]:
    """Split a header line into grade, title, artist and description.

    The description is everything after the third delimiter, so further
    pipes stay in it verbatim.

    Args:
        line: Trimmed header line.

    Returns:
        HeaderFields, or None if the line has fewer than three fields.
    """
    parts = line.split(FIELD_DELIMITER)
    if len(parts) < MIN_HEADER_FIELDS:
        return None

    grade, title, artist = (part.strip() for part in parts[:MIN_HEADER_FIELDS])
    description = FIELD_DELIMITER.join(parts[MIN_HEADER_FIELDS:]).strip()
    return HeaderFields(grade=grade, title=title, artist=artist, description=description)


def parse_text(
    text: str,
    config: "ParserConfig",
    now: Optional[datetime] = None,
) -> ParseResult:
    """Parse a lineup text block into resolved events.

    Args:
        text: Raw text as typed by the user.
        config: Parser settings; never modified.
        now: Current time (default: the wall clock). Used for the year of
            "Oct 30 05:00am" style dates and to schedule undated events.

    Returns:
        ParseResult with events in input order, all with a start time.
    """
    now = now or datetime.now()
    lines = text.split("\n")
    events: List[ProvisionalEvent] = []
    warnings: List[ParseWarning] = []

    def warn(line_number: int, message: str) -> None:
        if config.report_warnings:
            warnings.append(ParseWarning(line_number, message, Severity.WARNING))

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if not line:
            i += 1
            continue
        if not is_header_line(line):
            logger.debug("Skipping line %d: not an event header", i + 1)
            i += 1
            continue

        fields = split_header(line)
        if fields is None:
            fields = HeaderFields()
            warn(i + 1, WARNING_SHORT_HEADER.format(minimum=MIN_HEADER_FIELDS))

        detail = lines[i + 1] if i + 1 < len(lines) else ""
        recognition = recognize(detail, now)
        if not detail.strip():
            warn(i + 1, WARNING_MISSING_DETAIL)
        elif not recognition.matched:
            logger.debug("Line %d: no date, time or duration in %r", i + 2, detail.strip())
            warn(i + 2, WARNING_UNRECOGNIZED_DETAIL.format(detail=detail.strip()))

        events.append(ProvisionalEvent(
            grade=fields.grade,
            title=fields.title,
            artist=fields.artist,
            description=fields.description,
            start_time=recognition.start_time,
            duration_minutes=recognition.duration_minutes or config.default_duration_minutes,
            source_text=f"{line}\n{detail}",
        ))
        # The detail line is consumed whether or not it was recognized
        i += 2

    resolve_start_times(events, config, now)

    logger.info("Parsed %d event(s) with %d warning(s)", len(events), len(warnings))
    return ParseResult(events=events, warnings=warnings)
