"""Date, time and duration recognition for detail lines.

A detail line is tried against an ordered chain of recognizers; the first
one that matches wins. The order is a precedence policy: a bare duration
such as "1h30m" is never read as a date.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

_MONTH_LOOKUP = dateutil_parser.parserinfo()


@dataclass(frozen=True)
class Recognition:
    """Outcome of recognizing a detail line. At most one field is set."""

    start_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.start_time is not None or self.duration_minutes is not None


NO_MATCH = Recognition()


def _build_datetime(year, month, day, hour, minute, second=0) -> Optional[datetime]:
    """Build a datetime, carrying overflowing parts forward.

    Out-of-range months roll into the year and out-of-range days, hours,
    minutes and seconds roll into the following unit, so "02/30/2024 10:00"
    is March 1st. Returns None only when the result is outside the range
    datetime can represent.
    """
    year_offset, month_index = divmod(int(month) - 1, 12)
    try:
        first_of_month = datetime(int(year) + year_offset, month_index + 1, 1)
        return first_of_month + timedelta(
            days=int(day) - 1,
            hours=int(hour),
            minutes=int(minute),
            seconds=int(second),
        )
    except (ValueError, OverflowError):
        return None


class Recognizer(ABC):
    """One strategy for reading a trimmed, non-empty detail line."""

    name = "recognizer"

    @abstractmethod
    def match(self, line: str, reference: datetime) -> Optional[Recognition]:
        """Recognize the line.

        Args:
            line: Trimmed detail line.
            reference: Current time, for formats that omit the year.

        Returns:
            A Recognition, or None if this strategy does not apply. An
            unmatched Recognition (NO_MATCH) claims the line and ends the
            chain without a value.
        """


class DurationRecognizer(Recognizer):
    """Bare durations: "5m", "1h", "1h30m"."""

    name = "duration"
    PATTERN = re.compile(r"\d+[mh](\d+m)?")
    HOURS = re.compile(r"(\d+)h")
    MINUTES = re.compile(r"(\d+)m")

    def match(self, line, reference):
        if not self.PATTERN.fullmatch(line):
            return None
        minutes = parse_duration(line)
        try:
            timedelta(minutes=minutes)
        except OverflowError:
            logger.debug("Duration %r is too large, using the default", line)
            # Still a duration token: end the chain without a value
            return NO_MATCH
        return Recognition(duration_minutes=minutes)


class _RegexDateRecognizer(Recognizer):
    """Base for fixed numeric layouts; subclasses map groups to date parts."""

    PATTERN: re.Pattern

    def match(self, line, reference):
        m = self.PATTERN.match(line)
        if not m:
            return None
        start = self.to_datetime(m)
        return Recognition(start_time=start) if start else None

    @abstractmethod
    def to_datetime(self, m: re.Match) -> Optional[datetime]:
        pass


class IsoTimestampRecognizer(_RegexDateRecognizer):
    """2024-10-30T05:00:00"""

    name = "iso_timestamp"
    PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})$")

    def to_datetime(self, m):
        year, month, day, hours, minutes, seconds = m.groups()
        return _build_datetime(year, month, day, hours, minutes, seconds)


class DateSpaceTimeRecognizer(_RegexDateRecognizer):
    """2024-10-30 05:00"""

    name = "date_space_time"
    PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})\s+(\d{2}):(\d{2})$")

    def to_datetime(self, m):
        year, month, day, hours, minutes = m.groups()
        return _build_datetime(year, month, day, hours, minutes)


class NamedMonthRecognizer(Recognizer):
    """Oct 30 05:00am / October 30 5:00PM, in the reference year."""

    name = "named_month"
    PATTERN = re.compile(r"^([A-Za-z]+)\s+(\d+)\s+(\d+):(\d+)(am|pm)$", re.IGNORECASE)

    def match(self, line, reference):
        m = self.PATTERN.match(line)
        if not m:
            return None
        month_name, day, hours, minutes, ampm = m.groups()

        month = _MONTH_LOOKUP.month(month_name)
        if month is None and len(month_name) > 3:
            # "Octo", "Janu": match on the first three letters
            month = _MONTH_LOOKUP.month(month_name[:3])
        if month is None:
            return None

        hour = int(hours)
        if ampm.lower() == "pm" and hour < 12:
            hour += 12
        if ampm.lower() == "am" and hour == 12:
            hour = 0

        start = _build_datetime(reference.year, month, day, hour, minutes)
        return Recognition(start_time=start) if start else None


class SlashDateRecognizer(_RegexDateRecognizer):
    """10/30/2024 05:00 (month first)"""

    name = "slash_date"
    PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2})$")

    def to_datetime(self, m):
        month, day, year, hours, minutes = m.groups()
        return _build_datetime(year, month, day, hours, minutes)


class DotDateRecognizer(_RegexDateRecognizer):
    """30.10.2024 05:00 (day first)"""

    name = "dot_date"
    PATTERN = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})\s+(\d{1,2}):(\d{2})$")

    def to_datetime(self, m):
        day, month, year, hours, minutes = m.groups()
        return _build_datetime(year, month, day, hours, minutes)


class FallbackRecognizer(Recognizer):
    """Anything dateutil can read. Aware results become naive local time."""

    name = "fallback"

    def match(self, line, reference):
        try:
            parsed = dateutil_parser.parse(
                line,
                default=reference.replace(hour=0, minute=0, second=0, microsecond=0),
            )
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone().replace(tzinfo=None)
        except (ValueError, OverflowError) as e:
            logger.debug("Fallback date parse failed for %r: %s", line, e)
            return None
        return Recognition(start_time=parsed)


DEFAULT_RECOGNIZERS = (
    DurationRecognizer(),
    IsoTimestampRecognizer(),
    DateSpaceTimeRecognizer(),
    NamedMonthRecognizer(),
    SlashDateRecognizer(),
    DotDateRecognizer(),
    FallbackRecognizer(),
)


def parse_duration(duration: str) -> int:
    """Convert a duration token such as "1h30m" to minutes.

    Args:
        duration: Token with an optional hour part and optional minute part.

    Returns:
        Total minutes (hours * 60 + minutes).
    """
    total = 0
    hours = DurationRecognizer.HOURS.search(duration)
    minutes = DurationRecognizer.MINUTES.search(duration)
    if hours:
        total += int(hours.group(1)) * 60
    if minutes:
        total += int(minutes.group(1))
    return total


def recognize_with(
    line: str,
    recognizers: Sequence[Recognizer],
    reference: Optional[datetime] = None,
) -> Recognition:
    """Run a detail line through a custom recognizer chain.

    Args:
        line: Raw detail line; surrounding whitespace is ignored.
        recognizers: Strategies in priority order.
        reference: Current time (default: now).

    Returns:
        The Recognition of the first strategy that claims the line, or
        NO_MATCH.
    """
    line = line.strip()
    if not line:
        return NO_MATCH

    ref = reference or datetime.now()
    for recognizer in recognizers:
        result = recognizer.match(line, ref)
        if result is not None:
            logger.debug("Detail line %r claimed by %s", line, recognizer.name)
            return result
    return NO_MATCH


def recognize(line: str, reference: Optional[datetime] = None) -> Recognition:
    """Recognize a detail line with the default recognizer chain."""
    return recognize_with(line, DEFAULT_RECOGNIZERS, reference)
