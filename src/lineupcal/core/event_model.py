"""Event data model for parsed lineups."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, Iterator, List, Optional


class Severity(str, Enum):
    """Severity of a parse warning."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class ProvisionalEvent:
    """One event built from a header line and its detail line.

    start_time stays None until the detail line supplies a date or the
    scheduler assigns one. Times are naive local wall-clock values.
    """

    grade: str
    title: str
    artist: str
    description: str
    start_time: Optional[datetime]
    duration_minutes: int
    source_text: str

    @property
    def is_resolved(self) -> bool:
        return self.start_time is not None

    @property
    def end_time(self) -> Optional[datetime]:
        if self.start_time is None:
            return None
        try:
            return self.start_time + timedelta(minutes=self.duration_minutes)
        except OverflowError:
            return None

    @property
    def summary(self) -> str:
        return f"{self.grade} | {self.title}"

    @property
    def calendar_description(self) -> str:
        if self.description:
            return f"{self.artist} - {self.description}"
        return self.artist

    def to_dict(self) -> Dict:
        """Convert to a plain dictionary with ISO formatted times.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "grade": self.grade,
            "title": self.title,
            "artist": self.artist,
            "description": self.description,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "duration_minutes": self.duration_minutes,
            "source_text": self.source_text,
        }


@dataclass(frozen=True)
class ParseWarning:
    """A recoverable anomaly found while parsing, tied to a 1-based line."""

    line_number: int
    message: str
    severity: Severity = Severity.WARNING


@dataclass
class ParseResult:
    """Ordered events plus any warnings produced by one parse call."""

    events: List[ProvisionalEvent] = field(default_factory=list)
    warnings: List[ParseWarning] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[ProvisionalEvent]:
        return iter(self.events)

    @property
    def has_errors(self) -> bool:
        return any(w.severity is Severity.ERROR for w in self.warnings)
