"""Start time resolution for events without an explicit date."""

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, List, Optional

from lineupcal.config.constants import CLOCK_ROUNDING_MINUTES
from lineupcal.core.event_model import ProvisionalEvent

if TYPE_CHECKING:
    from lineupcal.config.settings import ParserConfig

logger = logging.getLogger(__name__)


def round_up_to_interval(moment: datetime, minutes: int = CLOCK_ROUNDING_MINUTES) -> datetime:
    """Drop seconds and round the minute up to the next multiple of `minutes`.

    A minute that is already a multiple is kept, so 10:10:45 becomes 10:10.

    Args:
        moment: The time to round.
        minutes: Rounding interval.

    Returns:
        The rounded time; may roll over into the next hour or day.
    """
    truncated = moment.replace(second=0, microsecond=0)
    remainder = truncated.minute % minutes
    if remainder:
        truncated += timedelta(minutes=minutes - remainder)
    return truncated


def resolve_start_times(
    events: List[ProvisionalEvent],
    config: "ParserConfig",
    now: Optional[datetime] = None,
) -> None:
    """Fill in missing start times in place.

    Events without a start get the running clock. After every event the
    clock moves to that event's start + duration + gap, so an explicit
    date always re-bases the events that follow it. Order is never changed.

    Args:
        events: Events in input order.
        config: Supplies the gap between events.
        now: Current time (default: read the wall clock, only if needed).
    """
    if all(event.is_resolved for event in events):
        return

    clock = round_up_to_interval(now or datetime.now())
    gap = timedelta(minutes=config.gap_minutes)

    for event in events:
        if event.start_time is None:
            event.start_time = clock
            logger.debug("Scheduled '%s' at %s", event.title, clock.isoformat())
        try:
            clock = event.start_time + timedelta(minutes=event.duration_minutes) + gap
        except OverflowError:
            # Past datetime.max; later undated events keep the previous clock
            logger.warning("Cannot schedule after '%s': time out of range", event.title)
