"""Timezone label helpers.

The timezone label is carried for display only: it is never used to convert
or annotate event timestamps.
"""

import logging
from typing import Optional

import pytz
import tzlocal

from lineupcal.config.constants import DEFAULT_TIMEZONE_LABEL

logger = logging.getLogger(__name__)


def get_local_timezone_label() -> str:
    """Return the IANA name of the host's timezone.

    Returns:
        A zone name such as "Europe/Berlin", or "UTC" when the host zone
        cannot be determined.
    """
    try:
        local_tz_obj = tzlocal.get_localzone()
    except (LookupError, ValueError, OSError) as e:
        logger.warning("Could not determine local timezone, using %s: %s",
                       DEFAULT_TIMEZONE_LABEL, e)
        return DEFAULT_TIMEZONE_LABEL

    # zoneinfo exposes .key, pytz exposes .zone
    tz_name = getattr(local_tz_obj, "key", None) or getattr(local_tz_obj, "zone", None)
    return tz_name or str(local_tz_obj) or DEFAULT_TIMEZONE_LABEL


def is_known_timezone(label: str) -> bool:
    """Check whether a label names a zone in the IANA database.

    Args:
        label: Timezone label, e.g. "America/New_York".

    Returns:
        True if pytz knows the zone.
    """
    return bool(label) and label in pytz.all_timezones_set


def check_timezone_label(label: str) -> Optional[str]:
    """Return a warning message for labels that are not IANA zone names.

    Unknown labels are still accepted as opaque display strings.

    Args:
        label: The configured timezone label.

    Returns:
        Warning message, or None if the label is a known zone.
    """
    if is_known_timezone(label):
        return None

    warning = (
        f"Timezone '{label}' is not a known IANA zone name; "
        "it will be shown as-is and does not affect event times."
    )
    logger.warning(warning)
    return warning
