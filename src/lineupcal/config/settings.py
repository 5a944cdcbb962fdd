"""Parser configuration and environment loading."""

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from lineupcal.config.constants import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_GAP_MINUTES,
    DURATION_ENV_VAR,
    GAP_ENV_VAR,
    TIMEZONE_ENV_VAR,
)
from lineupcal.core.timezone_utils import check_timezone_label, get_local_timezone_label
from lineupcal.exceptions.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Immutable settings for one parse call.

    Attributes:
        default_duration_minutes: Duration used when a detail line has none.
        gap_minutes: Idle minutes between the end of one event and the next
            auto-scheduled start.
        timezone_label: IANA-style zone name, shown to users only.
        report_warnings: Emit ParseWarning entries for malformed input.
    """

    default_duration_minutes: int = DEFAULT_DURATION_MINUTES
    gap_minutes: int = DEFAULT_GAP_MINUTES
    timezone_label: str = field(default_factory=get_local_timezone_label)
    report_warnings: bool = False

    def __post_init__(self):
        duration = self.default_duration_minutes
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise ConfigurationError(
                f"default_duration_minutes must be a positive integer, got {duration!r}",
                field="default_duration_minutes",
            )
        gap = self.gap_minutes
        if isinstance(gap, bool) or not isinstance(gap, int) or gap < 0:
            raise ConfigurationError(
                f"gap_minutes must be a non-negative integer, got {gap!r}",
                field="gap_minutes",
            )
        if not isinstance(self.timezone_label, str) or not self.timezone_label.strip():
            raise ConfigurationError(
                "timezone_label must be a non-empty string",
                field="timezone_label",
            )

    def with_changes(self, **changes) -> "ParserConfig":
        """Return a new config with the given fields replaced."""
        return dataclasses.replace(self, **changes)


def _read_int(values: Dict[str, Optional[str]], env_var: str, field_name: str) -> Optional[int]:
    raw = values.get(env_var)
    if raw is None or not str(raw).strip():
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(
            f"{env_var} must be an integer, got {raw!r}",
            field=field_name,
        ) from None


def load_config(env_file: Optional[Union[str, Path]] = None) -> ParserConfig:
    """Build a ParserConfig from a .env file and the process environment.

    Values from the process environment override those in the file. The
    file is read without mutating os.environ.

    Args:
        env_file: Optional path to a .env file.

    Returns:
        A validated ParserConfig.

    Raises:
        ConfigurationError: If a value is not a valid integer or out of range.
    """
    values: Dict[str, Optional[str]] = {}
    if env_file is not None and Path(env_file).exists():
        values.update(dotenv_values(env_file))
    for env_var in (DURATION_ENV_VAR, GAP_ENV_VAR, TIMEZONE_ENV_VAR):
        if env_var in os.environ:
            values[env_var] = os.environ[env_var]

    kwargs = {}
    duration = _read_int(values, DURATION_ENV_VAR, "default_duration_minutes")
    if duration is not None:
        kwargs["default_duration_minutes"] = duration
    gap = _read_int(values, GAP_ENV_VAR, "gap_minutes")
    if gap is not None:
        kwargs["gap_minutes"] = gap
    timezone_label = (values.get(TIMEZONE_ENV_VAR) or "").strip()
    if timezone_label:
        kwargs["timezone_label"] = timezone_label

    config = ParserConfig(**kwargs)
    check_timezone_label(config.timezone_label)
    logger.debug("Loaded parser config: %s", config)
    return config
