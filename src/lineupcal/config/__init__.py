"""Configuration module for lineupcal."""

from lineupcal.config.settings import ParserConfig, load_config
from lineupcal.config.constants import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_GAP_MINUTES,
    CLOCK_ROUNDING_MINUTES,
    ICS_PRODID,
    DEFAULT_EXPORT_FILENAME,
)

__all__ = [
    "ParserConfig",
    "load_config",
    "DEFAULT_DURATION_MINUTES",
    "DEFAULT_GAP_MINUTES",
    "CLOCK_ROUNDING_MINUTES",
    "ICS_PRODID",
    "DEFAULT_EXPORT_FILENAME",
]
