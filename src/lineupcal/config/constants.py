"""Centralized constants for lineupcal."""

# Parser defaults
DEFAULT_DURATION_MINUTES = 5
DEFAULT_GAP_MINUTES = 1
DEFAULT_TIMEZONE_LABEL = "UTC"

# The running clock starts at "now" rounded up to this many minutes
CLOCK_ROUNDING_MINUTES = 5

# Environment variable names read by load_config()
DURATION_ENV_VAR = "LINEUPCAL_DEFAULT_DURATION"
GAP_ENV_VAR = "LINEUPCAL_GAP_MINUTES"
TIMEZONE_ENV_VAR = "LINEUPCAL_TIMEZONE"

# Header lines are split on this character
FIELD_DELIMITER = "|"
MIN_HEADER_FIELDS = 3

# ICS calendar constants
ICS_PRODID = "-//Calendar Event Generator//EN"
ICS_VERSION = "2.0"
DEFAULT_EXPORT_FILENAME = "events.ics"

# Warning messages (only emitted when report_warnings is enabled)
WARNING_SHORT_HEADER = "Header has fewer than {minimum} fields; grade, title and artist left empty"
WARNING_UNRECOGNIZED_DETAIL = "Unrecognized date, time or duration: {detail!r}"
WARNING_MISSING_DETAIL = "Missing date, time or duration line"
