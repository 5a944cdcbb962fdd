"""Entry point for running lineupcal as a module.

Usage: python -m lineupcal [INPUT] [-o OUTPUT] [options]
"""

import argparse
import logging
import sys
from typing import List, Optional

from lineupcal.config.settings import load_config
from lineupcal.core.ics_builder import build_ics_from_events, write_ics_file
from lineupcal.core.line_parser import parse_text
from lineupcal.exceptions.errors import LineupCalError
from lineupcal.utils.preview import format_event_preview, format_warning

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lineupcal",
        description="Convert a lineup text block into an iCalendar file.",
    )
    parser.add_argument("input", nargs="?", help="Lineup text file (default: stdin)")
    parser.add_argument("-o", "--output", help="Write the .ics file here instead of stdout")
    parser.add_argument("--duration", type=int, help="Default event duration in minutes")
    parser.add_argument("--gap", type=int, help="Minutes between auto-scheduled events")
    parser.add_argument("--timezone", help="Timezone label shown in the preview")
    parser.add_argument("--env-file", default=".env", help="Optional .env file with defaults")
    parser.add_argument("--preview", action="store_true",
                        help="Print the parsed events instead of ICS output")
    parser.add_argument("--strict", action="store_true",
                        help="Report malformed headers and unrecognized detail lines")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line runner."""
    args = build_arg_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        config = load_config(args.env_file)
        overrides = {}
        if args.duration is not None:
            overrides["default_duration_minutes"] = args.duration
        if args.gap is not None:
            overrides["gap_minutes"] = args.gap
        if args.timezone:
            overrides["timezone_label"] = args.timezone
        if args.strict:
            overrides["report_warnings"] = True
        if overrides:
            config = config.with_changes(**overrides)
    except LineupCalError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as fh:
                text = fh.read()
        else:
            text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read lineup text: %s", e)
        return 1

    result = parse_text(text, config)
    for warning in result.warnings:
        logger.warning(format_warning(warning))

    if args.preview:
        cards = [format_event_preview(event, config) for event in result.events]
        print("\n\n".join(cards))
        return 0

    if args.output:
        write_ics_file(result.events, args.output)
    else:
        sys.stdout.write(build_ics_from_events(result.events))
    return 0


if __name__ == "__main__":
    sys.exit(main())
