from datetime import datetime, timedelta

import pytest

from lineupcal import ParserConfig, Severity, parse_text
from lineupcal.core.line_parser import is_header_line, split_header

NOW = datetime(2026, 10, 19, 10, 7, 30)
CLOCK_START = datetime(2026, 10, 19, 10, 10)


@pytest.fixture
def config() -> ParserConfig:
    return ParserConfig(default_duration_minutes=5, gap_minutes=1, timezone_label="UTC")


def test_basic_event_with_explicit_date(config: ParserConfig) -> None:
    result = parse_text("A | Test Performance | Artist | Info\n    Oct 30 05:00am", config, now=NOW)

    assert len(result.events) == 1
    assert result.warnings == []
    event = result.events[0]
    assert event.grade == "A"
    assert event.title == "Test Performance"
    assert event.artist == "Artist"
    assert event.description == "Info"
    assert event.duration_minutes == 5
    assert event.start_time == datetime(2026, 10, 30, 5, 0)


def test_event_with_duration_only_gets_rounded_clock(config: ParserConfig) -> None:
    result = parse_text("B | Another Event | Artist | Info\n    30m", config, now=NOW)

    assert result.events[0].duration_minutes == 30
    assert result.events[0].start_time == CLOCK_START


def test_multiple_events_with_mixed_formats(config: ParserConfig) -> None:
    text = (
        "A | First Event | Artist1 | Info\n    Oct 30 05:00am\n\n"
        "B | Second Event | Artist2 | Info\n    1h30m"
    )
    events = parse_text(text, config, now=NOW).events

    assert len(events) == 2
    assert events[0].duration_minutes == 5
    assert events[1].duration_minutes == 90
    assert events[1].start_time == datetime(2026, 10, 30, 5, 6)


def test_iso_date_event(config: ParserConfig) -> None:
    event = parse_text("A | Test Event | Artist | Info\n    2024-10-30 05:00", config, now=NOW).events[0]

    assert event.start_time == datetime(2024, 10, 30, 5, 0)


def test_description_keeps_extra_pipes(config: ParserConfig) -> None:
    event = parse_text("A | Event | Artist | Part 1 | Part 2 | Part 3\n    5m", config, now=NOW).events[0]

    assert event.description == "Part 1 | Part 2 | Part 3"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A | Event | Artist |\n5m", ""),
        ("A | Event | Artist | " + "x" * 1000 + "\n5m", "x" * 1000),
        ("A | Event | Artist | Special chars: !@#$%^&*()\n5m", "Special chars: !@#$%^&*()"),
        ("A | Event | Artist | Single line desc\n5m", "Single line desc"),
        ("A | Event | Artist\n5m", ""),
    ],
)
def test_description_edge_cases(config: ParserConfig, text: str, expected: str) -> None:
    assert parse_text(text, config, now=NOW).events[0].description == expected


@pytest.mark.parametrize(
    "text, expected_events",
    [
        ("", 0),
        ("\n\n", 0),
        ("A | B | C", 1),
        ("Invalid Line", 0),
        ("|||||", 1),
    ],
)
def test_empty_and_malformed_inputs_are_silent(
    config: ParserConfig, text: str, expected_events: int
) -> None:
    result = parse_text(text, config, now=NOW)

    assert len(result.events) == expected_events
    assert result.warnings == []


def test_short_header_yields_empty_fields(config: ParserConfig) -> None:
    event = parse_text("A | B\n30m", config, now=NOW).events[0]

    assert (event.grade, event.title, event.artist, event.description) == ("", "", "", "")
    assert event.duration_minutes == 30
    assert event.source_text == "A | B\n30m"


def test_source_text_keeps_raw_detail_line(config: ParserConfig) -> None:
    event = parse_text("  A | T | X | D  \n    5m", config, now=NOW).events[0]

    assert event.source_text == "A | T | X | D\n    5m"


def test_header_on_last_line_has_defaults(config: ParserConfig) -> None:
    event = parse_text("A | T | X", config, now=NOW).events[0]

    assert event.duration_minutes == 5
    assert event.start_time == CLOCK_START
    assert event.source_text == "A | T | X\n"


def test_noise_lines_are_skipped(config: ParserConfig) -> None:
    text = (
        "Friday lineup\n\n"
        "A | Opener | Band One | \n    10m\n"
        "notes: bring cables\n"
        "B | Closer | Band Two | Encore\n    20m\n"
    )
    events = parse_text(text, config, now=NOW).events

    assert [e.title for e in events] == ["Opener", "Closer"]
    assert events[1].start_time == CLOCK_START + timedelta(minutes=11)


def test_crlf_input(config: ParserConfig) -> None:
    event = parse_text("A | T | X | D\r\n7m\r\n", config, now=NOW).events[0]

    assert event.description == "D"
    assert event.duration_minutes == 7


def test_unrecognized_detail_uses_defaults(config: ParserConfig) -> None:
    event = parse_text("A | T | X | D\nsoundcheck pending", config, now=NOW).events[0]

    assert event.duration_minutes == 5
    assert event.start_time == CLOCK_START


def test_zero_duration_falls_back_to_default(config: ParserConfig) -> None:
    event = parse_text("A | T | X | D\n0m", config, now=NOW).events[0]

    assert event.duration_minutes == 5


def test_gap_after_explicit_start(config: ParserConfig) -> None:
    gap_config = config.with_changes(gap_minutes=5)
    text = (
        "A | Event 1 | Artist | Info\n    2024-10-30 10:00\n"
        "B | Event 2 | Artist | Info\n    30m\n"
    )
    first, second = parse_text(text, gap_config, now=NOW).events

    assert second.start_time == first.start_time + timedelta(
        minutes=first.duration_minutes + gap_config.gap_minutes
    )
    assert second.start_time == datetime(2024, 10, 30, 10, 10)


def test_events_keep_input_order_and_follow_explicit_dates(config: ParserConfig) -> None:
    text = (
        "A | Event 1 | Artist | Info\n    15m\n"
        "B | Event 2 | Artist | Info\n    2020-01-01 09:00\n"
        "C | Event 3 | Artist | Info\n    5m\n"
    )
    events = parse_text(text, config, now=NOW).events

    assert [e.title for e in events] == ["Event 1", "Event 2", "Event 3"]
    assert events[0].start_time == CLOCK_START
    assert events[1].start_time == datetime(2020, 1, 1, 9, 0)
    assert events[2].start_time == datetime(2020, 1, 1, 9, 6)


def test_every_event_is_resolved(config: ParserConfig) -> None:
    text = "A | a | b\nwhatever\n|||\n\nC | c | d\n2h\nE | e\n"
    for event in parse_text(text, config, now=NOW).events:
        assert event.start_time is not None
        assert event.duration_minutes > 0


def test_same_input_gives_same_output(config: ParserConfig) -> None:
    text = "A | T | X | D\n    5m\nB | U | Y |\n    Oct 30 05:00am\n"
    later = NOW + timedelta(seconds=90)

    first = [e.to_dict() for e in parse_text(text, config, now=NOW).events]
    second = [e.to_dict() for e in parse_text(text, config, now=later).events]

    assert first == second


def test_config_is_not_modified(config: ParserConfig) -> None:
    before = config.with_changes()
    parse_text("A | T | X | D\n    5m", config, now=NOW)

    assert config == before


class TestReportedWarnings:
    @pytest.fixture
    def strict(self, config: ParserConfig) -> ParserConfig:
        return config.with_changes(report_warnings=True)

    def test_short_header(self, strict: ParserConfig) -> None:
        warnings = parse_text("A | B\n5m", strict, now=NOW).warnings

        assert len(warnings) == 1
        assert warnings[0].line_number == 1
        assert warnings[0].severity is Severity.WARNING
        assert "fewer than 3 fields" in warnings[0].message

    def test_unrecognized_detail(self, strict: ParserConfig) -> None:
        warnings = parse_text("\nA | B | C\nsoundcheck pending", strict, now=NOW).warnings

        assert [w.line_number for w in warnings] == [3]
        assert "soundcheck pending" in warnings[0].message

    def test_missing_detail(self, strict: ParserConfig) -> None:
        warnings = parse_text("A | B | C", strict, now=NOW).warnings

        assert [w.line_number for w in warnings] == [1]
        assert warnings[0].message == "Missing date, time or duration line"

    def test_clean_input_has_no_warnings(self, strict: ParserConfig) -> None:
        result = parse_text("A | B | C | D\n1h\n", strict, now=NOW)

        assert result.warnings == []
        assert not result.has_errors


def test_is_header_line() -> None:
    assert is_header_line("  a | b ")
    assert is_header_line("|")
    assert not is_header_line("   ")
    assert not is_header_line("Oct 30 05:00am")


def test_split_header_requires_three_fields() -> None:
    assert split_header("a | b") is None
    fields = split_header("a | b | c")
    assert (fields.grade, fields.title, fields.artist, fields.description) == ("a", "b", "c", "")


@pytest.mark.parametrize(
    "detail",
    [
        "99999999999h",
        "99999999h",
        "2024-10-30 05:00 +2500",
        "0001-01-01 00:00 +0100",
        "9999-12-31 23:59",
        "0000-01-01 00:00",
    ],
)
def test_out_of_range_detail_lines_do_not_raise(config: ParserConfig, detail: str) -> None:
    text = f"A | T | X | D\n{detail}\nB | U | Y |\n5m"

    events = parse_text(text, config, now=NOW).events

    assert len(events) == 2
    for event in events:
        assert event.start_time is not None
        assert event.duration_minutes > 0


def test_oversized_duration_uses_default(config: ParserConfig) -> None:
    event = parse_text("A | T | X | D\n99999999999h", config, now=NOW).events[0]

    assert event.duration_minutes == 5
    assert event.start_time == CLOCK_START


def test_impossible_date_rolls_forward(config: ParserConfig) -> None:
    event = parse_text("A | T | X | D\n02/30/2024 10:00", config, now=NOW).events[0]

    assert event.start_time == datetime(2024, 3, 1, 10, 0)
