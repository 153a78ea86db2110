"""Tests for time, pace, distance and speed parsing and formatting.

Invalid text is absent (None), never an exception, and never confused with
an entered zero.
"""

import math

import pytest

from pacer.pacing.parsing import (
    format_distance,
    format_duration,
    format_pace,
    format_speed,
    parse_distance,
    parse_duration,
    parse_speed,
    parse_start_time,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("45", 45),
        ("05:00", 300),
        ("1:40", 100),
        ("1:02:03", 3723),
        ("90:00", 5400),
        (" 50:00 ", 3000),
        ("0", 0),
    ],
)
def test_parse_duration_reads_parts_right_to_left(text, expected):
    """Test that one part is seconds, two are MM:SS and three are HH:MM:SS."""
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "5:3a", "1.5", "-10", "5:", ":30", "1:2:3:4"])
def test_parse_duration_invalid_is_absent(text):
    """Test that blank or malformed text parses to None."""
    assert parse_duration(text) is None


def test_parse_duration_clamps_to_one_day():
    assert parse_duration("25:00:00") == 86400
    assert parse_duration("24:00:00") == 86400


def test_format_duration_switches_to_hours():
    """Test MM:SS below one hour and HH:MM:SS from one hour on."""
    assert format_duration(300) == "05:00"
    assert format_duration(3599) == "59:59"
    assert format_duration(3600) == "01:00:00"
    assert format_duration(8610) == "02:23:30"


@pytest.mark.parametrize("value", [None, 0, -5, math.nan])
def test_format_duration_empty_for_non_positive(value):
    assert format_duration(value) == ""


def test_format_duration_rounds_to_nearest_second():
    assert format_duration(299.4) == "04:59"
    assert format_duration(299.5) == "05:00"


def test_format_pace_never_shows_hours():
    assert format_pace(100) == "01:40"
    assert format_pace(3723) == "62:03"
    assert format_pace(0) == ""


@pytest.mark.parametrize("text", ["00:45", "05:00", "59:59", "01:00:00", "02:23:30", "23:59:59"])
def test_duration_round_trip(text):
    """Test that parsing then formatting gives the original text back."""
    assert format_duration(parse_duration(text)) == text


def test_duration_round_trip_drops_zero_hours():
    assert format_duration(parse_duration("00:25:00")) == "25:00"


def test_parse_distance():
    assert parse_distance("1500") == 1500.0
    assert parse_distance("1500.5") == 1500.5
    assert parse_distance(".5") == 0.5
    assert parse_distance("0") == 0.0


@pytest.mark.parametrize("text", ["", ".", "1,5", "abc", "1.2.3", "-100", None])
def test_parse_distance_invalid_is_absent(text):
    assert parse_distance(text) is None


def test_parse_distance_clamps_to_1000_km():
    assert parse_distance("2000000") == 1_000_000.0


def test_parse_speed_clamps_to_ceiling():
    """Test that speeds above the ceiling are clamped, not rejected."""
    assert parse_speed("36.5") == 36.5
    assert parse_speed("250") == 100.0
    assert parse_speed("250", ceiling=150.0) == 150.0
    assert parse_speed("fast") is None


def test_format_distance_and_speed():
    assert format_distance(1499.6) == "1500"
    assert format_distance(1500.5) == "1501"
    assert format_distance(None) == ""
    assert format_speed(36.923) == "36.92"
    assert format_speed(None) == ""


def test_parse_start_time():
    assert parse_start_time("7:05") == "07:05"
    assert parse_start_time("07:30") == "07:30"
    assert parse_start_time("24:00") is None
    assert parse_start_time("7:60") is None
    assert parse_start_time("") is None
