"""Parsing and formatting of time, pace, distance and speed text.

Parsers never raise. Text that does not match the allowed pattern is treated
as absent and returned as None, so a typed "0" stays distinguishable from an
empty field.
"""

import math
import re

from loguru import logger

from pacer.pacing.constants import MAX_DISTANCE_M, MAX_DURATION_S, MAX_SPEED_KMH

_DURATION_PATTERN = re.compile(r"[0-9:]+")
_DECIMAL_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")
_START_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def parse_duration(text: str | None) -> int | None:
    """Parse HH:MM:SS, MM:SS or SS into seconds.

    Parts are read right to left as seconds, minutes and hours. Minutes and
    seconds are not range-checked, so "90:00" is 5400 seconds.

    Args:
        text: Raw text entered by the athlete

    Returns:
        Seconds clamped to [0, 86400], or None for blank or invalid text
    """
    if text is None:
        return None
    text = text.strip()
    if not text or not _DURATION_PATTERN.fullmatch(text):
        return None

    parts = text.split(":")
    if len(parts) > 3 or any(not part for part in parts):
        logger.debug(f"Ignoring malformed duration {text!r}")
        return None

    seconds = 0
    for multiplier, part in zip((1, 60, 3600), reversed(parts), strict=False):
        seconds += int(part) * multiplier

    return int(_clamp(seconds, 0, MAX_DURATION_S))


def _round_seconds(seconds: float | None) -> int | None:
    if seconds is None or math.isnan(seconds) or seconds <= 0:
        return None
    rounded = math.floor(seconds + 0.5)
    return rounded if rounded > 0 else None


def format_duration(seconds: float | None) -> str:
    """Format seconds as MM:SS, or HH:MM:SS once there is an hour component.

    Returns an empty string for None, NaN and non-positive values.
    """
    total = _round_seconds(seconds)
    if total is None:
        return ""
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours == 0:
        return f"{minutes:02d}:{secs:02d}"
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_pace(seconds: float | None) -> str:
    """Format a pace in seconds as MM:SS. Minutes may exceed 59."""
    total = _round_seconds(seconds)
    if total is None:
        return ""
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def _parse_decimal(text: str | None) -> float | None:
    if text is None:
        return None
    text = text.strip()
    if not text or not _DECIMAL_PATTERN.fullmatch(text) or text == ".":
        return None
    return float(text)


def parse_distance(text: str | None) -> float | None:
    """Parse a distance in meters, clamped to [0, 1_000_000]."""
    value = _parse_decimal(text)
    if value is None:
        return None
    return _clamp(value, 0.0, MAX_DISTANCE_M)


def parse_speed(text: str | None, ceiling: float = MAX_SPEED_KMH) -> float | None:
    """Parse a speed in km/h.

    Values above the ceiling are clamped, not rejected.
    """
    value = _parse_decimal(text)
    if value is None:
        return None
    if value > ceiling:
        logger.debug(f"Clamping speed {value} km/h to ceiling {ceiling}")
    return _clamp(value, 0.0, ceiling)


def format_distance(meters: float | None) -> str:
    """Format meters as a whole number, rounding halves up."""
    if meters is None or math.isnan(meters) or math.isinf(meters):
        return ""
    return str(math.floor(meters + 0.5))


def format_speed(kmh: float | None) -> str:
    """Format km/h with two decimals."""
    if kmh is None or math.isnan(kmh):
        return ""
    return f"{kmh:.2f}"


def parse_start_time(text: str | None) -> str | None:
    """Normalize a start time of day to HH:MM.

    The start time is informational only and never enters a calculation.
    """
    if text is None:
        return None
    match = _START_TIME_PATTERN.fullmatch(text.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"
