"""Pacing module - parsing, per-discipline solving and total time.

This module provides:
- Text parsing and formatting for durations, paces, distances and speeds
- The swim/bike/run solver that derives the missing value
- Composition of the five race segments into a total time
"""

from pacer.pacing.composer import compose_total, segment_seconds, total_time
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
from pacer.pacing.solver import solve, solve_form, solve_text
from pacer.pacing.types import (
    DisciplineFields,
    DisciplineInput,
    DisciplineResult,
    FormSolution,
    RaceForm,
    TotalTime,
    TransitionFields,
)

__all__ = [
    "DisciplineFields",
    "DisciplineInput",
    "DisciplineResult",
    "FormSolution",
    "RaceForm",
    "TotalTime",
    "TransitionFields",
    "compose_total",
    "format_distance",
    "format_duration",
    "format_pace",
    "format_speed",
    "parse_distance",
    "parse_duration",
    "parse_speed",
    "parse_start_time",
    "segment_seconds",
    "solve",
    "solve_form",
    "solve_text",
]
