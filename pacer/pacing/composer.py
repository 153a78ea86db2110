"""Total race time from the five segments.

Partial input is fine: a missing or failed discipline adds nothing to the
total instead of invalidating it.
"""

from pacer.pacing.parsing import format_duration
from pacer.pacing.types import DisciplineResult, TotalTime


def segment_seconds(result: DisciplineResult | None) -> int:
    """Seconds a solved discipline adds to the total."""
    if result is None or result.error or result.duration_s is None:
        return 0
    return max(0, result.duration_s)


def compose_total(
    swim: DisciplineResult | None,
    t1_s: int | None,
    bike: DisciplineResult | None,
    t2_s: int | None,
    run: DisciplineResult | None,
) -> int:
    """Sum swim, T1, bike, T2 and run in seconds."""
    transitions = max(0, t1_s or 0) + max(0, t2_s or 0)
    return segment_seconds(swim) + segment_seconds(bike) + segment_seconds(run) + transitions


def total_time(total_s: int) -> TotalTime | None:
    """Wrap a total for display.

    Returns None for a zero total, meaning nothing has been computed yet and
    there is nothing to show or save.
    """
    if total_s <= 0:
        return None
    return TotalTime(total_s=total_s, display=format_duration(total_s))
