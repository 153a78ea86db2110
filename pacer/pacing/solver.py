"""Per-discipline pace solver.

Given exactly two of distance, duration and pace (swim/run) or speed (bike),
derives the third. Swim pace is per 100 m, run pace per km, bike speed in km/h.
Errors are returned on the result, never raised, so a whole form can be solved
before anything is reported.
"""

from loguru import logger

from pacer.errors import InsufficientDataError, PacerError, TooManyFieldsError
from pacer.pacing.composer import compose_total, total_time
from pacer.pacing.constants import (
    DISCIPLINES,
    MAX_DISTANCE_M,
    MAX_DURATION_S,
    MAX_SPEED_KMH,
    METERS_PER_KM,
    PACE_UNIT_METERS,
    SECONDS_PER_HOUR,
    Discipline,
)
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
from pacer.pacing.types import DisciplineResult, FormSolution, RaceForm

_UNBOUNDED = float("inf")


def _present(value: float | None) -> bool:
    return value is not None and value > 0


def _format_rate(discipline: str, value: float | None) -> str:
    if discipline == "bike":
        return format_speed(value)
    return format_pace(value)


def _duration_update(seconds: float) -> dict:
    text = format_duration(min(seconds, MAX_DURATION_S))
    return {"duration_s": parse_duration(text), "time_text": text, "computed": "time"}


def _distance_update(meters: float | None) -> dict:
    if meters is None:
        return {"distance_m": None, "distance_text": "", "computed": "distance"}
    text = format_distance(min(meters, MAX_DISTANCE_M))
    return {"distance_m": parse_distance(text), "distance_text": text, "computed": "distance"}


def _solve_paced(discipline: str, distance_m: float | None, duration_s: int | None, pace: float | None) -> dict:
    """Solve swim or run, where pace is seconds per unit distance."""
    unit = PACE_UNIT_METERS[discipline]

    if _present(distance_m) and _present(duration_s):
        pace_s = duration_s / distance_m * unit
        text = format_pace(pace_s)
        return {"pace_or_speed": parse_duration(text), "pace_or_speed_text": text, "computed": "pace_or_speed"}

    if _present(distance_m) and _present(pace):
        return _duration_update(pace / unit * distance_m)

    pace_per_meter = pace / unit
    if pace_per_meter == 0:
        return _distance_update(None)
    return _distance_update(duration_s / pace_per_meter)


def _solve_bike(distance_m: float | None, duration_s: int | None, speed_kmh: float | None) -> dict:
    """Solve bike, where speed is km/h and time = distance / speed."""
    if _present(distance_m) and _present(duration_s):
        speed = (distance_m / METERS_PER_KM) / (duration_s / SECONDS_PER_HOUR)
        text = format_speed(speed)
        return {
            "pace_or_speed": parse_speed(text, ceiling=_UNBOUNDED),
            "pace_or_speed_text": text,
            "computed": "pace_or_speed",
        }

    if _present(distance_m) and _present(speed_kmh):
        return _duration_update((distance_m / METERS_PER_KM) / speed_kmh * SECONDS_PER_HOUR)

    return _distance_update(speed_kmh * (duration_s / SECONDS_PER_HOUR) * METERS_PER_KM)


def _with_error(result: DisciplineResult, issue: PacerError) -> DisciplineResult:
    logger.debug(f"{result.discipline}: {issue.code}")
    return result.model_copy(update={"error": issue.message, "error_code": issue.code})


def solve(
    discipline: Discipline,
    distance_m: float | None = None,
    duration_s: int | None = None,
    pace_or_speed: float | None = None,
) -> DisciplineResult:
    """Derive the missing value for one discipline.

    A value counts as present when it is not None and greater than zero.

    Args:
        discipline: "swim", "bike" or "run"
        distance_m: Distance in meters
        duration_s: Duration in seconds
        pace_or_speed: Seconds per 100 m (swim), seconds per km (run) or km/h (bike)

    Returns:
        DisciplineResult with the derived value filled in. With three values
        present the inputs come back unchanged with a TOO_MANY_FIELDS error;
        with one value present, INSUFFICIENT_DATA; with none, no error.

    Raises:
        ValueError: If discipline is not recognized
    """
    if discipline not in DISCIPLINES:
        raise ValueError(f"Unknown discipline: {discipline}. Valid disciplines: {list(DISCIPLINES)}")

    result = DisciplineResult(
        discipline=discipline,
        distance_m=distance_m,
        duration_s=duration_s,
        pace_or_speed=pace_or_speed,
        distance_text=format_distance(distance_m) if _present(distance_m) else "",
        time_text=format_duration(duration_s),
        pace_or_speed_text=_format_rate(discipline, pace_or_speed) if _present(pace_or_speed) else "",
    )

    present_count = sum(_present(value) for value in (distance_m, duration_s, pace_or_speed))

    if present_count > 2:
        return _with_error(result, TooManyFieldsError(discipline))
    if present_count == 1:
        return _with_error(result, InsufficientDataError(discipline))
    if present_count == 0:
        return result

    if discipline == "bike":
        update = _solve_bike(distance_m, duration_s, pace_or_speed)
    else:
        update = _solve_paced(discipline, distance_m, duration_s, pace_or_speed)

    logger.debug(f"{discipline}: computed {update['computed']}")
    return result.model_copy(update=update)


def _entered_text(raw: str, value: float | None, ceiling: float, formatter) -> str:
    """Text to show for a field that was typed rather than derived.

    Rejected text shows as blank and a clamped value shows as the value that
    was actually used, so the display never disagrees with the numbers.
    """
    if value is None:
        return ""
    if value >= ceiling:
        return formatter(value)
    return (raw or "").strip()


def solve_text(
    discipline: Discipline,
    distance: str = "",
    time: str = "",
    pace_or_speed: str = "",
    speed_ceiling: float = MAX_SPEED_KMH,
) -> DisciplineResult:
    """Parse raw text for one discipline and solve it.

    Entered text is kept as typed for the fields that were not derived, unless
    it was rejected or clamped.
    """
    distance_m = parse_distance(distance)
    duration_s = parse_duration(time)
    if discipline == "bike":
        rate = parse_speed(pace_or_speed, ceiling=speed_ceiling)
        rate_ceiling, rate_formatter = speed_ceiling, format_speed
    else:
        rate = parse_duration(pace_or_speed)
        rate_ceiling, rate_formatter = MAX_DURATION_S, format_pace

    result = solve(discipline, distance_m, duration_s, rate)

    entered = {
        "distance": ("distance_text", _entered_text(distance, distance_m, MAX_DISTANCE_M, format_distance)),
        "time": ("time_text", _entered_text(time, duration_s, MAX_DURATION_S, format_duration)),
        "pace_or_speed": ("pace_or_speed_text", _entered_text(pace_or_speed, rate, rate_ceiling, rate_formatter)),
    }
    update = {attr: text for name, (attr, text) in entered.items() if name != result.computed}
    return result.model_copy(update=update)


def solve_form(form: RaceForm, speed_ceiling: float = MAX_SPEED_KMH) -> FormSolution:
    """Solve every discipline of the form and compose the total.

    Discipline errors are collected in race order rather than stopping at the
    first one.
    """
    results = {
        discipline: solve_text(
            discipline,
            distance=form.discipline(discipline).distance,
            time=form.discipline(discipline).time,
            pace_or_speed=form.discipline(discipline).pace_or_speed,
            speed_ceiling=speed_ceiling,
        )
        for discipline in DISCIPLINES
    }
    t1_s = parse_duration(form.t1.time)
    t2_s = parse_duration(form.t2.time)

    total_s = compose_total(results["swim"], t1_s, results["bike"], t2_s, results["run"])
    errors = [result.error for result in results.values() if result.error]
    if errors:
        logger.info(f"Form solved with {len(errors)} error(s)")

    return FormSolution(
        swim=results["swim"],
        t1_s=t1_s,
        bike=results["bike"],
        t2_s=t2_s,
        run=results["run"],
        t1_text=format_duration(t1_s),
        t2_text=format_duration(t2_s),
        start_time=parse_start_time(form.start_time),
        total=total_time(total_s),
        errors=errors,
    )
