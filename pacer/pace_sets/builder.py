"""Build pace set records from a solved form."""

import uuid
from datetime import datetime, timezone

from pacer.errors import EmptyNameError, NothingToSaveError
from pacer.pace_sets.types import PaceSet
from pacer.pacing.parsing import parse_start_time
from pacer.pacing.types import RaceForm


def validate_record_inputs(name: str | None, total_s: int) -> str:
    """Check save preconditions.

    Returns:
        The trimmed name

    Raises:
        EmptyNameError: If the name is blank after trimming
        NothingToSaveError: If no total has been computed
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise EmptyNameError()
    if total_s <= 0:
        raise NothingToSaveError()
    return trimmed


def generate_pace_set_id() -> str:
    return uuid.uuid4().hex


def build_record(
    name: str | None,
    form_snapshot: RaceForm,
    total_display: str,
    total_s: int,
    existing: PaceSet | None = None,
    now: datetime | None = None,
) -> PaceSet:
    """Assemble a pace set.

    When replacing an existing set its id is kept and every other field is
    taken from the new form.

    Args:
        name: Name chosen by the athlete
        form_snapshot: Solved form, as displayed
        total_display: Formatted total time
        total_s: Total in seconds
        existing: Set being overwritten, if any
        now: Creation time, defaults to the current UTC time

    Returns:
        New PaceSet

    Raises:
        EmptyNameError: If the name is blank
        NothingToSaveError: If total_s is not positive
    """
    trimmed = validate_record_inputs(name, total_s)
    return PaceSet(
        id=existing.id if existing is not None else generate_pace_set_id(),
        name=trimmed,
        start_time=parse_start_time(form_snapshot.start_time),
        swim=form_snapshot.swim.model_copy(),
        t1=form_snapshot.t1.model_copy(),
        bike=form_snapshot.bike.model_copy(),
        t2=form_snapshot.t2.model_copy(),
        run=form_snapshot.run.model_copy(),
        total_time=total_display,
        total_duration_s=total_s,
        created_at=now or datetime.now(timezone.utc),
    )
