"""Pace set service.

Holds the displayed list of saved pace sets and turns save/delete actions into
outcomes with at most one alert each. A failed storage call leaves the
displayed list exactly as it was.
"""

from typing import Literal

from loguru import logger
from pydantic import BaseModel

from pacer.errors import PacerError, StorageFailureError
from pacer.pace_sets.alerts import (
    Alert,
    delete_confirmation,
    error_alert,
    overwrite_confirmation,
    success_alert,
)
from pacer.pace_sets.builder import build_record, validate_record_inputs
from pacer.pace_sets.repository import PaceSetRepository
from pacer.pace_sets.types import PaceSet
from pacer.pacing.types import FormSolution

SaveStatus = Literal["created", "replaced", "conflict", "invalid", "failed"]


class SaveOutcome(BaseModel):
    """Result of a save action.

    Attributes:
        status: created, replaced, conflict (needs confirmation), invalid or failed
        pace_set: Stored set for created/replaced, the clashing set for conflict
        alert: Alert to show, if any
    """

    status: SaveStatus
    pace_set: PaceSet | None = None
    alert: Alert | None = None

    @property
    def saved(self) -> bool:
        return self.status in ("created", "replaced")


class DeleteOutcome(BaseModel):
    deleted: bool
    alert: Alert


class PaceSetService:
    def __init__(self, repository: PaceSetRepository):
        self.repository = repository
        self.pace_sets: list[PaceSet] = []

    def refresh(self) -> Alert | None:
        """Reload the list, newest first. Returns an alert if loading failed."""
        try:
            self.pace_sets = self.repository.load_newest_first()
        except StorageFailureError as e:
            logger.error(f"Failed to load pace sets: {e}")
            return error_alert("Loading saved pace sets failed.")
        return None

    def get(self, pace_set_id: str) -> PaceSet | None:
        for pace_set in self.pace_sets:
            if pace_set.id == pace_set_id:
                return pace_set
        return None

    def save(self, name: str | None, solution: FormSolution, confirm_overwrite: bool = False) -> SaveOutcome:
        """Save the solved form under a name.

        A case-insensitive name clash is never overwritten silently: without
        confirm_overwrite the collection is left untouched and a confirmation
        alert is returned.
        """
        total_s = solution.total.total_s if solution.total else 0
        try:
            trimmed = validate_record_inputs(name, total_s)
        except PacerError as e:
            return SaveOutcome(status="invalid", alert=error_alert(e.message))

        try:
            existing = self.repository.find_by_name(trimmed)
            if existing is not None and not confirm_overwrite:
                logger.info(f"Pace set name {trimmed!r} clashes with {existing.id}, confirmation required")
                return SaveOutcome(status="conflict", pace_set=existing, alert=overwrite_confirmation(existing.name))

            record = build_record(
                trimmed,
                solution.snapshot(),
                solution.total.display,
                total_s,
                existing=existing,
            )
            replaced = self.repository.save(record)
        except StorageFailureError as e:
            logger.error(f"Failed to save pace set {trimmed!r}: {e}")
            return SaveOutcome(status="failed", alert=error_alert("Saving the pace set failed."))

        self.pace_sets = sorted(
            [pace_set for pace_set in self.pace_sets if pace_set.id != record.id] + [record],
            key=lambda pace_set: pace_set.created_at,
            reverse=True,
        )
        if replaced:
            return SaveOutcome(status="replaced", pace_set=record, alert=success_alert(f'Pace set "{record.name}" replaced.'))
        return SaveOutcome(status="created", pace_set=record, alert=success_alert(f'Pace set "{record.name}" saved.'))

    def request_delete(self, pace_set_id: str) -> Alert:
        """Build the delete confirmation for a displayed pace set."""
        pace_set = self.get(pace_set_id)
        if pace_set is None:
            return error_alert(f"No pace set with id {pace_set_id}.")
        return delete_confirmation(pace_set.name)

    def delete(self, pace_set_id: str) -> DeleteOutcome:
        try:
            deleted = self.repository.delete(pace_set_id)
        except StorageFailureError as e:
            logger.error(f"Failed to delete pace set {pace_set_id}: {e}")
            return DeleteOutcome(deleted=False, alert=error_alert("Deleting the pace set failed."))

        if not deleted:
            return DeleteOutcome(deleted=False, alert=error_alert(f"No pace set with id {pace_set_id}."))

        self.pace_sets = [pace_set for pace_set in self.pace_sets if pace_set.id != pace_set_id]
        return DeleteOutcome(deleted=True, alert=success_alert("Pace set deleted."))
