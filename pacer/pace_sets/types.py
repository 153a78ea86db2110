"""Saved pace set schema.

Pace sets are stored as a JSON list with camelCase keys.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pacer.pacing.types import DisciplineFields, TransitionFields


class PaceSet(BaseModel):
    """A named snapshot of a solved race form.

    Attributes:
        id: Opaque unique token, kept when the set is overwritten
        name: Display name, unique case-insensitively within the collection
        start_time: Optional HH:MM start, informational only
        total_time: Total as displayed (MM:SS or HH:MM:SS)
        total_duration_s: Total in seconds, always > 0
        created_at: When the set was saved
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str = Field(min_length=1)
    start_time: str | None = None
    swim: DisciplineFields = Field(default_factory=DisciplineFields)
    t1: TransitionFields = Field(default_factory=TransitionFields)
    bike: DisciplineFields = Field(default_factory=DisciplineFields)
    t2: TransitionFields = Field(default_factory=TransitionFields)
    run: DisciplineFields = Field(default_factory=DisciplineFields)
    total_time: str
    total_duration_s: int
    created_at: datetime

    def matches_name(self, name: str) -> bool:
        return self.name.strip().casefold() == name.strip().casefold()
