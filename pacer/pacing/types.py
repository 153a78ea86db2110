"""Race form and solver result schema.

Raw form fields hold the text exactly as entered. Numeric values are None when
a field is absent, which is different from an entered zero.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pacer.pacing.constants import Discipline

ComputedField = Literal["distance", "time", "pace_or_speed"]


class DisciplineInput(BaseModel):
    """Parsed numeric input for one discipline.

    Attributes:
        distance_m: Distance in meters
        duration_s: Duration in whole seconds
        pace_or_speed: Seconds per 100 m (swim), seconds per km (run) or km/h (bike)
    """

    distance_m: float | None = None
    duration_s: int | None = None
    pace_or_speed: float | None = None


class DisciplineFields(BaseModel):
    """Raw text for one discipline."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    distance: str = ""
    time: str = ""
    pace_or_speed: str = ""


class TransitionFields(BaseModel):
    """Raw text for a transition (T1 or T2)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    time: str = ""


class RaceForm(BaseModel):
    """The whole race form in race order: swim, T1, bike, T2, run."""

    swim: DisciplineFields = Field(default_factory=DisciplineFields)
    t1: TransitionFields = Field(default_factory=TransitionFields)
    bike: DisciplineFields = Field(default_factory=DisciplineFields)
    t2: TransitionFields = Field(default_factory=TransitionFields)
    run: DisciplineFields = Field(default_factory=DisciplineFields)
    start_time: str = ""

    @classmethod
    def cleared(cls) -> "RaceForm":
        """Return an empty form."""
        return cls()

    def discipline(self, discipline: Discipline) -> DisciplineFields:
        return getattr(self, discipline)


class DisciplineResult(BaseModel):
    """Outcome of solving one discipline.

    The *_text fields are what gets displayed and saved. The numeric fields are
    the re-parsed texts, so both always agree.

    Attributes:
        computed: Which field was derived, None if nothing was derived
        error: Human-readable message when the entry could not be solved
        error_code: Error code matching pacer.errors
    """

    discipline: Discipline
    distance_m: float | None = None
    duration_s: int | None = None
    pace_or_speed: float | None = None
    distance_text: str = ""
    time_text: str = ""
    pace_or_speed_text: str = ""
    computed: ComputedField | None = None
    error: str | None = None
    error_code: str | None = None

    def as_fields(self) -> DisciplineFields:
        return DisciplineFields(
            distance=self.distance_text,
            time=self.time_text,
            pace_or_speed=self.pace_or_speed_text,
        )


class TotalTime(BaseModel):
    total_s: int
    display: str


class FormSolution(BaseModel):
    """Solved race form with batched errors and the optional total."""

    swim: DisciplineResult
    t1_s: int | None = None
    bike: DisciplineResult
    t2_s: int | None = None
    run: DisciplineResult
    t1_text: str = ""
    t2_text: str = ""
    start_time: str | None = None
    total: TotalTime | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def has_total(self) -> bool:
        return self.total is not None

    def results(self) -> list[DisciplineResult]:
        return [self.swim, self.bike, self.run]

    def snapshot(self) -> RaceForm:
        """Return the form as it should be displayed after solving."""
        return RaceForm(
            swim=self.swim.as_fields(),
            t1=TransitionFields(time=self.t1_text),
            bike=self.bike.as_fields(),
            t2=TransitionFields(time=self.t2_text),
            run=self.run.as_fields(),
            start_time=self.start_time or "",
        )
