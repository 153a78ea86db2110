"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest

from pacer.db.session import dispose_engines
from pacer.pace_sets.repository import PaceSetRepository
from pacer.pace_sets.service import PaceSetService
from pacer.pace_sets.store import InMemoryKeyValueStore
from pacer.pacing.solver import solve_form
from pacer.pacing.types import DisciplineFields, FormSolution, RaceForm, TransitionFields


@pytest.fixture
def olympic_form() -> RaceForm:
    """Olympic distance form with two values per discipline.

    Swim 1500 m at 1:40/100m, T1 2:00, bike 40 km in 1:05:00, T2 1:30,
    run 10 km in 50:00.
    """
    return RaceForm(
        swim=DisciplineFields(distance="1500", pace_or_speed="1:40"),
        t1=TransitionFields(time="2:00"),
        bike=DisciplineFields(distance="40000", time="1:05:00"),
        t2=TransitionFields(time="1:30"),
        run=DisciplineFields(distance="10000", time="50:00"),
        start_time="7:30",
    )


@pytest.fixture
def olympic_solution(olympic_form: RaceForm) -> FormSolution:
    return solve_form(olympic_form)


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(memory_store: InMemoryKeyValueStore) -> PaceSetRepository:
    return PaceSetRepository(memory_store)


@pytest.fixture
def service(repository: PaceSetRepository) -> PaceSetService:
    return PaceSetService(repository)


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """Temporary SQLite database, engines disposed after the test."""
    yield f"sqlite:///{tmp_path / 'pacer_test.db'}"
    dispose_engines()
