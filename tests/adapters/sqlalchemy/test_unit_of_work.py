from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from orgsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    assert not is_started()
    with pytest.raises(StartupError):
        SqlAlchemyUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:")
    engine_b = create_engine("sqlite+pysqlite:///:memory:")

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b
    assert is_started()


def test_repositories_are_only_available_inside_the_block(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    uow = SqlAlchemyUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.repositories

    with uow:
        assert uow.repositories.departments.list_all() == []

    with pytest.raises(StartupError):
        _ = uow.session


def test_commit_persists_changes(
    seeded_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with seeded_unit_of_work() as uow:
        hr = uow.repositories.departments.get(4)
        assert hr is not None
        hr.budget = Decimal("175000")
        uow.repositories.departments.save(hr)
        uow.commit()

    with seeded_unit_of_work() as uow:
        (hr,) = uow.repositories.departments.get_many([4])
        assert hr.budget == Decimal("175000.00")


def test_exception_rolls_back_uncommitted_writes(
    seeded_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    with pytest.raises(RuntimeError, match="boom"), seeded_unit_of_work() as uow:
        alpha = uow.repositories.projects.get(1)
        assert alpha is not None
        alpha.employee_ids = frozenset()
        uow.repositories.projects.save(alpha)
        raise RuntimeError("boom")

    with seeded_unit_of_work() as uow:
        (alpha,) = uow.repositories.projects.get_many([1])
        assert alpha.employee_ids == frozenset({2, 8})
