from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from orgsync.domain.entity_updates import (
    MissingReferenceError,
    NotFoundError,
    reconcile_employee,
)
from orgsync.domain.model import EntityType
from tests.helpers.organization import (
    edge_count,
    employee_update_from,
    load_department,
    load_employee,
    load_project,
    read_store,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from orgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UnitOfWorkFactory = Callable[[], SqlAlchemyUnitOfWork]


def test_updates_every_scalar_field(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    john = load_employee(seeded_unit_of_work, 1)
    update = employee_update_from(
        john,
        first_name="Jonathan",
        last_name="Doe-Smith",
        email="jonathan.doe@example.com",
        salary=Decimal("78000.50"),
        hire_date=datetime(2020, 1, 15, tzinfo=UTC),
        project_ids=(),
    )

    snapshot = reconcile_employee(update, unit_of_work_factory=seeded_unit_of_work)

    assert snapshot.employee.first_name == "Jonathan"
    assert snapshot.employee.last_name == "Doe-Smith"
    assert snapshot.employee.salary == Decimal("78000.50")
    stored = load_employee(seeded_unit_of_work, 1)
    assert stored == snapshot.employee
    assert stored.email == "jonathan.doe@example.com"
    assert stored.hire_date == datetime(2020, 1, 15, tzinfo=UTC)


def test_assigning_projects_twice_keeps_two_edges(
    seeded_unit_of_work: UnitOfWorkFactory,
) -> None:
    john = load_employee(seeded_unit_of_work, 1)
    assert john.project_ids == frozenset()
    update = employee_update_from(john, project_ids=(1, 2))

    first = reconcile_employee(update, unit_of_work_factory=seeded_unit_of_work)
    state_after_first = read_store(seeded_unit_of_work)
    second = reconcile_employee(update, unit_of_work_factory=seeded_unit_of_work)

    assert first.project_ids == (1, 2)
    assert [project.name for project in first.projects] == ["Project Alpha", "Project Beta"]
    assert second == first
    assert read_store(seeded_unit_of_work) == state_after_first
    assert edge_count(seeded_unit_of_work, employee_id=1) == 2


def test_project_set_is_replaced_not_merged(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    jane = load_employee(seeded_unit_of_work, 2)
    assert jane.project_ids == frozenset({1, 2})

    snapshot = reconcile_employee(
        employee_update_from(jane, project_ids=(2, 3)),
        unit_of_work_factory=seeded_unit_of_work,
    )

    assert snapshot.project_ids == (2, 3)
    assert load_employee(seeded_unit_of_work, 2).project_ids == frozenset({2, 3})
    alpha = load_project(seeded_unit_of_work, 1)
    assert alpha.name == "Project Alpha"
    assert 2 not in alpha.employee_ids
    assert 2 in load_project(seeded_unit_of_work, 3).employee_ids


def test_empty_project_list_removes_all_edges(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    frank = load_employee(seeded_unit_of_work, 8)

    snapshot = reconcile_employee(
        employee_update_from(frank, project_ids=()),
        unit_of_work_factory=seeded_unit_of_work,
    )

    assert snapshot.projects == ()
    assert edge_count(seeded_unit_of_work, employee_id=8) == 0
    assert len(read_store(seeded_unit_of_work).projects) == 3


def test_duplicate_project_ids_collapse(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    john = load_employee(seeded_unit_of_work, 1)

    snapshot = reconcile_employee(
        employee_update_from(john, project_ids=(3, 1, 3, 1)),
        unit_of_work_factory=seeded_unit_of_work,
    )

    assert snapshot.project_ids == (1, 3)
    assert edge_count(seeded_unit_of_work, employee_id=1) == 2


def test_changing_department_reparents_employee(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    john = load_employee(seeded_unit_of_work, 1)
    assert john.department_id == 1

    snapshot = reconcile_employee(
        employee_update_from(john, department_id=2),
        unit_of_work_factory=seeded_unit_of_work,
    )

    assert snapshot.department.name == "Marketing"
    assert snapshot.employee.department_id == 2
    assert load_department(seeded_unit_of_work, 1).employee_ids == frozenset({2, 8})
    assert load_department(seeded_unit_of_work, 2).employee_ids == frozenset({1, 3, 4})


def test_unknown_employee_is_not_found(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    before = read_store(seeded_unit_of_work)
    john = load_employee(seeded_unit_of_work, 1)

    with pytest.raises(NotFoundError) as exc:
        reconcile_employee(
            employee_update_from(john, id=999, first_name="NonExistent"),
            unit_of_work_factory=seeded_unit_of_work,
        )

    assert exc.value.kind is EntityType.EMPLOYEE
    assert exc.value.entity_id == 999
    assert read_store(seeded_unit_of_work) == before


@pytest.mark.parametrize(
    ("changes", "kind", "missing"),
    [
        ({"project_ids": (1, 999)}, EntityType.PROJECT, (999,)),
        ({"department_id": 999}, EntityType.DEPARTMENT, (999,)),
    ],
)
def test_missing_reference_leaves_store_untouched(
    seeded_unit_of_work: UnitOfWorkFactory,
    changes: dict[str, object],
    kind: EntityType,
    missing: tuple[int, ...],
) -> None:
    before = read_store(seeded_unit_of_work)
    john = load_employee(seeded_unit_of_work, 1)

    with pytest.raises(MissingReferenceError) as exc:
        reconcile_employee(
            employee_update_from(john, first_name="Changed", **changes),
            unit_of_work_factory=seeded_unit_of_work,
        )

    assert exc.value.kind is kind
    assert exc.value.missing_ids == missing
    assert read_store(seeded_unit_of_work) == before
