from __future__ import annotations

from datetime import date

import pytest

from core.domain import DEFAULT_ASSIGNMENT_ROLE
from core.events.domain_events import domain_events
from core.exceptions import (
    BoundsViolationError,
    BusinessRuleError,
    CapacityExceededError,
    ConcurrencyError,
    NotFoundError,
    ValidationError,
)
from core.services.assignment import parse_allocation

MAR_1 = date(2026, 3, 1)
MAR_31 = date(2026, 3, 31)


def test_missing_fields_are_reported_together(services, engineer, project):
    asvc = services["assignment_service"]

    for args in (
        (None, project.id, 50, MAR_1, MAR_31),
        (engineer.id, "  ", 50, MAR_1, MAR_31),
        (engineer.id, project.id, None, MAR_1, MAR_31),
        (engineer.id, project.id, 50, None, MAR_31),
        (engineer.id, project.id, 50, MAR_1, ""),
    ):
        with pytest.raises(ValidationError) as exc:
            asvc.create_assignment(*args)
        assert exc.value.code == "MISSING_FIELDS"


def test_dates_must_parse_and_be_ordered(services, engineer, project):
    asvc = services["assignment_service"]

    with pytest.raises(ValidationError) as same_day:
        asvc.create_assignment(engineer.id, project.id, 50, MAR_1, MAR_1)
    assert same_day.value.code == "INVALID_DATES"

    with pytest.raises(ValidationError) as reversed_range:
        asvc.create_assignment(engineer.id, project.id, 50, MAR_31, MAR_1)
    assert reversed_range.value.code == "INVALID_DATES"

    with pytest.raises(ValidationError) as garbage:
        asvc.create_assignment(engineer.id, project.id, 50, "first of march", MAR_31)
    assert garbage.value.code == "INVALID_DATES"


@pytest.mark.parametrize("value", [0, -5, 101, 50.5, "abc", True, float("nan")])
def test_percentage_outside_one_to_hundred_is_rejected(services, engineer, project, value):
    with pytest.raises(ValidationError) as exc:
        services["assignment_service"].create_assignment(engineer.id, project.id, value, MAR_1, MAR_31)
    assert exc.value.code == "INVALID_PERCENTAGE"


def test_parse_allocation_accepts_integral_values():
    assert parse_allocation(1) == 1
    assert parse_allocation(100) == 100
    assert parse_allocation(75.0) == 75
    assert parse_allocation(" 40 ") == 40


def test_checks_run_in_order(services, project):
    asvc = services["assignment_service"]

    # bad dates win over a bad percentage and an unknown engineer
    with pytest.raises(ValidationError) as first:
        asvc.create_assignment("ghost", project.id, 0, MAR_31, MAR_1)
    assert first.value.code == "INVALID_DATES"

    # bad percentage wins over an unknown engineer
    with pytest.raises(ValidationError) as second:
        asvc.create_assignment("ghost", project.id, 0, MAR_1, MAR_31)
    assert second.value.code == "INVALID_PERCENTAGE"


def test_engineer_must_exist_with_engineer_role(services, project):
    asvc = services["assignment_service"]
    manager = services["engineer_service"].register_user("Boss", "boss@example.com", role="manager")

    with pytest.raises(NotFoundError) as unknown:
        asvc.create_assignment("ghost", project.id, 50, MAR_1, MAR_31)
    assert unknown.value.code == "ENGINEER_NOT_FOUND"

    with pytest.raises(NotFoundError) as not_engineer:
        asvc.create_assignment(manager.id, project.id, 50, MAR_1, MAR_31)
    assert not_engineer.value.code == "ENGINEER_NOT_FOUND"


def test_project_must_exist(services, engineer):
    with pytest.raises(NotFoundError) as exc:
        services["assignment_service"].create_assignment(engineer.id, "ghost", 50, MAR_1, MAR_31)
    assert exc.value.code == "PROJECT_NOT_FOUND"


@pytest.mark.parametrize("status", ["completed", "on-hold"])
def test_closed_project_rejects_even_with_spare_capacity(services, engineer, project, status):
    services["project_service"].set_status(project.id, status)

    with pytest.raises(BusinessRuleError) as exc:
        services["assignment_service"].create_assignment(engineer.id, project.id, 10, MAR_1, MAR_31)

    assert exc.value.code == "PROJECT_NOT_ASSIGNABLE"
    assert exc.value.details["status"] == status
    assert services["capacity_service"].available_capacity(engineer.id) == 100


def test_planning_project_accepts_assignments(services, engineer):
    planned = services["project_service"].create_project(
        "Gemini", "Still being planned", date(2026, 1, 1), date(2026, 6, 30)
    )
    a = services["assignment_service"].create_assignment(engineer.id, planned.id, 50, MAR_1, MAR_31)
    assert a.project_id == planned.id


def test_assignment_must_fit_project_window(services, engineer):
    short = services["project_service"].create_project(
        "Sprint", "One quarter", date(2026, 2, 1), date(2026, 4, 30), status="active"
    )
    asvc = services["assignment_service"]

    with pytest.raises(BoundsViolationError) as early:
        asvc.create_assignment(engineer.id, short.id, 50, date(2026, 1, 31), date(2026, 3, 1))
    assert early.value.code == "OUT_OF_PROJECT_BOUNDS"
    assert early.value.project_id == short.id

    with pytest.raises(BoundsViolationError) as late:
        asvc.create_assignment(engineer.id, short.id, 50, date(2026, 3, 1), date(2026, 5, 1))
    assert late.value.code == "OUT_OF_PROJECT_BOUNDS"

    edge = asvc.create_assignment(engineer.id, short.id, 50, date(2026, 2, 1), date(2026, 4, 30))
    assert (edge.start_date, edge.end_date) == (date(2026, 2, 1), date(2026, 4, 30))


def test_capacity_rejection_carries_numbers(services, engineer, project):
    asvc = services["assignment_service"]
    asvc.create_assignment(engineer.id, project.id, 70, MAR_1, MAR_31)

    with pytest.raises(CapacityExceededError) as exc:
        asvc.create_assignment(engineer.id, project.id, 31, date(2026, 3, 15), date(2026, 4, 15))

    assert exc.value.details == {"requested": 31, "available": 30, "engineer_id": engineer.id}


def test_created_assignment_is_normalised(services, engineer, project):
    asvc = services["assignment_service"]

    a = asvc.create_assignment(engineer.id, project.id, "40", "2026-03-01", "2026-03-31T00:00:00Z")
    assert a.allocation_percentage == 40
    assert (a.start_date, a.end_date) == (MAR_1, MAR_31)
    assert a.role == DEFAULT_ASSIGNMENT_ROLE

    lead = asvc.create_assignment(engineer.id, project.id, 20, MAR_1, MAR_31, role="Tech Lead")
    assert lead.role == "Tech Lead"
    assert asvc.get_assignment(lead.id).role == "Tech Lead"


def test_update_revalidates_excluding_itself(services, engineer, project):
    asvc = services["assignment_service"]
    a = asvc.create_assignment(engineer.id, project.id, 60, MAR_1, MAR_31)

    grown = asvc.update_assignment(a.id, allocation_percentage=100)
    assert grown.allocation_percentage == 100
    assert grown.start_date == MAR_1

    moved = asvc.update_assignment(a.id, start_date=date(2026, 4, 1), end_date=date(2026, 4, 30))
    assert (moved.start_date, moved.end_date) == (date(2026, 4, 1), date(2026, 4, 30))
    assert moved.allocation_percentage == 100


def test_update_rejected_by_other_allocations_leaves_record_intact(services, engineer, project):
    asvc = services["assignment_service"]
    a = asvc.create_assignment(engineer.id, project.id, 50, MAR_1, MAR_31)
    asvc.create_assignment(engineer.id, project.id, 40, date(2026, 3, 15), date(2026, 4, 15))

    with pytest.raises(CapacityExceededError) as exc:
        asvc.update_assignment(a.id, allocation_percentage=70)
    assert exc.value.available == 60

    assert asvc.get_assignment(a.id).allocation_percentage == 50


def test_update_on_closed_project_is_rejected(services, engineer, project):
    asvc = services["assignment_service"]
    a = asvc.create_assignment(engineer.id, project.id, 50, MAR_1, MAR_31)
    services["project_service"].set_status(project.id, "completed")

    with pytest.raises(BusinessRuleError) as exc:
        asvc.update_assignment(a.id, allocation_percentage=40)
    assert exc.value.code == "PROJECT_NOT_ASSIGNABLE"


def test_update_rejects_stale_expected_version(services, engineer, project):
    asvc = services["assignment_service"]
    a = asvc.create_assignment(engineer.id, project.id, 50, MAR_1, MAR_31)
    updated = asvc.update_assignment(a.id, allocation_percentage=40)

    assert updated.version == 2
    with pytest.raises(ConcurrencyError) as exc:
        asvc.update_assignment(a.id, allocation_percentage=30, expected_version=1)
    assert exc.value.code == "STALE_WRITE"


def test_update_and_delete_unknown_assignment(services):
    asvc = services["assignment_service"]

    with pytest.raises(NotFoundError) as upd:
        asvc.update_assignment("ghost", allocation_percentage=10)
    assert upd.value.code == "ASSIGNMENT_NOT_FOUND"

    with pytest.raises(NotFoundError) as dele:
        asvc.delete_assignment("ghost")
    assert dele.value.code == "ASSIGNMENT_NOT_FOUND"

    assert asvc.get_assignment("ghost") is None


def test_delete_restores_capacity(services, engineer, project):
    asvc = services["assignment_service"]
    cs = services["capacity_service"]
    a = asvc.create_assignment(engineer.id, project.id, 60, MAR_1, MAR_31)

    assert cs.available_capacity(engineer.id, MAR_1, MAR_31) == 40
    asvc.delete_assignment(a.id)
    assert cs.available_capacity(engineer.id, MAR_1, MAR_31) == 100


def test_list_assignments_newest_first_and_filtered(services, engineer, project):
    asvc = services["assignment_service"]
    other = services["engineer_service"].register_user("Bob", "bob@example.com")

    jan = asvc.create_assignment(engineer.id, project.id, 20, date(2026, 1, 5), date(2026, 1, 31))
    may = asvc.create_assignment(engineer.id, project.id, 20, date(2026, 5, 1), date(2026, 5, 31))
    mar = asvc.create_assignment(other.id, project.id, 20, MAR_1, MAR_31)

    assert [a.id for a in asvc.list_assignments()] == [may.id, mar.id, jan.id]
    assert [a.id for a in asvc.list_assignments(engineer_id=engineer.id)] == [may.id, jan.id]
    assert [a.id for a in asvc.list_assignments(project_id=project.id, engineer_id=other.id)] == [mar.id]
    assert [a.id for a in asvc.list_current_assignments(engineer.id, date(2026, 2, 1))] == [may.id]


def test_assignment_writes_emit_change_events(services, engineer, project):
    asvc = services["assignment_service"]
    seen: list[str] = []
    domain_events.assignments_changed.connect(seen.append)
    try:
        a = asvc.create_assignment(engineer.id, project.id, 20, MAR_1, MAR_31)
        asvc.update_assignment(a.id, allocation_percentage=30)
        asvc.delete_assignment(a.id)
        with pytest.raises(ValidationError):
            asvc.create_assignment(engineer.id, project.id, 0, MAR_1, MAR_31)
    finally:
        domain_events.assignments_changed.disconnect(seen.append)

    assert seen == [engineer.id, engineer.id, engineer.id]
