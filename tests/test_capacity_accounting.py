from __future__ import annotations

from datetime import date

import pytest

from core.exceptions import CapacityExceededError, NotFoundError, ValidationError


def _assign(services, engineer, project, pct, start, end, role=None):
    return services["assignment_service"].create_assignment(
        engineer.id, project.id, pct, start, end, role=role
    )


def test_partial_overlap_counts_full_percentage(services, engineer, project):
    cs = services["capacity_service"]
    _assign(services, engineer, project, 60, date(2026, 1, 15), date(2026, 6, 30))

    assert cs.available_capacity(engineer.id, date(2026, 3, 1), date(2026, 3, 31)) == 40
    # a single shared day is enough to count the whole allocation
    assert cs.available_capacity(engineer.id, date(2026, 6, 30), date(2026, 7, 31)) == 40
    assert cs.available_capacity(engineer.id, date(2026, 7, 1), date(2026, 7, 31)) == 100


def test_second_request_exceeding_remaining_capacity_is_rejected(services, engineer, project):
    _assign(services, engineer, project, 60, date(2026, 1, 15), date(2026, 6, 30))

    with pytest.raises(CapacityExceededError) as exc:
        _assign(services, engineer, project, 50, date(2026, 4, 1), date(2026, 4, 30))

    assert exc.value.code == "INSUFFICIENT_CAPACITY"
    assert exc.value.available == 40
    assert exc.value.requested == 50
    assert exc.value.details["engineer_id"] == engineer.id
    assert len(services["assignment_service"].list_assignments(engineer_id=engineer.id)) == 1


def test_request_exactly_filling_capacity_is_accepted(services, engineer, project):
    _assign(services, engineer, project, 60, date(2026, 1, 15), date(2026, 6, 30))
    _assign(services, engineer, project, 40, date(2026, 4, 1), date(2026, 4, 30))

    cs = services["capacity_service"]
    assert cs.available_capacity(engineer.id, date(2026, 4, 10), date(2026, 4, 11)) == 0


def test_non_overlapping_allocations_each_leave_the_rest(services, engineer, project):
    cs = services["capacity_service"]
    _assign(services, engineer, project, 30, date(2026, 2, 1), date(2026, 2, 28))
    _assign(services, engineer, project, 50, date(2026, 3, 1), date(2026, 3, 31))
    _assign(services, engineer, project, 20, date(2026, 4, 1), date(2026, 4, 30))

    assert cs.available_capacity(engineer.id, date(2026, 2, 10), date(2026, 2, 10)) == 70
    assert cs.available_capacity(engineer.id, date(2026, 3, 10), date(2026, 3, 10)) == 50
    # a range spanning all three sums them
    assert cs.available_capacity(engineer.id, date(2026, 2, 1), date(2026, 4, 30)) == 0


def test_default_range_runs_from_today_to_far_future(services, engineer, project, today):
    cs = services["capacity_service"]
    _assign(services, engineer, project, 25, date(2026, 11, 1), date(2026, 11, 30))

    assert cs.available_capacity(engineer.id) == 75
    assert cs.available_capacity(engineer.id, range_start=today) == 75


def test_available_never_negative_after_capacity_is_lowered(services, engineer, project):
    _assign(services, engineer, project, 80, date(2026, 2, 1), date(2026, 2, 28))
    services["engineer_service"].update_engineer(engineer.id, max_capacity=50)

    cs = services["capacity_service"]
    assert cs.available_capacity(engineer.id, date(2026, 2, 1), date(2026, 2, 28)) == 0


def test_exclude_id_reproduces_pre_update_capacity(services, engineer, project):
    cs = services["capacity_service"]
    start, end = date(2026, 3, 1), date(2026, 3, 31)
    before = cs.available_capacity(engineer.id, start, end)

    a = _assign(services, engineer, project, 45, start, end)

    assert cs.available_capacity(engineer.id, start, end) == before - 45
    assert cs.available_capacity(engineer.id, start, end, exclude_assignment_id=a.id) == before


def test_reversed_range_is_rejected(services, engineer):
    with pytest.raises(ValidationError) as exc:
        services["capacity_service"].available_capacity(engineer.id, date(2026, 3, 31), date(2026, 3, 1))
    assert exc.value.code == "INVALID_DATES"


def test_unknown_engineer_and_manager_are_not_found(services):
    cs = services["capacity_service"]
    manager = services["engineer_service"].register_user("Grace", "grace@example.com", role="manager")

    with pytest.raises(NotFoundError) as missing:
        cs.available_capacity("no-such-id")
    assert missing.value.code == "ENGINEER_NOT_FOUND"

    with pytest.raises(NotFoundError) as wrong_role:
        cs.available_capacity(manager.id)
    assert wrong_role.value.code == "ENGINEER_NOT_FOUND"


def test_capacity_info_reports_utilisation(services, engineer, project):
    _assign(services, engineer, project, 60, date(2026, 1, 15), date(2026, 6, 30))
    info = services["capacity_service"].capacity_info(engineer.id)

    assert info.engineer_id == engineer.id
    assert info.max_capacity == 100
    assert info.allocated_capacity == 60
    assert info.available_capacity == 40
    assert info.utilization_percent == pytest.approx(60.0)


def test_part_time_engineer_utilisation(services, project):
    part_timer = services["engineer_service"].register_user(
        "Linus", "linus@example.com", skills=["C"], max_capacity=50
    )
    _assign(services, part_timer, project, 25, date(2026, 2, 1), date(2026, 2, 28))

    info = services["capacity_service"].capacity_info(part_timer.id)
    assert info.available_capacity == 25
    assert info.utilization_percent == pytest.approx(50.0)


def test_zero_capacity_engineer_has_zero_utilisation(services):
    idle = services["engineer_service"].register_user("Idle", "idle@example.com", max_capacity=0)
    info = services["capacity_service"].capacity_info(idle.id)

    assert info.max_capacity == 0
    assert info.available_capacity == 0
    assert info.utilization_percent == 0
