"""Unit tests for the edit authorization decision."""

import pytest

from actionscope.domain.services import can_edit, can_open_for_edit, is_read_only
from actionscope.domain.value_objects import ActionStatus, Role

from tests.conftest import make_action, make_actor


@pytest.mark.parametrize("role", list(Role))
def test_missing_id_denied(role: Role) -> None:
    """No actor id: denied for every role, admin included."""
    actor = make_actor(role, id=None, service_id="S1")
    assert not can_edit(actor, make_action(pilot_id=None, service_id="S1"))


def test_missing_role_denied() -> None:
    actor = make_actor(None, id="u1")
    assert not can_edit(actor, make_action(pilot_id="u1"))


def test_unknown_role_denied() -> None:
    actor = make_actor("superuser", id="u1")
    assert not can_edit(actor, make_action(pilot_id="u1"))


# --- operator ---


def test_operator_pilot_can_edit() -> None:
    assert can_edit(make_actor(Role.OPERATOR, id="u1"), make_action(pilot_id="u1"))


def test_operator_creator_cannot_edit() -> None:
    """Creator status does not grant edit rights to an operator."""
    actor = make_actor(Role.OPERATOR, id="u1")
    assert not can_edit(actor, make_action(pilot_id="u2", created_by_id="u1"))


def test_operator_scope_match_is_irrelevant() -> None:
    actor = make_actor(Role.OPERATOR, id="u1", service_id="S1", line_id="L1", team_id="T1")
    action = make_action(service_id="S1", line_id="L1", team_id="T1")
    assert not can_edit(actor, action)


# --- team leader ---


def test_team_leader_creator_can_edit() -> None:
    actor = make_actor(Role.TEAM_LEADER, id="u1")
    assert can_edit(actor, make_action(created_by_id="u1"))


def test_team_leader_line_match_with_different_team() -> None:
    actor = make_actor(Role.TEAM_LEADER, id="u1", line_id="L1", team_id="T1")
    action = make_action(line_id="L1", team_id="T2")
    assert can_edit(actor, action)


def test_team_leader_team_match() -> None:
    actor = make_actor(Role.TEAM_LEADER, id="u1", team_id="T1")
    assert can_edit(actor, make_action(team_id="T1"))


def test_team_leader_service_match() -> None:
    actor = make_actor(Role.TEAM_LEADER, id="u1", service_id="S1")
    assert can_edit(actor, make_action(service_id="S1", line_id="L7"))


def test_team_leader_out_of_scope() -> None:
    actor = make_actor(Role.TEAM_LEADER, id="u1", service_id="S1", line_id="L1", team_id="T1")
    action = make_action(service_id="S2", line_id="L2", team_id="T2")
    assert not can_edit(actor, action)


def test_team_leader_without_placement_only_own_actions() -> None:
    """Absent identifiers on both sides never count as a match."""
    actor = make_actor(Role.TEAM_LEADER, id="u1")
    assert not can_edit(actor, make_action())


# --- supervisor ---


def test_supervisor_team_match_only_denied() -> None:
    """Supervisors do not get team-level matching."""
    actor = make_actor(Role.SUPERVISOR, id="u1", service_id="S1", line_id="L1", team_id="T1")
    action = make_action(service_id="S2", line_id="L2", team_id="T1")
    assert not can_edit(actor, action)


def test_supervisor_line_match_with_service_mismatch() -> None:
    actor = make_actor(Role.SUPERVISOR, id="u1", line_id="L1", service_id="S1")
    action = make_action(pilot_id="u9", created_by_id="u8", line_id="L1", service_id="S2")
    assert can_edit(actor, action)


def test_supervisor_pilot_or_creator() -> None:
    actor = make_actor(Role.SUPERVISOR, id="u1", service_id="S1")
    assert can_edit(actor, make_action(pilot_id="u1", service_id="S2"))
    assert can_edit(actor, make_action(created_by_id="u1", service_id="S2"))


# --- manager ---


def test_manager_line_match_without_service_denied() -> None:
    actor = make_actor(Role.MANAGER, id="u1", service_id="S1", line_id="L1")
    action = make_action(service_id="S2", line_id="L1")
    assert not can_edit(actor, action)


def test_manager_service_match() -> None:
    actor = make_actor(Role.MANAGER, id="u1", service_id="S1")
    assert can_edit(actor, make_action(service_id="S1"))


def test_manager_pilot_overrides_scope_mismatch() -> None:
    actor = make_actor(Role.MANAGER, id="u1", service_id="S1")
    assert can_edit(actor, make_action(pilot_id="u1", service_id="S2"))


# --- admin ---


@pytest.mark.parametrize("status", list(ActionStatus))
def test_admin_can_always_edit(status: ActionStatus) -> None:
    actor = make_actor(Role.ADMIN, id="root")
    assert can_edit(actor, make_action(status=status, service_id="S9"))


# --- archived ---


@pytest.mark.parametrize("role", list(Role))
def test_archived_is_read_only_for_everyone(role: Role) -> None:
    actor = make_actor(role, id="u1", service_id="S1", line_id="L1", team_id="T1")
    action = make_action(
        pilot_id="u1", created_by_id="u1", status=ActionStatus.ARCHIVED, service_id="S1"
    )
    assert is_read_only(action)
    assert not can_open_for_edit(actor, action)


def test_open_for_edit_when_not_archived() -> None:
    actor = make_actor(Role.ADMIN, id="root")
    assert can_open_for_edit(actor, make_action(status=ActionStatus.VALIDATED))
