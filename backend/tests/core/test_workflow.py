"""Status Workflows — tests for the inquiry and application transition graphs.

Tests cover:
    - Every observed inquiry edge allowed; reverse edges rejected
    - Application terminal states reject further moves
    - Self-transitions accepted
    - enforce=False accepts anything (permissive compatibility)
"""

import pytest

from marketplace.core.domain_types import (
    ApplicationStatus, InquiryStatus, WorkflowKind,
)
from marketplace.core.errors import InvalidTransitionError
from marketplace.core.workflow import (
    INITIAL_STATUS, allowed_targets, check_transition, is_terminal,
    is_transition_allowed,
)


# ─── Inquiry ─────────────────────────────────────────────────────

@pytest.mark.parametrize("current,target", [
    ("pending", "responded"),
    ("responded", "closed"),
    ("pending", "closed"),
])
def test_inquiry_forward_edges_allowed(current, target):
    check_transition(WorkflowKind.INQUIRY, current, target)


@pytest.mark.parametrize("current,target", [
    ("responded", "pending"),
    ("closed", "pending"),
    ("closed", "responded"),
])
def test_inquiry_backward_edges_rejected(current, target):
    with pytest.raises(InvalidTransitionError) as exc_info:
        check_transition(WorkflowKind.INQUIRY, current, target)
    assert exc_info.value.code == "INVALID_TRANSITION"
    assert exc_info.value.http_status == 409
    assert exc_info.value.current == current
    assert exc_info.value.target == target


def test_inquiry_closed_is_terminal():
    assert is_terminal(WorkflowKind.INQUIRY, InquiryStatus.CLOSED)
    assert not is_terminal(WorkflowKind.INQUIRY, InquiryStatus.PENDING)


def test_inquiry_pending_targets():
    assert allowed_targets(WorkflowKind.INQUIRY, "pending") == {
        InquiryStatus.RESPONDED, InquiryStatus.CLOSED,
    }


# ─── Application ─────────────────────────────────────────────────

@pytest.mark.parametrize("target", ["approved", "rejected", "withdrawn"])
def test_application_pending_to_any_terminal(target):
    check_transition(WorkflowKind.APPLICATION, "pending", target)


@pytest.mark.parametrize("terminal", ["approved", "rejected", "withdrawn"])
def test_application_terminal_states_are_final(terminal):
    assert is_terminal(WorkflowKind.APPLICATION, terminal)
    with pytest.raises(InvalidTransitionError):
        check_transition(WorkflowKind.APPLICATION, terminal, "pending")


def test_application_approved_cannot_become_rejected():
    assert not is_transition_allowed(
        WorkflowKind.APPLICATION, ApplicationStatus.APPROVED, ApplicationStatus.REJECTED,
    )


# ─── Shared rules ────────────────────────────────────────────────

def test_self_transition_is_accepted():
    assert is_transition_allowed(WorkflowKind.INQUIRY, "closed", "closed")
    assert is_transition_allowed(WorkflowKind.APPLICATION, "approved", "approved")


def test_enforce_false_accepts_backward_move():
    check_transition(WorkflowKind.APPLICATION, "rejected", "pending", enforce=False)
    check_transition(WorkflowKind.INQUIRY, "closed", "pending", enforce=False)


def test_enum_members_and_strings_are_interchangeable():
    assert is_transition_allowed(
        WorkflowKind.INQUIRY, InquiryStatus.PENDING, "responded",
    )


def test_initial_status_is_pending_for_both_workflows():
    assert INITIAL_STATUS[WorkflowKind.INQUIRY] == InquiryStatus.PENDING
    assert INITIAL_STATUS[WorkflowKind.APPLICATION] == ApplicationStatus.PENDING


def test_unknown_status_value_raises_value_error():
    with pytest.raises(ValueError):
        check_transition(WorkflowKind.INQUIRY, "pending", "archived")
