"""Status Workflows — transition graphs for inquiries and financing applications.

Invariants:
    - Inquiry: pending -> responded -> closed, plus pending -> closed; closed is terminal
    - Application: pending -> approved | rejected | withdrawn; all three are terminal
    - Self-transition (target == current) is always accepted as a re-stamp
    - check_transition is PURE: raises or returns, never mutates the entity

Design Decisions:
    - Graph enforced at the handler boundary, not only by omitting UI buttons
    - enforce=False restores permissive last-write-wins updates for legacy clients
"""

from marketplace.core.domain_types import (
    ApplicationStatus, InquiryStatus, WorkflowKind,
)
from marketplace.core.errors import InvalidTransitionError


INQUIRY_TRANSITIONS: dict[InquiryStatus, frozenset[InquiryStatus]] = {
    InquiryStatus.PENDING: frozenset({InquiryStatus.RESPONDED, InquiryStatus.CLOSED}),
    InquiryStatus.RESPONDED: frozenset({InquiryStatus.CLOSED}),
    InquiryStatus.CLOSED: frozenset(),
}

APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.APPROVED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.WITHDRAWN,
    }),
    ApplicationStatus.APPROVED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
    ApplicationStatus.WITHDRAWN: frozenset(),
}

INITIAL_STATUS = {
    WorkflowKind.INQUIRY: InquiryStatus.PENDING,
    WorkflowKind.APPLICATION: ApplicationStatus.PENDING,
}

_GRAPHS = {
    WorkflowKind.INQUIRY: (InquiryStatus, INQUIRY_TRANSITIONS),
    WorkflowKind.APPLICATION: (ApplicationStatus, APPLICATION_TRANSITIONS),
}


def allowed_targets(kind: WorkflowKind, current: str) -> frozenset:
    """Statuses reachable in one step from `current`."""
    status_enum, graph = _GRAPHS[kind]
    return graph[status_enum(current)]


def is_terminal(kind: WorkflowKind, status: str) -> bool:
    return not allowed_targets(kind, status)


def is_transition_allowed(kind: WorkflowKind, current: str, target: str) -> bool:
    status_enum, _ = _GRAPHS[kind]
    if status_enum(current) == status_enum(target):
        return True
    return status_enum(target) in allowed_targets(kind, current)


def check_transition(
    kind: WorkflowKind, current: str, target: str, enforce: bool = True,
) -> None:
    """Raise InvalidTransitionError if current -> target is not in the graph."""
    if not enforce:
        return
    if not is_transition_allowed(kind, current, target):
        raise InvalidTransitionError(
            kind.value, _value(current), _value(target),
        )


def _value(status) -> str:
    return status.value if hasattr(status, "value") else str(status)
