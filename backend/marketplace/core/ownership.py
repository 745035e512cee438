"""Ownership Derivation — counterparty resolution and role checks.

Invariants:
    - Inquiry.seller_id is ALWAYS copied from the referenced part, never taken from the caller
    - FinancingApplication.provider_id is ALWAYS copied from the referenced financing option
    - Derived records start in the workflow's initial status (pending)
    - Part creation requires an existing user whose role is seller

Design Decisions:
    - Pure functions over fetched rows: the shell does the lookup, core decides
    - Returns plain dicts of column values so services stay the only ORM writers
"""

from marketplace.core.domain_types import (
    FinancingOptionId, PartId, UserId, UserRole, WorkflowKind,
)
from marketplace.core.entity_protocols import (
    FinancingOptionLike, PartLike, UserLike,
)
from marketplace.core.errors import ResourceNotFoundError, RoleMismatchError
from marketplace.core.workflow import INITIAL_STATUS


def require_user(user: UserLike | None, user_id: UserId, label: str = "User") -> UserLike:
    if user is None:
        raise ResourceNotFoundError(label, user_id)
    return user


def require_role(user: UserLike | None, user_id: UserId, role: UserRole) -> UserLike:
    """Rule: user exists AND holds `role`."""
    user = require_user(user, user_id, role.value.replace("_", " ").title())
    actual = _role_value(user.user_type)
    if actual != role.value:
        raise RoleMismatchError(user_id, role.value, actual)
    return user


def require_seller(user: UserLike | None, seller_id: UserId) -> UserLike:
    """Part-creation role check: seller must exist and be a seller."""
    return require_role(user, seller_id, UserRole.SELLER)


def derive_inquiry_fields(
    part: PartLike | None, part_id: PartId, buyer_id: UserId, message: str,
) -> dict:
    """Column values for a new inquiry; seller resolved from the part."""
    if part is None:
        raise ResourceNotFoundError("AutoPart", part_id)
    return {
        "buyer_id": buyer_id,
        "seller_id": part.seller_id,
        "part_id": part_id,
        "message": message,
        "status": INITIAL_STATUS[WorkflowKind.INQUIRY],
    }


def derive_application_fields(
    option: FinancingOptionLike | None,
    option_id: FinancingOptionId,
    buyer_id: UserId,
    part_id: PartId,
    requested_amount,
    application_data: str,
) -> dict:
    """Column values for a new application; provider resolved from the option."""
    if option is None:
        raise ResourceNotFoundError("FinancingOption", option_id)
    return {
        "buyer_id": buyer_id,
        "provider_id": option.provider_id,
        "part_id": part_id,
        "financing_option_id": option_id,
        "requested_amount": requested_amount,
        "application_data": application_data,
        "status": INITIAL_STATUS[WorkflowKind.APPLICATION],
    }


def _role_value(role) -> str:
    return role.value if hasattr(role, "value") else str(role)
