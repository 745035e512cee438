"""Entity Protocols — structural contracts for rows passed into core rules.

Invariants:
    - Core NEVER imports ORM models — dependency arrows point inward only
    - Services pass SQLAlchemy rows; tests pass plain stand-ins

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Protocol

from marketplace.core.domain_types import FinancingOptionId, PartId, UserId


class UserLike(Protocol):
    id: UserId
    user_type: str


class PartLike(Protocol):
    id: PartId
    seller_id: UserId


class FinancingOptionLike(Protocol):
    id: FinancingOptionId
    provider_id: UserId
