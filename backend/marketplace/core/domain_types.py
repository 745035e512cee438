"""Domain Types — closed enumerations and identity types for marketplace entities.

Invariants:
    - The five enums mirror the five database enum types exactly
    - Enum values are the wire/database strings (lowercase, snake_case)
    - Integer surrogate keys wrapped in NewType — never mix a PartId with a UserId

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PartId = NewType("PartId", int)
PartImageId = NewType("PartImageId", int)
InquiryId = NewType("InquiryId", int)
FinancingOptionId = NewType("FinancingOptionId", int)
ApplicationId = NewType("ApplicationId", int)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Role tag fixed per user at registration — maps to `user_type` column."""
    BUYER = "buyer"
    SELLER = "seller"
    FINANCING_PROVIDER = "financing_provider"


class PartCategory(str, Enum):
    ENGINE = "engine"
    TRANSMISSION = "transmission"
    BRAKES = "brakes"
    SUSPENSION = "suspension"
    ELECTRICAL = "electrical"
    EXHAUST = "exhaust"
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    TIRES_WHEELS = "tires_wheels"
    OTHER = "other"


class PartCondition(str, Enum):
    NEW = "new"
    USED_EXCELLENT = "used_excellent"
    USED_GOOD = "used_good"
    USED_FAIR = "used_fair"
    REFURBISHED = "refurbished"


class InquiryStatus(str, Enum):
    """Inquiry workflow states. Initial: pending."""
    PENDING = "pending"
    RESPONDED = "responded"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    """Financing application workflow states. Initial: pending."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class WorkflowKind(str, Enum):
    """Entities that carry a status state machine."""
    INQUIRY = "inquiry"
    APPLICATION = "application"
