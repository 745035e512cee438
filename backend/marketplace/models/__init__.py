"""ORM Models — SQLAlchemy declarative models for the six marketplace tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer surrogate keys everywhere; ownership expressed as FKs to users

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata holds every table for
      create_all and Alembic autogenerate
"""

from marketplace.models.user import User  # noqa: F401
from marketplace.models.auto_part import AutoPart  # noqa: F401
from marketplace.models.part_image import PartImage  # noqa: F401
from marketplace.models.buyer_inquiry import BuyerInquiry  # noqa: F401
from marketplace.models.financing_option import FinancingOption  # noqa: F401
from marketplace.models.financing_application import FinancingApplication  # noqa: F401
