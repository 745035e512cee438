"""ORM mapping — tables link only through foreign-key columns.

Invariants:
    - Mapper configuration emits no SQLAlchemy warnings
    - No model declares a relationship(); handlers join on *_id columns
"""

import warnings

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import configure_mappers

from marketplace.models import (
    AutoPart, BuyerInquiry, FinancingApplication, FinancingOption, PartImage, User,
)

ALL_MODELS = (
    User, AutoPart, PartImage, BuyerInquiry, FinancingOption, FinancingApplication,
)


def test_mapper_configuration_is_warning_free():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        configure_mappers()


@pytest.mark.parametrize("model", ALL_MODELS, ids=lambda m: m.__tablename__)
def test_models_declare_no_relationships(model):
    assert list(inspect(model).relationships) == []


def test_ownership_held_in_foreign_keys():
    assert {fk.column.table.name for fk in AutoPart.__table__.c.seller_id.foreign_keys} == {"users"}
    assert {fk.column.table.name for fk in FinancingOption.__table__.c.provider_id.foreign_keys} == {"users"}
    assert {fk.column.table.name for fk in PartImage.__table__.c.part_id.foreign_keys} == {"auto_parts"}
