"""Ownership Derivation — tests for counterparty resolution and role checks.

Tests cover:
    - require_seller: absent user -> NotFound, wrong role -> RoleMismatch
    - derive_inquiry_fields copies the part's seller and starts pending
    - derive_application_fields copies the option's provider and starts pending
"""

from types import SimpleNamespace

import pytest

from marketplace.core.domain_types import (
    ApplicationStatus, InquiryStatus, UserRole,
)
from marketplace.core.errors import ResourceNotFoundError, RoleMismatchError
from marketplace.core.ownership import (
    derive_application_fields, derive_inquiry_fields, require_role,
    require_seller,
)


def test_require_seller_accepts_seller():
    user = SimpleNamespace(id=1, user_type=UserRole.SELLER)
    assert require_seller(user, 1) is user


def test_require_seller_accepts_plain_string_role():
    user = SimpleNamespace(id=1, user_type="seller")
    assert require_seller(user, 1) is user


def test_require_seller_missing_user_is_not_found():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        require_seller(None, 42)
    assert exc_info.value.http_status == 404
    assert exc_info.value.resource_id == 42


@pytest.mark.parametrize("role", [UserRole.BUYER, UserRole.FINANCING_PROVIDER])
def test_require_seller_rejects_other_roles(role):
    user = SimpleNamespace(id=7, user_type=role)
    with pytest.raises(RoleMismatchError) as exc_info:
        require_seller(user, 7)
    err = exc_info.value
    assert err.code == "ROLE_MISMATCH"
    assert err.required_role == "seller"
    assert err.actual_role == role.value
    assert err.http_status == 403


def test_require_role_for_financing_provider():
    user = SimpleNamespace(id=3, user_type=UserRole.FINANCING_PROVIDER)
    assert require_role(user, 3, UserRole.FINANCING_PROVIDER) is user


def test_inquiry_seller_comes_from_part():
    part = SimpleNamespace(id=10, seller_id=99)
    fields = derive_inquiry_fields(part, 10, buyer_id=5, message="Still available?")
    assert fields["seller_id"] == 99
    assert fields["buyer_id"] == 5
    assert fields["part_id"] == 10
    assert fields["status"] == InquiryStatus.PENDING


def test_inquiry_for_missing_part_is_not_found():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        derive_inquiry_fields(None, 404, buyer_id=5, message="hello")
    assert exc_info.value.resource_type == "AutoPart"


def test_application_provider_comes_from_option():
    option = SimpleNamespace(id=3, provider_id=77)
    fields = derive_application_fields(
        option, 3, buyer_id=5, part_id=10,
        requested_amount=1500, application_data='{"income": 50000}',
    )
    assert fields["provider_id"] == 77
    assert fields["financing_option_id"] == 3
    assert fields["application_data"] == '{"income": 50000}'
    assert fields["status"] == ApplicationStatus.PENDING


def test_application_for_missing_option_is_not_found():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        derive_application_fields(
            None, 8, buyer_id=5, part_id=10,
            requested_amount=100, application_data="{}",
        )
    assert exc_info.value.resource_type == "FinancingOption"
