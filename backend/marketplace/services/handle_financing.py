"""Financing Handlers — provider loan options and buyer applications.

Invariants:
    - provider_id on an application is derived from the option (core/ownership.py)
    - application_data is stored verbatim — never parsed or reformatted
    - Amounts/rates quantized to their column scale before insert
    - Status changes pass through core/workflow.check_transition

Design Decisions:
    - requested_amount is NOT checked against the option's min/max: the
      provider decides during review
"""

import logging
from typing import Literal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import UserId, WorkflowKind
from marketplace.core.money import RATE_SCALE, to_fixed_point
from marketplace.core.ownership import derive_application_fields, require_user
from marketplace.core.timestamps import next_modification_time
from marketplace.core.workflow import check_transition
from marketplace.models.auto_part import AutoPart
from marketplace.models.financing_application import FinancingApplication
from marketplace.models.financing_option import FinancingOption
from marketplace.models.user import User
from marketplace.schemas.financing import (
    CreateFinancingApplicationInput, CreateFinancingOptionInput,
    UpdateApplicationStatusInput,
)
from marketplace.services.lookups import fetch_or_404, find_by_id

logger = logging.getLogger(__name__)


class FinancingHandlers:
    """Financing options and applications."""

    def __init__(self, db: AsyncSession, enforce_transitions: bool = True):
        self.db = db
        self.enforce_transitions = enforce_transitions

    # ─── Options ────────────────────────────────────────────────

    async def create_financing_option(
        self, data: CreateFinancingOptionInput,
    ) -> FinancingOption:
        await fetch_or_404(self.db, User, data.provider_id, "Provider")
        option = FinancingOption(
            provider_id=data.provider_id,
            name=data.name,
            description=data.description,
            min_amount=to_fixed_point(data.min_amount),
            max_amount=to_fixed_point(data.max_amount),
            interest_rate=to_fixed_point(data.interest_rate, RATE_SCALE),
            term_months=data.term_months,
            is_active=True,
        )
        self.db.add(option)
        await self.db.commit()
        await self.db.refresh(option)
        logger.info(
            "Financing option created",
            extra={"entity": "FinancingOption", "entity_id": option.id},
        )
        return option

    async def get_financing_options(self) -> list[FinancingOption]:
        result = await self.db.execute(
            select(FinancingOption)
            .where(FinancingOption.is_active.is_(True))
            .order_by(FinancingOption.id)
        )
        return list(result.scalars().all())

    # ─── Applications ───────────────────────────────────────────

    async def create_financing_application(
        self, data: CreateFinancingApplicationInput,
    ) -> FinancingApplication:
        option = await find_by_id(self.db, FinancingOption, data.financing_option_id)
        fields = derive_application_fields(
            option,
            data.financing_option_id,
            buyer_id=data.buyer_id,
            part_id=data.part_id,
            requested_amount=to_fixed_point(data.requested_amount),
            application_data=data.application_data,
        )
        require_user(await find_by_id(self.db, User, data.buyer_id), data.buyer_id, "Buyer")
        await fetch_or_404(self.db, AutoPart, data.part_id, "AutoPart")

        application = FinancingApplication(**fields)
        self.db.add(application)
        await self.db.commit()
        await self.db.refresh(application)
        logger.info(
            f"Financing application submitted to provider {application.provider_id}",
            extra={"entity": "FinancingApplication", "entity_id": application.id},
        )
        return application

    async def get_financing_applications(
        self, user_id: UserId, user_type: Literal["buyer", "financing_provider"],
    ) -> list[FinancingApplication]:
        column = (
            FinancingApplication.buyer_id if user_type == "buyer"
            else FinancingApplication.provider_id
        )
        result = await self.db.execute(
            select(FinancingApplication)
            .where(column == user_id)
            .order_by(FinancingApplication.created_at.desc(), FinancingApplication.id.desc())
        )
        return list(result.scalars().all())

    async def update_application_status(
        self, data: UpdateApplicationStatusInput,
    ) -> FinancingApplication:
        application = await fetch_or_404(
            self.db, FinancingApplication, data.id, "FinancingApplication",
        )
        check_transition(
            WorkflowKind.APPLICATION, application.status, data.status,
            enforce=self.enforce_transitions,
        )
        previous = application.status
        application.status = data.status
        application.updated_at = next_modification_time(application.updated_at)
        await self.db.commit()
        await self.db.refresh(application)
        logger.info(
            f"Application status {previous.value} -> {application.status.value}",
            extra={"entity": "FinancingApplication", "entity_id": application.id},
        )
        return application
