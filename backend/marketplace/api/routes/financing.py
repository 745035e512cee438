"""Financing Procedures — loan options, applications, and payment estimates.

Invariants:
    - estimateMonthlyPayment is a pure query: no DB session, nothing persisted
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.routes import RPC_PREFIX
from marketplace.config import get_settings
from marketplace.core.loan_math import monthly_payment, total_repayment
from marketplace.infrastructure.database import get_db
from marketplace.schemas.financing import (
    CreateFinancingApplicationInput, CreateFinancingOptionInput,
    FinancingApplicationResponse, FinancingOptionResponse,
    GetFinancingApplicationsInput, MonthlyPaymentInput, MonthlyPaymentResponse,
    UpdateApplicationStatusInput,
)
from marketplace.services.handle_financing import FinancingHandlers

router = APIRouter(prefix=RPC_PREFIX, tags=["financing"])


def _handlers(db: AsyncSession) -> FinancingHandlers:
    return FinancingHandlers(
        db, enforce_transitions=get_settings().enforce_status_transitions,
    )


@router.post(
    "/createFinancingOption", response_model=FinancingOptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_financing_option(
    body: CreateFinancingOptionInput, db: AsyncSession = Depends(get_db),
):
    option = await _handlers(db).create_financing_option(body)
    return FinancingOptionResponse.model_validate(option)


@router.get("/getFinancingOptions", response_model=list[FinancingOptionResponse])
async def get_financing_options(db: AsyncSession = Depends(get_db)):
    options = await _handlers(db).get_financing_options()
    return [FinancingOptionResponse.model_validate(o) for o in options]


@router.post(
    "/createFinancingApplication", response_model=FinancingApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_financing_application(
    body: CreateFinancingApplicationInput, db: AsyncSession = Depends(get_db),
):
    application = await _handlers(db).create_financing_application(body)
    return FinancingApplicationResponse.model_validate(application)


@router.get(
    "/getFinancingApplications",
    response_model=list[FinancingApplicationResponse],
)
async def get_financing_applications(
    params: Annotated[GetFinancingApplicationsInput, Query()],
    db: AsyncSession = Depends(get_db),
):
    applications = await _handlers(db).get_financing_applications(
        params.user_id, params.user_type,
    )
    return [FinancingApplicationResponse.model_validate(a) for a in applications]


@router.post(
    "/updateApplicationStatus", response_model=FinancingApplicationResponse,
)
async def update_application_status(
    body: UpdateApplicationStatusInput, db: AsyncSession = Depends(get_db),
):
    application = await _handlers(db).update_application_status(body)
    return FinancingApplicationResponse.model_validate(application)


@router.get("/estimateMonthlyPayment", response_model=MonthlyPaymentResponse)
async def estimate_monthly_payment(
    params: Annotated[MonthlyPaymentInput, Query()],
):
    return MonthlyPaymentResponse(
        amount=params.amount,
        interest_rate=params.interest_rate,
        term_months=params.term_months,
        monthly_payment=monthly_payment(
            params.amount, params.interest_rate, params.term_months,
        ),
        total_repayment=total_repayment(
            params.amount, params.interest_rate, params.term_months,
        ),
    )
