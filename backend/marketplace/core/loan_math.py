"""Loan Math — amortized monthly-payment estimate for display.

Invariants:
    - Single implementation; never persisted
    - monthly_payment(P, 0, n) == P / n exactly
"""

from marketplace.core.errors import InputValidationError


def monthly_payment(
    principal: float, annual_rate_percent: float, term_months: int,
) -> float:
    """Standard amortization: P·i·(1+i)^n / ((1+i)^n − 1), i = r/100/12."""
    if term_months < 1:
        raise InputValidationError(
            f"term_months must be >= 1, got {term_months}", "term_months",
        )
    monthly_rate = annual_rate_percent / 100 / 12
    if monthly_rate == 0:
        return principal / term_months
    growth = (1 + monthly_rate) ** term_months
    return (principal * monthly_rate * growth) / (growth - 1)


def total_repayment(
    principal: float, annual_rate_percent: float, term_months: int,
) -> float:
    return monthly_payment(principal, annual_rate_percent, term_months) * term_months
