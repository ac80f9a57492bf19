"""Loan amortization for principal-and-interest and interest-only loans."""

import logging
import math
from dataclasses import dataclass

import numpy_financial as npf

from ..models.lookups import LoanType
from .guards import UNAVAILABLE, floor_zero

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass
class YearAmortization:
    """Totals from twelve monthly repayments."""

    interest_paid: float
    principal_paid: float
    ending_balance: float
    payments_made: float  # Scheduled payments plus extra principal


def monthly_payment(
    principal: float,
    annual_rate_pct: float,
    term_years: float,
) -> float:
    """Calculate the level monthly payment that retires a loan over its term.

    Uses the annuity formula:
        PMT = P x r / (1 - (1 + r)^-n)
    where r = annual_rate_pct / 100 / 12 and n = term_years x 12.

    Args:
        principal: Loan amount.
        annual_rate_pct: Annual interest rate in percent (e.g. 6.0).
        term_years: Loan term in years.

    Returns:
        Monthly payment. Zero when there is nothing to borrow, straight-line
        ``P / n`` at a zero rate, and UNAVAILABLE for a non-positive term.
    """
    if principal <= 0:
        return 0.0

    months = term_years * MONTHS_PER_YEAR
    if months <= 0:
        logger.warning("Loan term of %s years has no repayments; payment unavailable", term_years)
        return UNAVAILABLE

    monthly_rate = annual_rate_pct / 100 / MONTHS_PER_YEAR
    if monthly_rate == 0:
        return principal / months

    # numpy_financial.pmt returns a negative outflow, so negate
    return float(-npf.pmt(rate=monthly_rate, nper=months, pv=principal, fv=0))


def interest_only_payment(principal: float, annual_rate_pct: float) -> float:
    """Monthly interest on the full principal."""
    return floor_zero(principal) * annual_rate_pct / 100 / MONTHS_PER_YEAR


def simulate_year(
    balance: float,
    monthly_rate: float,
    payment: float,
    loan_type: LoanType,
    extra_monthly: float = 0.0,
) -> YearAmortization:
    """Run twelve monthly repayments against a balance.

    Each month accrues ``balance x monthly_rate`` of interest, then reduces
    the balance by ``max(0, payment - interest)`` for P&I loans or by nothing
    for interest-only loans. ``extra_monthly`` is added to the principal
    reduction every month. The reduction never exceeds the balance, so the
    balance floors at zero.

    Args:
        balance: Opening balance.
        monthly_rate: Monthly interest rate as a fraction.
        payment: Scheduled monthly payment.
        loan_type: P&I or interest-only.
        extra_monthly: Additional principal paid each month.

    Returns:
        YearAmortization with interest, principal and the closing balance.
        Every figure is UNAVAILABLE when the payment or extra is.
    """
    if math.isnan(payment) or math.isnan(extra_monthly):
        return YearAmortization(UNAVAILABLE, UNAVAILABLE, UNAVAILABLE, UNAVAILABLE)

    interest_total = 0.0
    principal_total = 0.0
    paid_total = 0.0

    for _ in range(MONTHS_PER_YEAR):
        interest = balance * monthly_rate
        if loan_type == LoanType.INTEREST_ONLY:
            scheduled_principal = 0.0
        else:
            scheduled_principal = max(0.0, payment - interest)

        principal = min(balance, scheduled_principal + extra_monthly)
        balance = floor_zero(balance - principal)

        interest_total += interest
        principal_total += principal
        paid_total += payment + extra_monthly

    return YearAmortization(
        interest_paid=interest_total,
        principal_paid=principal_total,
        ending_balance=balance,
        payments_made=paid_total,
    )


@dataclass
class LoanState:
    """An active loan advanced one year at a time."""

    balance: float
    monthly_rate: float
    monthly_payment: float
    loan_type: LoanType = LoanType.PRINCIPAL_AND_INTEREST

    @classmethod
    def open(
        cls,
        principal: float,
        annual_rate_pct: float,
        term_years: float,
        loan_type: LoanType = LoanType.PRINCIPAL_AND_INTEREST,
    ) -> "LoanState":
        """Open a loan, sizing the payment for its repayment structure."""
        if loan_type == LoanType.INTEREST_ONLY:
            payment = interest_only_payment(principal, annual_rate_pct)
        else:
            payment = monthly_payment(principal, annual_rate_pct, term_years)
        return cls(
            balance=floor_zero(principal),
            monthly_rate=annual_rate_pct / 100 / MONTHS_PER_YEAR,
            monthly_payment=payment,
            loan_type=loan_type,
        )

    def run_year(self, extra_monthly: float = 0.0) -> YearAmortization:
        """Advance twelve months, updating the balance in place."""
        year = simulate_year(
            self.balance,
            self.monthly_rate,
            self.monthly_payment,
            self.loan_type,
            extra_monthly=extra_monthly,
        )
        self.balance = year.ending_balance
        return year
