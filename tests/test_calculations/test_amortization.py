"""Tests for loan payments and yearly amortization."""

import math

import numpy_financial as npf
import pytest

from gearing.models.lookups import LoanType
from gearing.calculations.amortization import (
    LoanState,
    interest_only_payment,
    monthly_payment,
    simulate_year,
)


class TestMonthlyPayment:
    """Tests for the annuity payment."""

    def test_standard_payment(self):
        """$640k over 30 years at 6% is about $3,837 a month."""
        assert monthly_payment(640_000, 6.0, 30) == pytest.approx(3_837.13, abs=0.01)

    def test_matches_numpy_financial(self):
        """Payment should agree with npf.pmt."""
        expected = -npf.pmt(0.055 / 12, 25 * 12, 450_000)
        assert monthly_payment(450_000, 5.5, 25) == pytest.approx(expected)

    def test_zero_rate_is_straight_line(self):
        """At 0% the payment is exactly principal / months."""
        assert monthly_payment(120_000, 0.0, 10) == 120_000 / 120

    @pytest.mark.parametrize("principal", [0, -1_000])
    def test_nothing_borrowed(self, principal):
        """No principal means no payment."""
        assert monthly_payment(principal, 6.0, 30) == 0

    @pytest.mark.parametrize("term", [0, -5])
    def test_non_positive_term_is_unavailable(self, term):
        """A loan with no repayments yields the unavailable sentinel."""
        assert math.isnan(monthly_payment(100_000, 6.0, term))

    def test_interest_only_payment(self):
        assert interest_only_payment(600_000, 6.0) == pytest.approx(3_000)


class TestSimulateYear:
    """Tests for twelve monthly repayments."""

    def test_payments_split_into_interest_and_principal(self):
        """Without hitting the floor, interest + principal equals payments made."""
        payment = monthly_payment(640_000, 6.0, 30)
        year = simulate_year(640_000, 0.005, payment, LoanType.PRINCIPAL_AND_INTEREST)

        assert year.interest_paid + year.principal_paid == pytest.approx(year.payments_made)
        assert year.payments_made == pytest.approx(12 * payment)

    def test_ending_balance_is_start_less_principal(self):
        payment = monthly_payment(640_000, 6.0, 30)
        year = simulate_year(640_000, 0.005, payment, LoanType.PRINCIPAL_AND_INTEREST)

        assert year.ending_balance == pytest.approx(max(0, 640_000 - year.principal_paid))

    def test_year_one_interest_is_below_flat_interest(self):
        """Amortization drift pulls year-one interest under balance x rate."""
        payment = monthly_payment(640_000, 6.0, 30)
        year = simulate_year(640_000, 0.005, payment, LoanType.PRINCIPAL_AND_INTEREST)

        assert year.interest_paid == pytest.approx(38_186, abs=20)
        assert year.interest_paid < 640_000 * 0.06

    def test_balance_floors_at_zero(self):
        """An oversized payment retires the loan without going negative."""
        year = simulate_year(1_000, 0.005, 5_000, LoanType.PRINCIPAL_AND_INTEREST)

        assert year.ending_balance == 0
        assert year.principal_paid == pytest.approx(1_000)
        assert year.interest_paid + year.principal_paid <= year.payments_made

    def test_interest_only_keeps_balance(self):
        """Interest-only repayments never reduce the balance."""
        year = simulate_year(500_000, 0.005, 2_500, LoanType.INTEREST_ONLY)

        assert year.ending_balance == 500_000
        assert year.principal_paid == 0
        assert year.interest_paid == pytest.approx(30_000)

    def test_extra_repayments_reduce_balance_faster(self):
        payment = monthly_payment(500_000, 6.0, 25)
        base = simulate_year(500_000, 0.005, payment, LoanType.PRINCIPAL_AND_INTEREST)
        extra = simulate_year(500_000, 0.005, payment, LoanType.PRINCIPAL_AND_INTEREST, extra_monthly=1_000)

        assert extra.ending_balance < base.ending_balance
        assert extra.interest_paid < base.interest_paid
        assert extra.principal_paid - base.principal_paid > 12_000

    def test_unavailable_payment_propagates(self):
        year = simulate_year(100_000, 0.005, float("nan"), LoanType.PRINCIPAL_AND_INTEREST)

        assert math.isnan(year.ending_balance)
        assert math.isnan(year.interest_paid)


class TestLoanState:
    """Tests for loans advanced year by year."""

    def test_open_sizes_annuity_payment(self):
        loan = LoanState.open(640_000, 6.0, 30)

        assert loan.monthly_payment == pytest.approx(monthly_payment(640_000, 6.0, 30))
        assert loan.monthly_rate == pytest.approx(0.005)

    def test_open_interest_only(self):
        loan = LoanState.open(640_000, 6.0, 30, LoanType.INTEREST_ONLY)

        assert loan.monthly_payment == pytest.approx(3_200)
        loan.run_year()
        assert loan.balance == 640_000

    def test_run_year_updates_balance(self):
        loan = LoanState.open(640_000, 6.0, 30)
        year = loan.run_year()

        assert loan.balance == year.ending_balance
        assert loan.balance < 640_000

    def test_balance_is_zero_at_maturity(self):
        """Running the full term should retire the loan."""
        loan = LoanState.open(300_000, 5.0, 10)
        for _ in range(10):
            loan.run_year()

        assert loan.balance < 1

    def test_zero_rate_loan_retires_on_schedule(self):
        loan = LoanState.open(120_000, 0.0, 10)
        year = loan.run_year()

        assert year.interest_paid == 0
        assert loan.balance == pytest.approx(108_000)
