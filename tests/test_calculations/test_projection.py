"""Tests for the Invest vs No Invest projection."""

import math
from dataclasses import replace

import pytest

from gearing.models.inputs import InvestmentInputs
from gearing.models.lookups import LoanType
from gearing.calculations.amortization import LoanState
from gearing.calculations.projection import run_projection
from gearing.calculations.snapshot import calculate_snapshot
from tests.fixtures.test_inputs import EXPECTED_SELLING_COSTS


class TestYearZero:
    """Tests for the starting position of both paths."""

    def test_default_scenario(self, default_config):
        """$160k property equity + $500k home equity on both sides."""
        result = run_projection(InvestmentInputs(), default_config)
        year_zero = result.records[0]

        assert year_zero.year == 0
        assert year_zero.invest_net_worth == pytest.approx(660_000)
        assert year_zero.no_invest_net_worth == pytest.approx(660_000)
        assert year_zero.ppor_balance_no_invest == pytest.approx(340_000)
        assert year_zero.loan_balance == pytest.approx(640_000)

    def test_buyers_agent_reduces_starting_equity(self, default_config):
        inputs = replace(InvestmentInputs(), agent_purchase_pct=2.0)
        result = run_projection(inputs, default_config)

        assert result.records[0].invest_net_worth == pytest.approx(660_000 - 16_000)

    def test_deposit_larger_than_ppor_balance(self, default_config):
        """The No Invest balance floors at zero."""
        inputs = replace(InvestmentInputs(), ppor_balance=100_000)
        result = run_projection(inputs, default_config)

        assert result.records[0].ppor_balance_no_invest == 0


class TestRecords:
    """Tests for record count and shape."""

    def test_one_record_per_year_plus_year_zero(self, delayed_inputs, default_config):
        result = run_projection(delayed_inputs, default_config)

        assert [r.year for r in result.records] == [0, 1, 2, 3, 4, 5]
        assert len(result.years) == 5
        assert result.final.year == 5

    def test_zero_horizon_is_clamped(self, seed_inputs, default_config):
        """A horizon below one still projects one year."""
        result = run_projection(replace(seed_inputs, horizon_years=0), default_config)

        assert len(result.records) == 2

    def test_deterministic(self, delayed_inputs, default_config):
        """Identical inputs give identical records."""
        first = run_projection(delayed_inputs, default_config)
        second = run_projection(delayed_inputs, default_config)

        assert first.records == second.records

    def test_net_worth_difference(self, delayed_inputs, default_config):
        result = run_projection(delayed_inputs, default_config)

        assert result.net_worth_difference == pytest.approx(
            result.final_invest_net_worth - result.final_no_invest_net_worth
        )


class TestSeedYear:
    """Tests for the one-year seed scenario."""

    def test_year_one_matches_snapshot(self, seed_inputs, default_config):
        """Year one of the projection is the snapshot year."""
        snapshot = calculate_snapshot(seed_inputs, default_config)
        year_one = run_projection(seed_inputs, default_config).records[1]

        assert year_one.interest_paid == pytest.approx(snapshot.annual_interest)
        assert year_one.principal_paid == pytest.approx(snapshot.annual_principal)
        assert year_one.tax_savings == pytest.approx(snapshot.annual_tax_savings)
        assert year_one.after_tax_cashflow == pytest.approx(-snapshot.oop_after_tax)
        assert year_one.loan_balance == pytest.approx(640_000 - snapshot.annual_principal)

    def test_invest_ppor_amortizes_on_schedule(self, seed_inputs, default_config):
        year_one = run_projection(seed_inputs, default_config).records[1]
        expected = LoanState.open(500_000, 6.0, 25).run_year()

        assert year_one.ppor_balance_invest == pytest.approx(expected.ending_balance)

    def test_no_invest_ppor_receives_redirected_cost(self, seed_inputs, default_config):
        """The investment's monthly out-of-pocket goes onto the home loan instead."""
        snapshot = calculate_snapshot(seed_inputs, default_config)
        year_one = run_projection(seed_inputs, default_config).records[1]
        expected = LoanState.open(340_000, 6.0, 25).run_year(
            extra_monthly=year_one.redirected_monthly,
        )

        assert year_one.redirected_monthly == pytest.approx(snapshot.oop_before_tax / 12)
        assert year_one.ppor_balance_no_invest == pytest.approx(expected.ending_balance)

    def test_terminal_net_worth(self, seed_inputs, default_config):
        """Selling costs come off the final property value; losses floor at zero."""
        final = run_projection(seed_inputs, default_config).final
        equity = max(0.0, 800_000 - EXPECTED_SELLING_COSTS - final.loan_balance)
        ppor_equity = 1_000_000 - final.ppor_balance_invest

        assert final.selling_costs == EXPECTED_SELLING_COSTS
        assert final.cumulative_after_tax_cashflow < 0
        assert final.invest_net_worth == pytest.approx(equity + ppor_equity)
        assert final.no_invest_net_worth == pytest.approx(1_000_000 - final.ppor_balance_no_invest)

    def test_positive_cashflow_counts_toward_net_worth(self, seed_inputs, default_config):
        inputs = replace(seed_inputs, weekly_rent=2_000)
        final = run_projection(inputs, default_config).final
        equity = 800_000 - EXPECTED_SELLING_COSTS - final.loan_balance
        ppor_equity = 1_000_000 - final.ppor_balance_invest

        assert final.cumulative_after_tax_cashflow > 0
        assert final.invest_net_worth == pytest.approx(
            equity + ppor_equity + final.cumulative_after_tax_cashflow
        )


class TestInvestmentDelay:
    """Tests for a delayed purchase."""

    def test_dormant_years(self, delayed_inputs, default_config):
        """Nothing is earned, paid or redirected before activation."""
        result = run_projection(delayed_inputs, default_config)

        for record in result.records[1:3]:
            assert not record.investment_active
            assert record.rent == 0
            assert record.expenses == 0
            assert record.interest_paid == 0
            assert record.principal_paid == 0
            assert record.tax_savings == 0
            assert record.cumulative_after_tax_cashflow == 0
            assert record.redirected_monthly == 0

    def test_property_appreciates_while_dormant(self, delayed_inputs, default_config):
        year_one = run_projection(delayed_inputs, default_config).records[1]

        assert year_one.property_value == pytest.approx(840_000)
        assert year_one.equity == pytest.approx(840_000)

    def test_activation_year_matches_undelayed_first_year(self, delayed_inputs, seed_inputs, default_config):
        """The loan opens in year 3 with a full term, like year 1 without a delay."""
        delayed = run_projection(delayed_inputs, default_config).records[3]
        undelayed = run_projection(seed_inputs, default_config).records[1]

        assert delayed.investment_active
        assert delayed.interest_paid == pytest.approx(undelayed.interest_paid)
        assert delayed.principal_paid == pytest.approx(undelayed.principal_paid)
        assert delayed.rent == pytest.approx(31_200)
        assert delayed.redirected_monthly > 0

    def test_selling_costs_only_in_final_year(self, delayed_inputs, default_config):
        result = run_projection(delayed_inputs, default_config)

        assert [r.selling_costs for r in result.records[:-1]] == [0] * 5
        assert result.final.selling_costs == pytest.approx(EXPECTED_SELLING_COSTS)


class TestLoanBehaviour:
    """Tests for loan types and payoff across the horizon."""

    def test_interest_only_balance_is_flat(self, delayed_inputs, default_config):
        inputs = replace(delayed_inputs, invest_delay_years=0, loan_type=LoanType.INTEREST_ONLY)
        result = run_projection(inputs, default_config)

        for record in result.years:
            assert record.loan_balance == pytest.approx(640_000)
            assert record.principal_paid == 0

    def test_paid_off_loan_stays_closed(self, seed_inputs, default_config):
        """A short loan is retired and never reopened."""
        inputs = replace(seed_inputs, loan_term_years=5, horizon_years=40)
        result = run_projection(inputs, default_config)

        assert result.records[5].loan_balance < 1
        for record in result.records[6:]:
            assert record.loan_balance < 1
            assert record.interest_paid < 1
            assert record.principal_paid < 1

    def test_paid_off_ppor_stays_at_zero(self, seed_inputs, default_config):
        inputs = replace(seed_inputs, ppor_balance=50_000, horizon_years=3)
        result = run_projection(inputs, default_config)

        assert all(r.ppor_balance_no_invest == 0 for r in result.records)

    def test_extra_ppor_repayments_apply_to_both_paths(self, delayed_inputs, default_config):
        base = run_projection(delayed_inputs, default_config).final
        extra = run_projection(replace(delayed_inputs, ppor_extra_monthly=500), default_config).final

        assert extra.ppor_balance_invest < base.ppor_balance_invest
        assert extra.ppor_balance_no_invest < base.ppor_balance_no_invest

    def test_zero_term_is_unavailable(self, seed_inputs, default_config):
        """A zero-length investment loan makes Invest net worth unavailable."""
        result = run_projection(replace(seed_inputs, loan_term_years=0), default_config)

        assert math.isnan(result.final_invest_net_worth)
        assert math.isnan(result.final.tax_savings)


class TestAppreciation:
    """Tests for growth assumptions."""

    def test_higher_growth_favours_investing(self, default_config):
        low = run_projection(replace(InvestmentInputs(), appreciation_pct=3.0), default_config)
        high = run_projection(replace(InvestmentInputs(), appreciation_pct=7.0), default_config)

        assert high.final_invest_net_worth > low.final_invest_net_worth
        assert high.final_no_invest_net_worth == pytest.approx(low.final_no_invest_net_worth)

    def test_property_value_compounds(self, delayed_inputs, default_config):
        result = run_projection(delayed_inputs, default_config)

        assert result.final.property_value == pytest.approx(800_000 * 1.05 ** 5)
        assert result.final.ppor_value_invest == pytest.approx(1_000_000 * 1.04 ** 5)

    def test_negative_growth_floors_at_minus_100(self, seed_inputs, default_config):
        result = run_projection(replace(seed_inputs, appreciation_pct=-150), default_config)

        assert result.final.property_value == 0
