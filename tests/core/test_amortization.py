"""
Tests for fixed-rate amortization helpers.
"""

import pytest
from rentallab.core.amortization import (
    amortize_year,
    level_payment,
    monthly_schedule,
)
from rentallab.core.engine import project
from rentallab.core.specs import Assumptions


class TestLevelPayment:
    """Level payment from the annuity formula."""

    def test_matches_annuity_formula(self):
        principal = 400000.0
        rate_pa = 0.035
        term_months = 360

        expected = (
            principal * (rate_pa / 12) / (1 - (1 + rate_pa / 12) ** (-term_months))
        )
        assert level_payment(principal, rate_pa, term_months) == pytest.approx(expected)

    def test_zero_rate_is_straight_line(self):
        assert level_payment(120_000, 0.0, 120) == 1_000.0

    def test_no_payments(self):
        assert level_payment(120_000, 0.05, 0) == 0.0
        assert level_payment(120_000, 0.0, 0) == 0.0
        assert level_payment(120_000, 0.05, -12) == 0.0

    def test_zero_principal(self):
        assert level_payment(0.0, 0.05, 360) == 0.0


class TestAmortizeYear:
    """One year of the monthly loop."""

    def test_first_month_split(self):
        res = amortize_year(120_000, 0.06 / 12, 1_000, months=1)

        assert res.interest == pytest.approx(600)
        assert res.principal == pytest.approx(400)
        assert res.balance == pytest.approx(119_600)

    def test_interest_plus_principal_is_payments(self):
        res = amortize_year(250_000, 0.04 / 12, 1_500)

        assert res.interest + res.principal == pytest.approx(12 * 1_500)
        assert res.balance == pytest.approx(250_000 - res.principal)

    def test_stops_once_paid_off(self):
        # 2,500 left, 1,000 a month at zero interest: three payments, last one overshoots
        res = amortize_year(2_500, 0.0, 1_000)

        assert res.interest == 0
        assert res.principal == 3_000
        assert res.balance == 0.0

    def test_already_paid_off(self):
        res = amortize_year(0.0, 0.05 / 12, 1_000)

        assert res == (0.0, 0.0, 0.0)

    def test_negative_balance_clamped(self):
        res = amortize_year(-500.0, 0.05 / 12, 1_000)

        assert res.balance == 0.0
        assert res.principal == 0.0


class TestMonthlySchedule:
    """Month-by-month amortization table."""

    def test_shape_and_columns(self):
        df = monthly_schedule(397_500, 0.045, 30)

        assert len(df) == 360
        assert list(df.columns) == [
            "month",
            "year",
            "payment",
            "interest",
            "principal",
            "balance",
        ]
        assert df["year"].iloc[0] == 1
        assert df["year"].iloc[-1] == 30

    def test_closure(self):
        df = monthly_schedule(397_500, 0.045, 30)

        assert df["principal"].sum() == pytest.approx(397_500, rel=1e-6)
        assert df["balance"].iloc[-1] == pytest.approx(0, abs=1e-6)
        assert df["balance"].is_monotonic_decreasing
        assert (df["payment"] - df["payment"].iloc[0]).abs().max() < 1e-6

    def test_annual_sums_match_engine(self):
        a = Assumptions(rate_pa=0.05, term_years=15)
        df = monthly_schedule(a.loan_amount, a.rate_pa, a.term_years)
        yearly = df.groupby("year")[["interest", "principal"]].sum()

        for record in project(a):
            assert yearly.loc[record.year, "interest"] == pytest.approx(
                record.exact.interest
            )
            assert yearly.loc[record.year, "principal"] == pytest.approx(
                record.exact.principal
            )

    def test_empty_for_zero_term(self):
        assert monthly_schedule(100_000, 0.05, 0).empty
