"""
Tests for assumptions validation reports.
"""

import pytest
from rentallab.core.specs import Assumptions
from rentallab.core.validation import AssumptionsReport, validate_assumptions


class TestValidateAssumptions:
    """Range checks on assumptions records."""

    def test_reference_scenario_is_clean(self):
        report = validate_assumptions(Assumptions())

        assert report.is_valid()
        assert not report.has_warnings()
        assert report.get_exit_code() == 0

    @pytest.mark.parametrize(
        "changes,fragment",
        [
            ({"purchase_price": 0}, "purchase_price must be positive"),
            ({"term_years": 0}, "term_years must be at least 1"),
            ({"down_payment_pct": 1.2}, "down_payment_pct must be between 0 and 1"),
            ({"vacancy_pct": -0.1}, "vacancy_pct must be between 0 and 1"),
            ({"income_tax_rate": 54}, "income_tax_rate must be between 0 and 1"),
            ({"rate_pa": -0.01}, "rate_pa must not be negative"),
            ({"monthly_strata": -10}, "monthly_strata must not be negative"),
            ({"monthly_rent": float("nan")}, "monthly_rent must be a finite number"),
        ],
    )
    def test_errors(self, changes, fragment):
        report = validate_assumptions(Assumptions(**changes))

        assert report.has_errors()
        assert any(fragment in msg for msg in report.errors)
        assert report.get_exit_code() == 1

    def test_non_finite_reported_once(self):
        report = validate_assumptions(Assumptions(rate_pa=float("inf")))

        assert report.errors == ["rate_pa must be a finite number"]

    @pytest.mark.parametrize(
        "changes,fragment",
        [
            ({"appreciation_pa": -0.02}, "appreciation_pa is negative"),
            ({"rent_growth_pa": -0.01}, "rent_growth_pa is negative"),
            ({"vacancy_pct": 1.0}, "no rent will be collected"),
            ({"down_payment_pct": 0.0}, "cash-on-cash is undefined"),
        ],
    )
    def test_warnings(self, changes, fragment):
        report = validate_assumptions(Assumptions(**changes))

        assert report.is_valid()
        assert any(fragment in msg for msg in report.warnings)
        assert report.get_exit_code() == 2


class TestAssumptionsReport:
    """Report serialization and formatting."""

    def test_to_dict(self):
        report = AssumptionsReport(errors=["bad"], warnings=["odd"])
        data = report.to_dict()

        assert data["errors"] == ["bad"]
        assert data["warnings"] == ["odd"]
        assert data["has_errors"] is True
        assert data["is_valid"] is False
        assert data["exit_code"] == 1

    def test_str(self):
        assert str(AssumptionsReport()) == "✅ Validation passed"

        text = str(AssumptionsReport(errors=["bad"], warnings=["odd"]))
        assert text.splitlines() == ["❌ Validation failed", "Error: bad", "Warning: odd"]
