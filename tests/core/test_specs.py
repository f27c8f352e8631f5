"""
Tests for the assumptions record and dict loading.
"""

import warnings

import pytest
from rentallab.core import errors
from rentallab.core.errors import ConfigError, RentalLabWarning
from rentallab.core.specs import DEFAULT_ASSUMPTIONS, Assumptions


@pytest.fixture(autouse=True)
def reset_warned():
    """Clear the warn-once registry between tests."""
    errors._warned.clear()
    yield
    errors._warned.clear()


class TestDefaults:
    """Reference scenario defaults and derived helpers."""

    def test_reference_values(self):
        a = DEFAULT_ASSUMPTIONS

        assert a.purchase_price == 530_000
        assert a.down_payment_pct == 0.25
        assert a.rate_pa == 0.045
        assert a.term_years == 30
        assert a.income_tax_rate == 0.54

    def test_derived_helpers(self):
        a = Assumptions()

        assert a.loan_amount == pytest.approx(397_500)
        assert a.initial_cash_invested == pytest.approx(132_500)
        assert a.monthly_rate == pytest.approx(0.00375)
        assert a.n_payments == 360

    def test_evolve_returns_copy(self):
        a = Assumptions()
        b = a.evolve(rate_pa=0.06)

        assert b.rate_pa == 0.06
        assert a.rate_pa == 0.045
        assert b.term_years == a.term_years

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Assumptions().rate_pa = 0.1


class TestFromDict:
    """Loading assumptions from plain dicts."""

    def test_round_trip_defaults(self):
        assert Assumptions.from_dict(DEFAULT_ASSUMPTIONS.to_dict()) == DEFAULT_ASSUMPTIONS

    def test_missing_keys_use_defaults(self):
        a = Assumptions.from_dict({"purchase_price": 400_000, "rate_pa": "0.05"})

        assert a.purchase_price == 400_000.0
        assert a.rate_pa == 0.05
        assert a.monthly_rent == DEFAULT_ASSUMPTIONS.monthly_rent

    def test_term_coerced_to_int(self):
        a = Assumptions.from_dict({"term_years": 25.0})

        assert a.term_years == 25
        assert isinstance(a.term_years, int)

    def test_fractional_term_rejected(self):
        with pytest.raises(ConfigError, match="whole number"):
            Assumptions.from_dict({"term_years": 27.5})

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="Unknown assumption keys: hoa_fee"):
            Assumptions.from_dict({"hoa_fee": 300})

    @pytest.mark.parametrize("bad", ["a lot", None, [1, 2], True])
    def test_non_numeric_rejected(self, bad):
        with pytest.raises(ConfigError, match="purchase_price must be a number"):
            Assumptions.from_dict({"purchase_price": bad})

    def test_aliases(self):
        a = Assumptions.from_dict(
            {
                "price": 300_000,
                "interest_rate_pa": 0.05,
                "amortization_years": 25,
                "tax_rate": 0.3,
            }
        )

        assert a.purchase_price == 300_000
        assert a.rate_pa == 0.05
        assert a.term_years == 25
        assert a.income_tax_rate == 0.3

    def test_alias_clash_warns_and_canonical_wins(self):
        with pytest.warns(RentalLabWarning, match="'interest_rate_pa' ignored"):
            a = Assumptions.from_dict({"rate_pa": 0.04, "interest_rate_pa": 0.05})

        assert a.rate_pa == 0.04

    def test_alias_clash_warns_once(self):
        Assumptions.from_dict({"rate_pa": 0.04, "interest_rate_pa": 0.05})

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Assumptions.from_dict({"rate_pa": 0.04, "interest_rate_pa": 0.05})

    def test_matching_alias_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            a = Assumptions.from_dict({"rate_pa": 0.04, "interest_rate_pa": 0.04})

        assert a.rate_pa == 0.04
