"""
Assumptions record and loading utilities for RentalLab.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from .errors import ConfigError, warn_once


@dataclass(frozen=True)
class Assumptions:
    """
    Immutable input record for one projection run.

    All rates are fractions (``0.045`` for 4.5%), all amounts are plain
    currency units. Nothing is validated here: ``project`` accepts any finite
    numbers and ``validate_assumptions`` reports on sane ranges.

    **Acquisition:**
        - purchase_price: Purchase price of the property
        - down_payment_pct: Down-payment fraction of the price (0..1)

    **Financing:**
        - rate_pa: Nominal annual interest rate
        - term_years: Amortization term in whole years

    **Income:**
        - monthly_rent: Starting monthly gross rent
        - vacancy_pct: Share of the year the unit sits empty (0..1)
        - rent_growth_pa: Annual rent growth (may be negative)

    **Recurring expenses:**
        - monthly_strata: Monthly strata / maintenance fee
        - annual_property_tax: Annual property tax
        - annual_insurance: Annual insurance premium
        - monthly_other: Other monthly costs (management, repairs)
        - expense_inflation_pa: Inflation applied to all four expenses

    **Growth and tax:**
        - appreciation_pa: Annual property-value growth (may be negative)
        - income_tax_rate: Flat marginal rate on positive taxable income

    The defaults reproduce the reference scenario: a 530k unit, 25% down,
    30 years at 4.5%, renting for 2,400 a month.
    """

    purchase_price: float = 530_000.0
    down_payment_pct: float = 0.25
    rate_pa: float = 0.045
    term_years: int = 30
    monthly_rent: float = 2_400.0
    vacancy_pct: float = 0.0
    rent_growth_pa: float = 0.0
    monthly_strata: float = 466.0
    annual_property_tax: float = 2_000.0
    annual_insurance: float = 1_200.0
    monthly_other: float = 0.0
    expense_inflation_pa: float = 0.02
    appreciation_pa: float = 0.03
    income_tax_rate: float = 0.54

    @property
    def loan_amount(self) -> float:
        """Original loan amount: price minus the down payment."""
        return self.purchase_price * (1 - self.down_payment_pct)

    @property
    def initial_cash_invested(self) -> float:
        """Cash committed at purchase (the down payment)."""
        return self.purchase_price * self.down_payment_pct

    @property
    def monthly_rate(self) -> float:
        return self.rate_pa / 12

    @property
    def n_payments(self) -> int:
        return self.term_years * 12

    def evolve(self, **changes: Any) -> Assumptions:
        """Return a copy with some fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict with canonical keys."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Assumptions:
        """
        Create an Assumptions record from a dictionary.

        Missing keys fall back to the reference scenario defaults. User-friendly
        aliases are accepted (see ``ALIASES``); when both an alias and its
        canonical key are given, the canonical key wins and a warning is issued.

        Args:
            data: Mapping of field names (or aliases) to numbers

        Returns:
            Assumptions instance

        Raises:
            ConfigError: On unknown keys, non-numeric values or a non-integer term
        """
        spec = dict(data)

        # --- Aliases ---
        for alias, canonical in ALIASES.items():
            if alias not in spec:
                continue
            value = spec.pop(alias)
            if canonical in spec and spec[canonical] != value:
                warn_once(
                    "ALIAS_CLASH_" + canonical.upper(),
                    f"'{alias}' ignored because '{canonical}' is set "
                    f"(precedence: {canonical}).",
                )
            else:
                spec.setdefault(canonical, value)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(spec) - known)
        if unknown:
            raise ConfigError(f"Unknown assumption keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for name, raw in spec.items():
            values[name] = _coerce_number(name, raw)

        if "term_years" in values:
            values["term_years"] = _coerce_term(values["term_years"])

        return cls(**values)


# User-friendly names mapped onto canonical field names
ALIASES: dict[str, str] = {
    "price": "purchase_price",
    "down_payment": "down_payment_pct",
    "interest_rate_pa": "rate_pa",
    "amortization_years": "term_years",
    "rent_monthly": "monthly_rent",
    "vacancy_rate": "vacancy_pct",
    "rent_increase_pa": "rent_growth_pa",
    "property_tax_pa": "annual_property_tax",
    "insurance_pa": "annual_insurance",
    "tax_rate": "income_tax_rate",
}


def _coerce_number(name: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _coerce_term(value: float) -> int:
    if not math.isfinite(value) or value != int(value):
        raise ConfigError(f"term_years must be a whole number of years, got {value}")
    return int(value)


DEFAULT_ASSUMPTIONS = Assumptions()
