"""
Validation and reporting utilities for RentalLab.

The engine accepts any finite numbers and never clamps its inputs. This module
is where callers find out whether an assumptions record is sensible before
projecting it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any

from .specs import Assumptions

# Fields that must lie within [0, 1]
_FRACTIONS = ("down_payment_pct", "vacancy_pct", "income_tax_rate")

# Amounts and rates that must not be negative
_NON_NEGATIVE = (
    "rate_pa",
    "monthly_rent",
    "monthly_strata",
    "annual_property_tax",
    "annual_insurance",
    "monthly_other",
)

# Growth rates that may be negative but deserve a second look
_GROWTH = ("rent_growth_pa", "expense_inflation_pa", "appreciation_pa")


@dataclass
class AssumptionsReport:
    """
    Structured validation report for an assumptions record.

    Errors are inputs the projection would turn into meaningless numbers;
    warnings are legal but unusual inputs.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def is_valid(self) -> bool:
        """Check if validation passed (no errors, warnings are OK)."""
        return not self.has_errors()

    def get_exit_code(self) -> int:
        """
        Get appropriate CLI exit code.

        Returns:
            0: Valid (no errors)
            1: Errors present
            2: Warnings only
        """
        if self.has_errors():
            return 1
        elif self.has_warnings():
            return 2
        else:
            return 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "has_errors": self.has_errors(),
            "has_warnings": self.has_warnings(),
            "is_valid": self.is_valid(),
            "exit_code": self.get_exit_code(),
        }

    def __str__(self) -> str:
        lines = ["✅ Validation passed" if self.is_valid() else "❌ Validation failed"]
        lines.extend(f"Error: {msg}" for msg in self.errors)
        lines.extend(f"Warning: {msg}" for msg in self.warnings)
        return "\n".join(lines)


def validate_assumptions(assumptions: Assumptions) -> AssumptionsReport:
    """
    Check an assumptions record against the ranges the model is meant for.

    Args:
        assumptions: Record to check

    Returns:
        AssumptionsReport listing errors and warnings
    """
    report = AssumptionsReport()
    a = assumptions

    non_finite = [
        f.name for f in fields(a) if not math.isfinite(getattr(a, f.name))
    ]
    for name in non_finite:
        report.errors.append(f"{name} must be a finite number")

    def check(name: str) -> bool:
        return name not in non_finite

    if check("purchase_price") and a.purchase_price <= 0:
        report.errors.append("purchase_price must be positive")
    if check("term_years") and a.term_years <= 0:
        report.errors.append("term_years must be at least 1")

    for name in _FRACTIONS:
        value = getattr(a, name)
        if check(name) and not 0 <= value <= 1:
            report.errors.append(f"{name} must be between 0 and 1, got {value}")

    for name in _NON_NEGATIVE:
        value = getattr(a, name)
        if check(name) and value < 0:
            report.errors.append(f"{name} must not be negative, got {value}")

    for name in _GROWTH:
        value = getattr(a, name)
        if check(name) and value < 0:
            report.warnings.append(f"{name} is negative ({value}); values will shrink")

    if check("vacancy_pct") and a.vacancy_pct == 1:
        report.warnings.append("vacancy_pct is 100%; no rent will be collected")
    if check("down_payment_pct") and a.down_payment_pct == 0:
        report.warnings.append("down_payment_pct is 0; cash-on-cash is undefined")

    return report
