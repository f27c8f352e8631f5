"""
Result containers for RentalLab projections.

A projection is an ordered, immutable tuple of yearly records. Each record
carries display values rounded to whole currency units plus the unrounded
figures they were derived from.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from .specs import Assumptions


# Display labels for the outflow composition, in display order
OUTFLOW_LABELS: dict[str, str] = {
    "interest": "Interest",
    "strata": "Strata/Maint",
    "tax": "Prop Tax",
    "insurance": "Insurance",
    "other": "Other",
}


@dataclass(frozen=True)
class OutflowBreakdown:
    """
    Annual outflow composition for one year (unrounded).

    Expense components use the current-year values, before that year's
    inflation step is applied.
    """

    strata: float
    tax: float
    insurance: float
    other: float
    interest: float

    @property
    def total(self) -> float:
        return self.strata + self.tax + self.insurance + self.other + self.interest

    def items(self) -> list[tuple[str, float]]:
        """Return (label, value) pairs in display order."""
        return [(label, getattr(self, key)) for key, label in OUTFLOW_LABELS.items()]


@dataclass(frozen=True)
class YearFigures:
    """Unrounded figures of one projected year."""

    property_value: float
    loan_balance: float
    equity: float
    gross_rent: float
    operating_expenses: float
    mortgage_payment: float
    interest: float
    principal: float
    taxable_income: float
    estimated_tax: float
    cashflow_pre_tax: float
    cashflow_post_tax: float
    appreciation: float
    total_gain: float


@dataclass(frozen=True)
class YearRecord:
    """
    One year of the projection, as consumed by tables and charts.

    Currency fields are rounded to whole units. ``breakdown`` and ``exact``
    hold the unrounded values.

    Attributes:
        year: Year number, starting at 1
        property_value: Property value at the end of the year
        loan_balance: Remaining loan balance at the end of the year
        equity: property_value - loan_balance
        gross_rent: Rent collected after vacancy
        operating_expenses: Strata, property tax, insurance and other costs
        mortgage_payment: Interest + principal paid during the year
        interest: Interest portion of the mortgage payments
        principal: Principal portion of the mortgage payments
        cashflow_pre_tax: Rent minus expenses minus mortgage payments
        cashflow_post_tax: Pre-tax cashflow minus the estimated income tax
        total_gain: Post-tax cashflow + principal paydown + appreciation
        appreciation: Increase in property value over the year
        breakdown: Outflow composition (strata, tax, insurance, other, interest)
        exact: The same figures before rounding
    """

    year: int
    property_value: float
    loan_balance: float
    equity: float
    gross_rent: float
    operating_expenses: float
    mortgage_payment: float
    interest: float
    principal: float
    cashflow_pre_tax: float
    cashflow_post_tax: float
    total_gain: float
    appreciation: float
    breakdown: OutflowBreakdown
    exact: YearFigures

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict (nested breakdown and exact figures)."""
        return asdict(self)


# Columns of the tabular view, in display order
DISPLAY_COLUMNS: list[str] = [
    f.name
    for f in fields(YearRecord)
    if f.name not in ("year", "breakdown", "exact")
]


@dataclass(frozen=True)
class ProjectionResult:
    """
    Output of one projection run.

    Attributes:
        monthly_payment: Level monthly mortgage payment for the life of the loan
        loan_amount: Original loan amount
        initial_cash_invested: Down payment committed at purchase
        schedule: Chronological tuple of YearRecords (one per amortization year)
        assumptions: The inputs the projection was derived from
    """

    monthly_payment: float
    loan_amount: float
    initial_cash_invested: float
    schedule: tuple[YearRecord, ...]
    assumptions: Assumptions

    def __len__(self) -> int:
        return len(self.schedule)

    def __iter__(self):
        return iter(self.schedule)

    def year(self, n: int) -> YearRecord:
        """
        Get the record of year ``n`` (1-based).

        Raises:
            IndexError: If the year is outside the projection
        """
        if n < 1 or n > len(self.schedule):
            raise IndexError(
                f"Year {n} outside projection of {len(self.schedule)} years"
            )
        return self.schedule[n - 1]

    def head(self, n: int = 10) -> tuple[YearRecord, ...]:
        """Return the first ``n`` years (the whole schedule if shorter)."""
        return self.schedule[:n]

    def to_frame(self, exact: bool = False) -> pd.DataFrame:
        """
        Tabular view of the schedule, one row per year.

        Args:
            exact: Use the unrounded figures instead of the display values

        Returns:
            DataFrame indexed by year with one column per currency field
        """
        if exact:
            columns = [f.name for f in fields(YearFigures)]
            rows = [asdict(r.exact) for r in self.schedule]
        else:
            columns = DISPLAY_COLUMNS
            rows = [{c: getattr(r, c) for c in columns} for r in self.schedule]

        df = pd.DataFrame(rows, columns=columns, dtype=float)
        df.index = pd.Index([r.year for r in self.schedule], name="year", dtype=int)
        return df

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return {
            "monthly_payment": self.monthly_payment,
            "loan_amount": self.loan_amount,
            "initial_cash_invested": self.initial_cash_invested,
            "assumptions": self.assumptions.to_dict(),
            "schedule": [r.to_dict() for r in self.schedule],
        }
