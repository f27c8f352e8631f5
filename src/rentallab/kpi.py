"""
KPI calculation utilities for projection results.

These are presentation-layer metrics derived from a ``ProjectionResult``;
the engine itself never computes them. Ratios use the rounded display values
of the requested year, the same numbers a reader sees in the yearly table.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from rentallab.core.results import ProjectionResult


def noi(result: ProjectionResult, year: int = 1) -> float:
    """
    Net operating income: gross rent minus operating expenses.

    Args:
        result: Projection to read from
        year: Year number (1-based)

    Returns:
        NOI of that year, excluding financing costs
    """
    record = result.year(year)
    return record.gross_rent - record.operating_expenses


def cash_on_cash(result: ProjectionResult, year: int = 1) -> float:
    """
    Cash-on-cash return: post-tax cashflow / initial cash invested.

    Returns 0.0 when nothing was invested (zero down payment) or the
    projection has no years.
    """
    if result.initial_cash_invested <= 0 or not result.schedule:
        return 0.0
    return result.year(year).cashflow_post_tax / result.initial_cash_invested


def cap_rate(result: ProjectionResult, year: int = 1) -> float:
    """
    Capitalization rate: NOI / purchase price.

    Independent of financing. Returns 0.0 for a zero price or an empty
    projection.
    """
    price = result.assumptions.purchase_price
    if price <= 0 or not result.schedule:
        return 0.0
    return noi(result, year) / price


def expense_composition(result: ProjectionResult, year: int = 1) -> pd.DataFrame:
    """
    Breakdown of all outflows (operating expenses + interest) for one year.

    Args:
        result: Projection to read from
        year: Year number (1-based)

    Returns:
        DataFrame with columns name, value and share, limited to components
        with a positive value
    """
    breakdown = result.year(year).breakdown
    df = pd.DataFrame(breakdown.items(), columns=["name", "value"])
    df = df[df["value"] > 0].reset_index(drop=True)

    total = df["value"].sum()
    df["share"] = df["value"] / total if total > 0 else 0.0
    return df


def cumulative_cashflow(result: ProjectionResult) -> pd.Series:
    """
    Running total of post-tax cashflow.

    Returns:
        Series indexed by year
    """
    df = result.to_frame(exact=True)
    return df["cashflow_post_tax"].cumsum().rename("cumulative_cashflow")


def ltv(result: ProjectionResult) -> pd.Series:
    """
    Loan to value ratio per year: loan balance / property value.

    Returns:
        Series indexed by year (NaN where the property value is not positive)
    """
    df = result.to_frame(exact=True)
    value = df["property_value"].to_numpy()
    balance = df["loan_balance"].to_numpy()

    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.where(value > 0, balance / value, np.nan)

    return pd.Series(ratio, index=df.index, name="ltv")


def monthly_view(result: ProjectionResult, year: int = 1) -> dict[str, float]:
    """
    Monthly equivalents of one year's cashflow and mortgage split.

    Returns:
        Dict with cashflow_pre_tax, cashflow_post_tax, interest, principal
        and mortgage_payment per month
    """
    record = result.year(year)
    return {
        "cashflow_pre_tax": record.cashflow_pre_tax / 12,
        "cashflow_post_tax": record.cashflow_post_tax / 12,
        "interest": record.interest / 12,
        "principal": record.principal / 12,
        "mortgage_payment": result.monthly_payment,
    }


def summary(result: ProjectionResult, year: int = 1) -> dict[str, float]:
    """Collect the headline KPIs of one year in a flat dict."""
    if not result.schedule:
        return {
            "monthly_payment": result.monthly_payment,
            "loan_amount": result.loan_amount,
            "initial_cash_invested": result.initial_cash_invested,
        }
    return {
        "monthly_payment": result.monthly_payment,
        "loan_amount": result.loan_amount,
        "initial_cash_invested": result.initial_cash_invested,
        "noi": noi(result, year),
        "cash_on_cash": cash_on_cash(result, year),
        "cap_rate": cap_rate(result, year),
    }
