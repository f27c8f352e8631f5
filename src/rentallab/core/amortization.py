"""
Fixed-rate amortization helpers.

The level payment is computed once from the standard annuity formula and held
constant for the whole term; the rate is never re-derived per year.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import pandas as pd


class YearAmortization(NamedTuple):
    """
    Interest and principal paid over one year of monthly payments.

    Attributes:
        interest: Sum of monthly interest portions
        principal: Sum of monthly principal portions
        balance: Loan balance after the year (never negative)
    """

    interest: float
    principal: float
    balance: float


def level_payment(principal: float, rate_pa: float, n_months: int) -> float:
    """
    Calculate the level monthly payment of a fixed-rate amortizing loan.

    Args:
        principal: Loan amount
        rate_pa: Nominal annual interest rate (e.g., 0.045 for 4.5%)
        n_months: Number of monthly payments

    Returns:
        Monthly payment. Falls back to straight-line ``principal / n_months``
        at a zero rate, and to 0.0 when there are no payments.
    """
    if n_months <= 0:
        return 0.0

    r_m = rate_pa / 12
    if r_m == 0:
        return principal / n_months

    growth = (1 + r_m) ** n_months
    return principal * r_m * growth / (growth - 1)


def amortize_year(
    balance: float, monthly_rate: float, payment: float, months: int = 12
) -> YearAmortization:
    """
    Run the monthly amortization loop for one year.

    Each month accrues ``balance * monthly_rate`` of interest and applies the
    rest of the payment to principal. The loop stops early once the balance
    is paid off, and a final overshoot is clamped so the balance ends at 0.

    Args:
        balance: Loan balance at the start of the year
        monthly_rate: Annual rate divided by 12
        payment: Level monthly payment
        months: Number of payments in the year

    Returns:
        YearAmortization with annual interest, principal and ending balance
    """
    interest_total = 0.0
    principal_total = 0.0

    for _ in range(months):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        principal = payment - interest

        interest_total += interest
        principal_total += principal
        balance -= principal

    if balance < 0:
        balance = 0.0

    return YearAmortization(interest_total, principal_total, balance)


def monthly_schedule(principal: float, rate_pa: float, term_years: int) -> pd.DataFrame:
    """
    Build the month-by-month amortization table for a loan.

    Uses the same recurrence as the projection engine, so annual sums of this
    table match the interest and principal of each projected year.

    Args:
        principal: Loan amount
        rate_pa: Nominal annual interest rate
        term_years: Amortization term in years

    Returns:
        DataFrame with columns month, year, payment, interest, principal, balance
        (one row per scheduled payment, empty for a non-positive term)
    """
    n = max(0, int(term_years) * 12)
    r_m = rate_pa / 12
    payment = level_payment(principal, rate_pa, n)

    interest = np.zeros(n)
    principal_paid = np.zeros(n)
    balance = np.zeros(n)

    bal = principal
    for k in range(n):
        if bal > 0:
            interest[k] = bal * r_m
            principal_paid[k] = payment - interest[k]
            bal -= principal_paid[k]
            if bal < 0:
                bal = 0.0
        balance[k] = bal

    months = np.arange(1, n + 1)
    return pd.DataFrame(
        {
            "month": months,
            "year": (months - 1) // 12 + 1,
            "payment": interest + principal_paid,
            "interest": interest,
            "principal": principal_paid,
            "balance": balance,
        }
    )
