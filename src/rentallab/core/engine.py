"""
Projection engine: assumptions in, yearly snapshots out.
"""

from __future__ import annotations

import logging

from .amortization import amortize_year, level_payment
from .currency import round_currency
from .results import OutflowBreakdown, ProjectionResult, YearFigures, YearRecord
from .specs import Assumptions

logger = logging.getLogger(__name__)


def project(assumptions: Assumptions) -> ProjectionResult:
    """
    Project a leveraged rental property year by year over its amortization term.

    The monthly payment is fixed up front. Each year then runs the monthly
    amortization loop, collects rent net of vacancy, pays operating expenses,
    estimates income tax on rent minus expenses minus interest, and
    appreciates the property before equity is measured.

    Rent and expenses grow only after a year's record is emitted, so year 1
    uses the starting assumptions exactly and year k uses them compounded
    k-1 times. Appreciation, by contrast, is applied within the year.

    The function is pure: running state lives in locals, nothing is validated
    or clamped (a down payment above 100% simply yields a loan that is
    already paid off), and NaN/inf inputs propagate into the outputs.

    Args:
        assumptions: Inputs for the run

    Returns:
        ProjectionResult with ``term_years`` records (none for a term <= 0)
    """
    a = assumptions

    loan_amount = a.loan_amount
    r_m = a.monthly_rate
    payment = level_payment(loan_amount, a.rate_pa, a.n_payments)

    logger.debug(
        "Projecting %s years: loan=%.2f payment=%.2f", a.term_years, loan_amount, payment
    )

    # Running state, carried unrounded from year to year
    balance = loan_amount
    value = a.purchase_price
    rent = a.monthly_rent
    tax = a.annual_property_tax
    insurance = a.annual_insurance
    strata = a.monthly_strata
    other = a.monthly_other

    schedule: list[YearRecord] = []
    for year in range(1, a.term_years + 1):
        # 1. Monthly amortization
        amort = amortize_year(balance, r_m, payment)
        balance = amort.balance
        debt_service = amort.interest + amort.principal

        # 2. Income and operating expenses at current-year values
        gross_rent = rent * 12 * (1 - a.vacancy_pct)
        operating_expenses = strata * 12 + tax + insurance + other * 12
        cashflow_pre_tax = gross_rent - operating_expenses - debt_service

        # 3. Flat-rate tax on positive taxable income; principal is not deductible
        taxable_income = gross_rent - operating_expenses - amort.interest
        estimated_tax = (
            taxable_income * a.income_tax_rate if taxable_income > 0 else 0.0
        )
        cashflow_post_tax = cashflow_pre_tax - estimated_tax

        # 4. Appreciation lands before equity is measured
        start_value = value
        value = value * (1 + a.appreciation_pa)
        appreciation = value - start_value

        equity = value - balance
        total_gain = cashflow_post_tax + amort.principal + appreciation

        exact = YearFigures(
            property_value=value,
            loan_balance=balance,
            equity=equity,
            gross_rent=gross_rent,
            operating_expenses=operating_expenses,
            mortgage_payment=debt_service,
            interest=amort.interest,
            principal=amort.principal,
            taxable_income=taxable_income,
            estimated_tax=estimated_tax,
            cashflow_pre_tax=cashflow_pre_tax,
            cashflow_post_tax=cashflow_post_tax,
            appreciation=appreciation,
            total_gain=total_gain,
        )
        schedule.append(
            YearRecord(
                year=year,
                property_value=round_currency(value),
                loan_balance=round_currency(balance),
                equity=round_currency(equity),
                gross_rent=round_currency(gross_rent),
                operating_expenses=round_currency(operating_expenses),
                mortgage_payment=round_currency(debt_service),
                interest=round_currency(amort.interest),
                principal=round_currency(amort.principal),
                cashflow_pre_tax=round_currency(cashflow_pre_tax),
                cashflow_post_tax=round_currency(cashflow_post_tax),
                total_gain=round_currency(total_gain),
                appreciation=round_currency(appreciation),
                breakdown=OutflowBreakdown(
                    strata=strata * 12,
                    tax=tax,
                    insurance=insurance,
                    other=other * 12,
                    interest=amort.interest,
                ),
                exact=exact,
            )
        )

        # 5. Grow rent and expenses for next year, strictly after emitting
        rent *= 1 + a.rent_growth_pa
        tax *= 1 + a.expense_inflation_pa
        insurance *= 1 + a.expense_inflation_pa
        strata *= 1 + a.expense_inflation_pa
        other *= 1 + a.expense_inflation_pa

    return ProjectionResult(
        monthly_payment=payment,
        loan_amount=loan_amount,
        initial_cash_invested=a.initial_cash_invested,
        schedule=tuple(schedule),
        assumptions=a,
    )
