"""
RentalLab - Year-by-Year Projections for Leveraged Rental Property

RentalLab turns a small set of acquisition, financing, income, expense and
growth assumptions into a chronological projection of mortgage amortization,
cashflow (pre- and post-tax), equity and total return.

Key Features:
- **Pure Engine**: ``project()`` is deterministic and side-effect free
- **Fixed-Rate Amortization**: level payment, monthly interest/principal split
- **Compounding Growth**: rent growth, expense inflation and appreciation
- **Flat Tax Estimate**: marginal rate on rent minus expenses minus interest
- **Tabular Views**: every result converts to a pandas DataFrame or JSON

Quick Start:
    ```python
    from rentallab import Assumptions, project, kpi

    a = Assumptions(
        purchase_price=530_000,
        down_payment_pct=0.25,
        rate_pa=0.045,
        term_years=30,
        monthly_rent=2_400,
    )
    result = project(a)

    print(f"{result.monthly_payment:,.2f}")   # level monthly payment
    print(result.year(1).cashflow_pre_tax)    # year-1 pre-tax cashflow
    print(kpi.cap_rate(result))               # caller-side ratio
    df = result.to_frame()
    ```

License:
    This is a proof-of-concept for educational and research purposes.
"""

# Version information
__version__ = "0.1.0"
__author__ = "RentalLab Team"
__description__ = "Year-by-year projections for leveraged rental property"

from .core import (
    ConfigError,
    RentalLabWarning,
    Assumptions,
    AssumptionsReport,
    DEFAULT_ASSUMPTIONS,
    OutflowBreakdown,
    ProjectionResult,
    YearFigures,
    YearRecord,
    level_payment,
    monthly_schedule,
    project,
    round_currency,
    validate_assumptions,
)

# KPI utilities
from . import kpi
from .kpi import (
    cap_rate,
    cash_on_cash,
    cumulative_cashflow,
    expense_composition,
    ltv,
    noi,
)

# Define what gets imported with "from rentallab import *"
__all__ = [
    # Core
    "Assumptions",
    "DEFAULT_ASSUMPTIONS",
    "project",
    "ProjectionResult",
    "YearRecord",
    "YearFigures",
    "OutflowBreakdown",
    "level_payment",
    "monthly_schedule",
    "round_currency",
    # Errors and validation
    "ConfigError",
    "RentalLabWarning",
    "AssumptionsReport",
    "validate_assumptions",
    # KPI utilities
    "kpi",
    "cap_rate",
    "cash_on_cash",
    "cumulative_cashflow",
    "expense_composition",
    "ltv",
    "noi",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]
