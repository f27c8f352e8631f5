"""
Core module for RentalLab.

This module contains the assumptions record, the projection engine and the
result containers it produces.
"""

from .amortization import YearAmortization, amortize_year, level_payment, monthly_schedule
from .currency import RoundingPolicy, round_currency
from .engine import project
from .errors import ConfigError, RentalLabWarning
from .results import (
    OutflowBreakdown,
    ProjectionResult,
    YearFigures,
    YearRecord,
)
from .specs import ALIASES, DEFAULT_ASSUMPTIONS, Assumptions
from .validation import AssumptionsReport, validate_assumptions

__all__ = [
    # Errors
    "ConfigError",
    "RentalLabWarning",
    # Specs
    "Assumptions",
    "ALIASES",
    "DEFAULT_ASSUMPTIONS",
    # Amortization
    "YearAmortization",
    "amortize_year",
    "level_payment",
    "monthly_schedule",
    # Rounding
    "RoundingPolicy",
    "round_currency",
    # Engine and results
    "project",
    "OutflowBreakdown",
    "YearFigures",
    "YearRecord",
    "ProjectionResult",
    # Validation
    "AssumptionsReport",
    "validate_assumptions",
]
