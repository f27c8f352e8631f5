"""
Command-line interface for RentalLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys

from rentallab import __version__, kpi
from rentallab.core.engine import project
from rentallab.core.results import ProjectionResult
from rentallab.core.specs import DEFAULT_ASSUMPTIONS, Assumptions
from rentallab.core.validation import validate_assumptions

logger = logging.getLogger(__name__)


def _load_json(path: str) -> dict:
    """Load JSON from file path."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _json_safe(obj):
    """Replace non-finite floats with None so the output stays strict JSON."""
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


def _save_json(path: str, data: dict) -> None:
    """Save data as JSON to file path (NaN and infinities become null)."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_json_safe(data), f, indent=2, allow_nan=False)


def _load_assumptions(path: str) -> Assumptions:
    cfg = _load_json(path)
    # Accept either a bare assumptions object or {"assumptions": {...}}
    if "assumptions" in cfg and isinstance(cfg["assumptions"], dict):
        cfg = cfg["assumptions"]
    return Assumptions.from_dict(cfg)


def _fmt(value: float) -> str:
    return f"{value:,.0f}"


def _print_summary(res: ProjectionResult, years: int) -> None:
    """Print KPIs and the yearly table to stdout."""
    stats = kpi.summary(res)
    print(f"Monthly payment:       {stats['monthly_payment']:,.2f}")
    print(f"Loan amount:           {_fmt(stats['loan_amount'])}")
    print(f"Initial cash invested: {_fmt(stats['initial_cash_invested'])}")
    if not res.schedule:
        print("No years to project.")
        return

    monthly = kpi.monthly_view(res)
    print(f"Pre-tax cashflow (mo):  {_fmt(monthly['cashflow_pre_tax'])}")
    print(f"Post-tax cashflow (mo): {_fmt(monthly['cashflow_post_tax'])}")
    print(f"Cash on cash:          {stats['cash_on_cash']:.2%}")
    print(f"Cap rate (Y1):         {stats['cap_rate']:.2%}")
    print()

    header = ["Year", "Rent", "Expenses", "Interest", "Principal", "Cashflow", "Total Gain", "Equity"]
    print("".join(f"{h:>12}" for h in header))
    for row in res.head(years):
        cells = [
            row.year,
            _fmt(row.gross_rent),
            _fmt(-row.operating_expenses),
            _fmt(-row.interest),
            _fmt(-row.principal),
            _fmt(row.cashflow_post_tax),
            _fmt(row.total_gain),
            _fmt(row.equity),
        ]
        print("".join(f"{c:>12}" for c in cells))


def cmd_example(_) -> int:
    """Print the reference scenario assumptions as JSON."""
    json.dump(DEFAULT_ASSUMPTIONS.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_validate(args) -> int:
    """Validate an assumptions JSON."""
    try:
        assumptions = _load_assumptions(args.input)
    except Exception as e:
        if args.format == "json":
            error_report = {
                "has_errors": True,
                "has_warnings": False,
                "is_valid": False,
                "exit_code": 1,
                "error": str(e),
            }
            json.dump(error_report, sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            print(f"Validation failed: {e}", file=sys.stderr)
        return 1

    report = validate_assumptions(assumptions)
    if args.format == "json":
        json.dump(report.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(str(report))
    return report.get_exit_code()


def cmd_run(args) -> int:
    """Project an assumptions JSON and export JSON results."""
    try:
        assumptions = _load_assumptions(args.input)
        res = project(assumptions)

        out = res.to_dict()
        if args.years is not None:
            out["schedule"] = out["schedule"][: args.years]
        out["kpi"] = kpi.summary(res)

        _save_json(args.output, out)
        print(f"Projected {len(res)} years; results saved to {args.output}")
        return 0

    except Exception as e:
        logger.debug("run failed", exc_info=True)
        print(f"Error running projection: {e}", file=sys.stderr)
        return 1


def cmd_summary(args) -> int:
    """Print KPIs and the yearly breakdown for an assumptions JSON."""
    try:
        assumptions = (
            _load_assumptions(args.input) if args.input else DEFAULT_ASSUMPTIONS
        )
        res = project(assumptions)
        years = args.years if args.years is not None else 10
        _print_summary(res, years)
        return 0

    except Exception as e:
        logger.debug("summary failed", exc_info=True)
        print(f"Error summarizing projection: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``rentallab`` command."""
    parser = argparse.ArgumentParser(
        prog="rentallab", description="RentalLab - Rental property projection engine"
    )
    parser.add_argument(
        "--version", action="version", version=f"RentalLab {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example", help="Print the reference scenario assumptions as JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Validate an assumptions JSON"
    )
    validate_parser.add_argument(
        "-i", "--input", required=True, help="Input assumptions JSON file"
    )
    validate_parser.add_argument(
        "--format", choices=["human", "json"], default="human", help="Output format"
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        help="Project an assumptions JSON and export JSON results "
        "(non-finite values are written as null)",
    )
    run_parser.add_argument(
        "-i", "--input", required=True, help="Input assumptions JSON file"
    )
    run_parser.add_argument(
        "-o", "--output", required=True, help="Output results JSON file"
    )
    run_parser.add_argument(
        "--years", type=int, help="Only export the first N years of the schedule"
    )
    run_parser.set_defaults(func=cmd_run)

    # Summary command
    summary_parser = subparsers.add_parser(
        "summary", help="Print KPIs and the yearly breakdown"
    )
    summary_parser.add_argument(
        "-i", "--input", help="Input assumptions JSON file (default: reference scenario)"
    )
    summary_parser.add_argument(
        "--years", type=int, help="Number of years to show (default: 10)"
    )
    summary_parser.set_defaults(func=cmd_summary)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
