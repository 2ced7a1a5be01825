"""Command line interface for the tax burden calculator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.engine import calculate_tax_burden
from core.explanations import BREAKDOWN_LABELS, explain_breakdown, explain_component
from core.formatting import format_currency
from core.models import BREAKDOWN_COMPONENTS, DEFAULT_INPUTS, TaxInputs
from core.session import CalculatorSession
from taxburden.report import print_report

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tax-burden")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    calculate_parser = subparsers.add_parser("calculate")
    _add_input_args(calculate_parser)
    calculate_parser.add_argument("--explain", action="store_true")
    calculate_parser.add_argument("--json", action="store_true")
    calculate_parser.set_defaults(func=_calculate)

    defaults_parser = subparsers.add_parser("defaults")
    defaults_parser.set_defaults(func=_defaults)

    explain_parser = subparsers.add_parser("explain")
    explain_parser.add_argument("component", choices=BREAKDOWN_COMPONENTS)
    _add_input_args(explain_parser)
    explain_parser.set_defaults(func=_explain)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _calculate(args: argparse.Namespace) -> int:
    session = CalculatorSession(_build_inputs(args), show_explanations=args.explain)
    if args.json:
        output = {
            "inputs": session.inputs.to_dict(),
            "result": session.result.to_dict(),
        }
        if session.show_explanations:
            output["explanations"] = explain_breakdown(session.inputs)
        print(json.dumps(output, indent=2))
        return 0

    print_report(
        session.inputs,
        session.result.to_dict(),
        show_explanations=session.show_explanations,
    )
    return 0


def _defaults(args: argparse.Namespace) -> int:
    print(json.dumps(DEFAULT_INPUTS.to_dict(), indent=2))
    return 0


def _explain(args: argparse.Namespace) -> int:
    inputs = _build_inputs(args)
    amount = getattr(calculate_tax_burden(inputs).breakdown, args.component)
    print(f"{BREAKDOWN_LABELS[args.component]}: {format_currency(amount)}")
    print(explain_component(args.component, inputs))
    return 0


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--gross-income", dest="gross_income")
    parser.add_argument("--household-size", dest="household_size")
    parser.add_argument("--home-value", dest="home_value")
    parser.add_argument("--cars", dest="cars_owned")
    parser.add_argument("--state")


def _build_inputs(args: argparse.Namespace) -> TaxInputs:
    session = CalculatorSession(DEFAULT_INPUTS)
    for name in ("gross_income", "household_size", "home_value", "cars_owned", "state"):
        raw = getattr(args, name)
        if raw is not None:
            logger.debug("Overriding %s with %r", name, raw)
            session.update_field(name, raw)
    return session.inputs


if __name__ == "__main__":
    raise SystemExit(main())
