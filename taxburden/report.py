"""Tax Burden Calculator
=======================

Estimates the "real" share of a household paycheck that goes to taxes once
payroll, property, consumption, vehicle, utility and inflation costs are
counted next to income tax. This module returns plain dictionaries and
prints a console report for quick inspection.
"""

from typing import Dict

from core.engine import calculate_tax_burden as _calculate_tax_burden
from core.explanations import BREAKDOWN_LABELS, explain_breakdown
from core.formatting import format_currency, format_rate
from core.models import DEFAULT_INPUTS, TaxInputs


def calculate_tax_burden(inputs: TaxInputs) -> Dict[str, object]:
    """Compute the tax burden and return it as JSON-safe data."""

    return _calculate_tax_burden(inputs).to_dict()


def print_report(
    inputs: TaxInputs, result: Dict[str, object], show_explanations: bool = False
) -> None:
    """Render a human-readable tax burden report."""

    rate = result["effective_rate"]

    print("Tax Burden Calculator - What You Really Pay")
    print("=" * 60)
    print(f"Gross income: {format_currency(inputs.gross_income)}")
    print(f"Household size: {inputs.household_size}")
    print(f"Home value: {format_currency(inputs.home_value)}")
    print(f"Cars owned: {inputs.cars_owned}")
    print(f"State: {inputs.state}")
    print()
    print(f"Total taxes paid: {format_currency(result['total_taxes'])}")
    print(f"Effective tax rate: {format_rate(rate) if rate is not None else 'N/A'}")
    print(f"Actual take home: {format_currency(result['take_home'])}")

    explanations = explain_breakdown(inputs) if show_explanations else {}

    print("\nBreakdown:")
    for component, amount in result["breakdown"].items():
        print(f"- {BREAKDOWN_LABELS[component]}: {format_currency(amount)}")
        if component in explanations:
            print(f"    {explanations[component]}")


def run_example() -> None:
    """Execute the default household when run as a script."""

    result = calculate_tax_burden(DEFAULT_INPUTS)
    print_report(DEFAULT_INPUTS, result, show_explanations=True)


if __name__ == "__main__":
    run_example()
