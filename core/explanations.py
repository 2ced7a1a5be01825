"""Static labels and explanation text for each breakdown line."""

from typing import Dict

from . import engine
from .formatting import format_currency
from .models import BREAKDOWN_COMPONENTS, TaxInputs

BREAKDOWN_LABELS: Dict[str, str] = {
    "federal_income": "Federal Income Tax",
    "fica": "FICA (incl. employer portion)",
    "state_income": "State/Local Income Tax",
    "property_tax": "Property Tax",
    "sales_tax": "Sales Tax",
    "embedded_corporate_tax": "Embedded Corporate Taxes",
    "car_tax": "Car Registration/Taxes",
    "gas_tax": "Gas Taxes",
    "utility_tax": "Utility Taxes",
    "inflation_tax": "Inflation Tax",
}

_TEMPLATES: Dict[str, str] = {
    "federal_income": (
        "{federal_rate:.0%} of {gross_income} gross income, a simplified "
        "effective federal rate for a middle-class household."
    ),
    "fica": (
        "{fica_rate:.1%} of {gross_income} for Social Security and Medicare, "
        "counting the employer half as part of your compensation."
    ),
    "state_income": (
        "{state_rate:.0%} of {gross_income}, an average combined state and "
        "local income tax rate."
    ),
    "property_tax": (
        "{property_rate:.1%} of your {home_value} home value each year."
    ),
    "sales_tax": (
        "{sales_rate:.0%} sales tax on the {spending_share:.0%} of "
        "{gross_income} spent on taxable goods."
    ),
    "embedded_corporate_tax": (
        "{corporate_rate:.0%} of the {consumption_share:.0%} of {gross_income} "
        "spent on goods and services, for corporate taxes passed on in prices."
    ),
    "car_tax": (
        "{car_tax_per_car} per car for registration and vehicle taxes, "
        "times {cars_owned} car(s)."
    ),
    "gas_tax": (
        "{gallons} gallons per car per year at ${gas_tax_per_gallon:.2f} per "
        "gallon in fuel taxes, times {cars_owned} car(s)."
    ),
    "utility_tax": (
        "A flat {utility_tax} per year in taxes and fees on cell, electric, "
        "gas and internet bills (about $200 a month)."
    ),
    "inflation_tax": (
        "{inflation_rate:.0%} of {gross_income} lost to purchasing power "
        "erosion from inflation."
    ),
}


def _template_values(inputs: TaxInputs) -> Dict[str, object]:
    return {
        "gross_income": format_currency(inputs.gross_income),
        "home_value": format_currency(inputs.home_value),
        "cars_owned": inputs.cars_owned,
        "federal_rate": engine.FEDERAL_INCOME_RATE,
        "fica_rate": engine.FICA_RATE,
        "state_rate": engine.STATE_INCOME_RATE,
        "property_rate": engine.PROPERTY_TAX_RATE,
        "spending_share": engine.TAXABLE_SPENDING_SHARE,
        "sales_rate": engine.SALES_TAX_RATE,
        "consumption_share": engine.CONSUMPTION_SHARE,
        "corporate_rate": engine.EMBEDDED_CORPORATE_RATE,
        "car_tax_per_car": format_currency(engine.CAR_TAX_PER_CAR),
        "gallons": engine.GALLONS_PER_CAR,
        "gas_tax_per_gallon": engine.GAS_TAX_PER_GALLON,
        "utility_tax": format_currency(engine.UTILITY_TAX_ANNUAL),
        "inflation_rate": engine.INFLATION_RATE,
    }


def explain_component(component: str, inputs: TaxInputs) -> str:
    """Return the explanation for one breakdown line. Unknown ids raise KeyError."""

    template = _TEMPLATES[component]
    return template.format(**_template_values(inputs))


def explain_breakdown(inputs: TaxInputs) -> Dict[str, str]:
    values = _template_values(inputs)
    return {
        component: _TEMPLATES[component].format(**values)
        for component in BREAKDOWN_COMPONENTS
    }
