"""Pure computation engine for the household tax burden estimate."""

import math

from .models import TaxBreakdown, TaxBurdenResult, TaxInputs

FEDERAL_INCOME_RATE = 0.18
# Includes the employer half.
FICA_RATE = 0.153
STATE_INCOME_RATE = 0.08
PROPERTY_TAX_RATE = 0.011
TAXABLE_SPENDING_SHARE = 0.30
SALES_TAX_RATE = 0.10
CONSUMPTION_SHARE = 0.40
EMBEDDED_CORPORATE_RATE = 0.15
CAR_TAX_PER_CAR = 750.0
GALLONS_PER_CAR = 500
GAS_TAX_PER_GALLON = 0.55
# Cell, electric, gas and internet, about $200/month.
UTILITY_TAX_ANNUAL = 2400.0
INFLATION_RATE = 0.03


def calculate_breakdown(inputs: TaxInputs) -> TaxBreakdown:
    """Estimate each tax component. household_size and state are not consulted."""

    gross_income = inputs.gross_income
    cars_owned = inputs.cars_owned

    return TaxBreakdown(
        federal_income=gross_income * FEDERAL_INCOME_RATE,
        fica=gross_income * FICA_RATE,
        state_income=gross_income * STATE_INCOME_RATE,
        property_tax=inputs.home_value * PROPERTY_TAX_RATE,
        sales_tax=(gross_income * TAXABLE_SPENDING_SHARE) * SALES_TAX_RATE,
        embedded_corporate_tax=(gross_income * CONSUMPTION_SHARE) * EMBEDDED_CORPORATE_RATE,
        car_tax=cars_owned * CAR_TAX_PER_CAR,
        gas_tax=cars_owned * GALLONS_PER_CAR * GAS_TAX_PER_GALLON,
        utility_tax=UTILITY_TAX_ANNUAL,
        inflation_tax=gross_income * INFLATION_RATE,
    )


def effective_rate(total_taxes: float, gross_income: float) -> float:
    """Return total taxes as a percentage of gross income, NaN when income is zero."""

    if gross_income == 0:
        return math.nan
    return total_taxes / gross_income * 100.0


def calculate_tax_burden(inputs: TaxInputs) -> TaxBurdenResult:
    """Compute the breakdown, total, effective rate and take-home pay."""

    breakdown = calculate_breakdown(inputs)
    total_taxes = breakdown.total()

    return TaxBurdenResult(
        breakdown=breakdown,
        total_taxes=total_taxes,
        effective_rate=effective_rate(total_taxes, inputs.gross_income),
        take_home=inputs.gross_income - total_taxes,
    )
