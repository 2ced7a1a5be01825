from .engine import calculate_breakdown, calculate_tax_burden, effective_rate
from .explanations import BREAKDOWN_LABELS, explain_breakdown, explain_component
from .formatting import format_currency, format_rate
from .models import BREAKDOWN_COMPONENTS, DEFAULT_INPUTS, TaxBreakdown, TaxBurdenResult, TaxInputs
from .session import CalculatorSession, coerce_field

__all__ = [
    "BREAKDOWN_COMPONENTS",
    "BREAKDOWN_LABELS",
    "DEFAULT_INPUTS",
    "CalculatorSession",
    "TaxBreakdown",
    "TaxBurdenResult",
    "TaxInputs",
    "calculate_breakdown",
    "calculate_tax_burden",
    "coerce_field",
    "effective_rate",
    "explain_breakdown",
    "explain_component",
    "format_currency",
    "format_rate",
]
