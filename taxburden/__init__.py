from .report import (
    DEFAULT_INPUTS,
    TaxInputs,
    calculate_tax_burden,
    print_report,
    run_example,
)

__all__ = [
    'DEFAULT_INPUTS',
    'TaxInputs',
    'calculate_tax_burden',
    'print_report',
    'run_example',
]
