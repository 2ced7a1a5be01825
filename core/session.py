"""Editable calculator state behind the presentation shells."""

import logging
import math
from dataclasses import fields
from typing import List, Optional, Tuple

from .engine import calculate_tax_burden
from .explanations import BREAKDOWN_LABELS, explain_breakdown
from .formatting import format_currency
from .models import DEFAULT_INPUTS, TaxBurdenResult, TaxInputs

logger = logging.getLogger(__name__)

_FIELD_TYPES = {field.name: field.type for field in fields(TaxInputs)}


def coerce_field(name: str, raw_value: object) -> object:
    """Convert a raw form value to the type of the named TaxInputs field.

    Blank numeric input counts as zero. Numbers are not range-checked, so
    negative values pass through to the calculation.
    """

    if name not in _FIELD_TYPES:
        raise ValueError(f"Unknown input field: {name}")

    if name == "state":
        return str(raw_value).strip()

    if isinstance(raw_value, str):
        text = raw_value.strip()
        if not text:
            return 0 if _FIELD_TYPES[name] is int else 0.0
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"{name} must be a number, got {raw_value!r}.") from None
    elif isinstance(raw_value, (int, float)) and not isinstance(raw_value, bool):
        number = float(raw_value)
    else:
        raise ValueError(f"{name} must be a number, got {raw_value!r}.")

    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number.")

    if _FIELD_TYPES[name] is int:
        return int(number)
    return number


class CalculatorSession:
    """Holds the current inputs and the explanation toggle.

    Inputs are only ever swapped for a new TaxInputs; the result is
    recomputed on every read.
    """

    def __init__(self, inputs: TaxInputs = DEFAULT_INPUTS, show_explanations: bool = False) -> None:
        self._inputs = inputs
        self._show_explanations = show_explanations

    @property
    def inputs(self) -> TaxInputs:
        return self._inputs

    @property
    def show_explanations(self) -> bool:
        return self._show_explanations

    @property
    def result(self) -> TaxBurdenResult:
        return calculate_tax_burden(self._inputs)

    def set_inputs(self, inputs: TaxInputs) -> TaxInputs:
        self._inputs = inputs
        logger.debug("Inputs replaced: %s", inputs)
        return inputs

    def update_field(self, name: str, raw_value: object) -> TaxInputs:
        value = coerce_field(name, raw_value)
        return self.set_inputs(self._inputs.replace(**{name: value}))

    def set_explanations(self, show: bool) -> bool:
        self._show_explanations = bool(show)
        return self._show_explanations

    def toggle_explanations(self) -> bool:
        return self.set_explanations(not self._show_explanations)

    def reset(self) -> None:
        self._inputs = DEFAULT_INPUTS
        self._show_explanations = False

    def render_lines(self) -> List[Tuple[str, str, Optional[str]]]:
        """Return (label, amount, explanation) rows for the breakdown."""

        explanations = explain_breakdown(self._inputs) if self._show_explanations else {}
        return [
            (BREAKDOWN_LABELS[component], format_currency(amount), explanations.get(component))
            for component, amount in self.result.breakdown.items()
        ]
