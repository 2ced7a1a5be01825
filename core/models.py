"""Domain schemas for the tax burden calculator."""

from dataclasses import dataclass, fields, replace
import math
from typing import Dict, Iterator, Optional, Tuple

BREAKDOWN_COMPONENTS: Tuple[str, ...] = (
    "federal_income",
    "fica",
    "state_income",
    "property_tax",
    "sales_tax",
    "embedded_corporate_tax",
    "car_tax",
    "gas_tax",
    "utility_tax",
    "inflation_tax",
)


@dataclass(frozen=True)
class TaxInputs:
    """Household inputs for one calculation. Replaced wholesale on every edit."""

    gross_income: float
    household_size: int
    home_value: float
    cars_owned: int
    state: str

    def replace(self, **changes: object) -> "TaxInputs":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, object]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


DEFAULT_INPUTS = TaxInputs(
    gross_income=75000.0,
    household_size=3,
    home_value=300000.0,
    cars_owned=2,
    state="average",
)


@dataclass(frozen=True)
class TaxBreakdown:
    """The ten independently estimated tax components, in display order."""

    federal_income: float
    fica: float
    state_income: float
    property_tax: float
    sales_tax: float
    embedded_corporate_tax: float
    car_tax: float
    gas_tax: float
    utility_tax: float
    inflation_tax: float

    def items(self) -> Iterator[Tuple[str, float]]:
        for component in BREAKDOWN_COMPONENTS:
            yield component, getattr(self, component)

    def total(self) -> float:
        return sum(amount for _, amount in self.items())

    def to_dict(self) -> Dict[str, float]:
        return dict(self.items())


@dataclass(frozen=True)
class TaxBurdenResult:
    """Deterministic calculation output for one set of inputs."""

    breakdown: TaxBreakdown
    total_taxes: float
    effective_rate: float
    take_home: float

    @property
    def has_effective_rate(self) -> bool:
        return math.isfinite(self.effective_rate)

    def to_dict(self) -> Dict[str, object]:
        effective_rate: Optional[float] = (
            self.effective_rate if self.has_effective_rate else None
        )
        return {
            "total_taxes": self.total_taxes,
            "effective_rate": effective_rate,
            "take_home": self.take_home,
            "breakdown": self.breakdown.to_dict(),
        }
