from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import List

APPRECIATION_CURVES = ("compound", "linear")


class InvalidInputError(ValueError):
    """Raised when simulation assumptions cannot produce a meaningful projection."""


@dataclass(frozen=True)
class SimulationInput:
    """Every assumption for one simulation run."""

    home_price: float
    down_payment: float
    years: int
    house_tax_rate: float = 0.0  # annual, fractional
    max_return: int = 1  # largest home value multiplier
    rental_base_monthly: float = 0.0
    rental_raise_annual: float = 0.0
    mortgage_interest_rate: float = 0.0  # annual, fractional
    average_annual_investment_yield: float = 0.0
    appreciation_curve: str = "compound"

    def __post_init__(self) -> None:
        fields = {
            "home_price": self.home_price,
            "down_payment": self.down_payment,
            "years": self.years,
            "house_tax_rate": self.house_tax_rate,
            "max_return": self.max_return,
            "rental_base_monthly": self.rental_base_monthly,
            "rental_raise_annual": self.rental_raise_annual,
            "mortgage_interest_rate": self.mortgage_interest_rate,
            "average_annual_investment_yield": self.average_annual_investment_yield,
        }
        for name, value in fields.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInputError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite, got {value!r}")

        if self.years < 1 or self.years != int(self.years):
            raise InvalidInputError(
                f"years must be a positive integer, got {self.years!r}"
            )
        if self.home_price <= 0:
            raise InvalidInputError("home_price must be positive")
        if not 0 <= self.down_payment <= self.home_price:
            raise InvalidInputError("down_payment must be between 0 and home_price")
        if self.max_return < 1 or self.max_return != int(self.max_return):
            raise InvalidInputError(
                f"max_return must be an integer of at least 1, got {self.max_return!r}"
            )
        for name in (
            "house_tax_rate",
            "rental_base_monthly",
            "rental_raise_annual",
            "mortgage_interest_rate",
            "average_annual_investment_yield",
        ):
            if fields[name] < 0:
                raise InvalidInputError(f"{name} must not be negative")
        if self.appreciation_curve not in APPRECIATION_CURVES:
            raise InvalidInputError(
                f"appreciation_curve must be one of {', '.join(APPRECIATION_CURVES)}"
            )

    @property
    def loan_amount(self) -> float:
        return self.home_price - self.down_payment

    @property
    def annual_property_tax(self) -> float:
        return self.house_tax_rate * self.home_price

    @property
    def months(self) -> int:
        return int(self.years) * 12

    @property
    def scenario_count(self) -> int:
        return int(self.max_return) + 1


@dataclass
class AmortizationYear:
    year: int
    payment: float
    interest: float
    principal: float
    remaining_principal: float


@dataclass
class ScenarioResult:
    """Year-end series for one home appreciation scenario."""

    scenario: int
    appreciation_factor: float
    diffs: List[float] = field(default_factory=list)
    total_costs: List[float] = field(default_factory=list)
    investment_returns: List[float] = field(default_factory=list)
    home_values: List[float] = field(default_factory=list)
    remaining_principal: List[float] = field(default_factory=list)
    rental_costs: List[float] = field(default_factory=list)

    @property
    def equity(self) -> List[float]:
        return [
            value - owed
            for value, owed in zip(self.home_values, self.remaining_principal)
        ]

    @property
    def better_option(self) -> str:
        if not self.diffs or self.diffs[-1] == 0:
            return "tie"
        if self.diffs[-1] > 0:
            return "buying"
        return "renting"
