"""
House analyzing toolkit.

This package simulates, year by year, whether buying a home beats renting
and investing the difference, across a family of home appreciation
scenarios.
"""

import logging

from .schemas import (
    AmortizationYear,
    InvalidInputError,
    ScenarioResult,
    SimulationInput,
)
from .model import amortization_schedule, simulate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AmortizationYear",
    "InvalidInputError",
    "ScenarioResult",
    "SimulationInput",
    "amortization_schedule",
    "simulate",
]
