from __future__ import annotations

import logging
from typing import List, Tuple

from .schemas import AmortizationYear, ScenarioResult, SimulationInput

logger = logging.getLogger(__name__)


def simulate(inputs: SimulationInput) -> List[ScenarioResult]:
    """Project owning against renting for every appreciation scenario.

    Scenario ``s`` runs from 0 (flat home value) to ``inputs.max_return``;
    the home reaches ``s`` times its price by the horizon. The mortgage,
    rent and investment legs are shared by all scenarios; only the home
    value path differs.
    """
    installments = mortgage_installments(
        inputs.loan_amount, inputs.mortgage_interest_rate, inputs.years
    )
    schedule = _yearly_rows(installments)
    rental_costs, investment_returns = _rent_and_invest(inputs, installments)

    total_costs: List[float] = []
    paid = 0.0
    for row in schedule:
        paid += row.payment
        total_costs.append(paid + inputs.annual_property_tax * row.year)
    remaining = [row.remaining_principal for row in schedule]

    logger.debug(
        "Simulating %d scenarios over %d years (monthly payment %.2f)",
        inputs.scenario_count,
        inputs.years,
        monthly_mortgage_payment(
            inputs.loan_amount, inputs.mortgage_interest_rate, inputs.months
        ),
    )

    results: List[ScenarioResult] = []
    for scenario in range(inputs.scenario_count):
        factor = appreciation_factor(scenario, int(inputs.max_return))
        home_values = [
            home_value_at(inputs, factor, year)
            for year in range(1, int(inputs.years) + 1)
        ]
        diffs = [
            (value - owed) - (pool - rent)
            for value, owed, pool, rent in zip(
                home_values, remaining, investment_returns, rental_costs
            )
        ]
        results.append(
            ScenarioResult(
                scenario=scenario,
                appreciation_factor=factor,
                diffs=diffs,
                total_costs=list(total_costs),
                investment_returns=list(investment_returns),
                home_values=home_values,
                remaining_principal=list(remaining),
                rental_costs=list(rental_costs),
            )
        )
    return results


def _rent_and_invest(
    inputs: SimulationInput, installments: List[Tuple[float, float, float]]
) -> Tuple[List[float], List[float]]:
    """Cumulative rent and investment pool balance at each year end.

    The pool is seeded with the down payment the renter keeps and receives
    the monthly gap between the owner's outlay and the rent.
    """
    monthly_yield = inputs.average_annual_investment_yield / 12.0
    monthly_tax = inputs.annual_property_tax / 12.0

    rent_paid = 0.0
    pool = float(inputs.down_payment)
    rental_costs: List[float] = []
    investment_returns: List[float] = []

    for month, (interest, repaid, _) in enumerate(installments):
        rent = monthly_rent(
            inputs.rental_base_monthly, inputs.rental_raise_annual, month
        )
        rent_paid += rent
        pool = pool * (1 + monthly_yield) + (interest + repaid + monthly_tax - rent)

        if (month + 1) % 12 == 0:
            rental_costs.append(rent_paid)
            investment_returns.append(pool)

    return rental_costs, investment_returns


def mortgage_installments(
    principal: float, annual_rate: float, years: int
) -> List[Tuple[float, float, float]]:
    """Monthly ``(interest, principal repaid, balance after)`` over ``years``."""
    term_months = int(years) * 12
    payment = monthly_mortgage_payment(principal, annual_rate, term_months)
    monthly_rate = annual_to_monthly_rate(annual_rate)

    balance = max(float(principal), 0.0)
    installments: List[Tuple[float, float, float]] = []
    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        repaid = min(payment - interest, balance)
        if month == term_months:
            # clear rounding residue on the last installment
            repaid = balance
        balance -= repaid
        installments.append((interest, repaid, balance))
    return installments


def amortization_schedule(
    principal: float, annual_rate: float, years: int
) -> List[AmortizationYear]:
    """Year-by-year breakdown of a fixed-rate loan repaid over ``years``."""
    return _yearly_rows(mortgage_installments(principal, annual_rate, years))


def _yearly_rows(
    installments: List[Tuple[float, float, float]]
) -> List[AmortizationYear]:
    rows: List[AmortizationYear] = []
    interest_paid = principal_paid = 0.0
    for month, (interest, repaid, balance) in enumerate(installments, start=1):
        interest_paid += interest
        principal_paid += repaid
        if month % 12 == 0:
            rows.append(
                AmortizationYear(
                    year=month // 12,
                    payment=interest_paid + principal_paid,
                    interest=interest_paid,
                    principal=principal_paid,
                    remaining_principal=balance,
                )
            )
            interest_paid = principal_paid = 0.0
    return rows


def monthly_mortgage_payment(
    principal: float, annual_rate: float, term_months: int
) -> float:
    if principal <= 0 or term_months <= 0:
        return 0.0
    monthly_rate = annual_to_monthly_rate(annual_rate)
    if monthly_rate == 0:
        return principal / term_months
    discount = (1 + monthly_rate) ** (-term_months)
    return principal * monthly_rate / (1 - discount)


def annual_to_monthly_rate(annual_rate: float) -> float:
    if annual_rate <= 0:
        return 0.0
    return annual_rate / 12.0


def monthly_rent(base: float, annual_raise: float, month: int) -> float:
    """Rent due in zero-based ``month``; raises apply once per full year."""
    return base * (1 + annual_raise) ** (month // 12)


def appreciation_factor(scenario: int, max_return: int) -> float:
    """Home value multiplier reached at the horizon in ``scenario``.

    Scenario 0 is the flat baseline, so it shares the 1x factor with
    scenario 1.
    """
    if scenario < 0 or scenario > max_return:
        raise ValueError(f"scenario must be within 0..{max_return}, got {scenario}")
    return float(max(scenario, 1))


def home_value_at(inputs: SimulationInput, factor: float, year: int) -> float:
    progress = year / inputs.years
    if inputs.appreciation_curve == "linear":
        return inputs.home_price * (1 + (factor - 1) * progress)
    return inputs.home_price * factor ** progress
