from __future__ import annotations

import json
import logging
from typing import List, Optional

import typer

from .model import simulate
from .schemas import InvalidInputError, ScenarioResult, SimulationInput

app = typer.Typer(help="Compare buying a home with renting and investing the difference.")

# Slider position on the home price estimate control -> largest value multiplier.
HOME_FACTOR_MAPPING = {
    0: 1,
    25: 3,
    50: 5,
    75: 7,
    100: 9,
}


def resolve_max_return(home_factor: int, max_return: Optional[int]) -> int:
    if max_return is not None:
        return max_return
    if home_factor not in HOME_FACTOR_MAPPING:
        positions = ", ".join(str(key) for key in HOME_FACTOR_MAPPING)
        raise typer.BadParameter(
            f"home factor must be one of {positions}", param_hint="--home-factor"
        )
    return HOME_FACTOR_MAPPING[home_factor]


@app.command()
def run(
    home_price: float = typer.Option(500000.0, help="Purchase price of the home."),
    down_payment: float = typer.Option(100000.0, help="Cash paid up front."),
    years: int = typer.Option(30, help="Horizon in years (also the mortgage term)."),
    mortgage_rate: float = typer.Option(
        6.5, help="Annual mortgage rate in percent (e.g., 6.5)."
    ),
    property_tax: float = typer.Option(1.2, help="Annual property tax in percent."),
    rental_base: float = typer.Option(2500.0, help="Monthly rent in the first year."),
    rental_raise: float = typer.Option(3.0, help="Annual rent increase in percent."),
    average_yield: float = typer.Option(
        7.0, help="Average annual investment yield in percent."
    ),
    home_factor: int = typer.Option(
        50, help="Home price estimate slider position (0, 25, 50, 75 or 100)."
    ),
    max_return: Optional[int] = typer.Option(
        None, help="Largest home value multiplier; overrides --home-factor."
    ),
    curve: str = typer.Option("compound", help="Home value growth: compound or linear."),
    show_all: bool = typer.Option(
        False, help="Show every scenario instead of only the highest one."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Dump the scenario series as JSON."
    ),
    verbose: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """
    Simulate every home appreciation scenario and print the yearly series.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        inputs = SimulationInput(
            home_price=home_price,
            down_payment=down_payment,
            years=years,
            house_tax_rate=property_tax / 100,
            max_return=resolve_max_return(home_factor, max_return),
            rental_base_monthly=rental_base,
            rental_raise_annual=rental_raise / 100,
            mortgage_interest_rate=mortgage_rate / 100,
            average_annual_investment_yield=average_yield / 100,
            appreciation_curve=curve,
        )
        results = simulate(inputs)
    except InvalidInputError as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    selected = results if show_all else results[-1:]

    if as_json:
        typer.echo(json.dumps([_scenario_payload(result) for result in selected], indent=2))
        return

    for result in selected:
        _print_scenario(result)


def _scenario_payload(result: ScenarioResult) -> dict:
    return {
        "scenario": result.scenario,
        "appreciation_factor": result.appreciation_factor,
        "diffs": result.diffs,
        "total_costs": result.total_costs,
        "investment_returns": result.investment_returns,
        "rental_costs": result.rental_costs,
        "home_values": result.home_values,
        "remaining_principal": result.remaining_principal,
    }


def _print_scenario(result: ScenarioResult) -> None:
    increase = (result.appreciation_factor - 1) * 100
    typer.echo(f"Home value increases {increase:.0f}% (scenario {result.scenario})")
    header: List[str] = [
        f"{'Year':>4}",
        f"{'Difference':>14}",
        f"{'Total costs':>14}",
        f"{'Investment':>14}",
        f"{'Rent paid':>14}",
    ]
    typer.echo(" ".join(header))
    for index, diff in enumerate(result.diffs):
        typer.echo(
            f"{index + 1:>4} "
            f"{diff:>14,.0f} "
            f"{result.total_costs[index]:>14,.0f} "
            f"{result.investment_returns[index]:>14,.0f} "
            f"{result.rental_costs[index]:>14,.0f}"
        )
    typer.echo(f"Better outcome: {result.better_option}")
    typer.echo("")


if __name__ == "__main__":
    app()
