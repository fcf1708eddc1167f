import dataclasses
import fractions
import math

import pytest

from house_analyzing import InvalidInputError, ScenarioResult, SimulationInput


def _params(**overrides):
    params = dict(
        home_price=400000,
        down_payment=80000,
        years=30,
        house_tax_rate=0.012,
        max_return=5,
        rental_base_monthly=2000,
        rental_raise_annual=0.03,
        mortgage_interest_rate=0.065,
        average_annual_investment_yield=0.07,
    )
    params.update(overrides)
    return params


def test_derived_properties():
    inputs = SimulationInput(**_params())
    assert inputs.loan_amount == 320000
    assert inputs.annual_property_tax == pytest.approx(4800)
    assert inputs.months == 360
    assert inputs.scenario_count == 6


def test_inputs_are_immutable():
    inputs = SimulationInput(**_params())
    with pytest.raises(dataclasses.FrozenInstanceError):
        inputs.years = 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"years": 0},
        {"years": -5},
        {"years": 2.5},
        {"home_price": 0},
        {"home_price": -1},
        {"down_payment": -1},
        {"down_payment": 400001},
        {"house_tax_rate": -0.01},
        {"rental_base_monthly": -100},
        {"rental_raise_annual": -0.02},
        {"mortgage_interest_rate": -0.01},
        {"average_annual_investment_yield": -0.05},
        {"max_return": 0},
        {"max_return": 2.5},
        {"home_price": math.nan},
        {"average_annual_investment_yield": math.inf},
        {"years": "30"},
        {"appreciation_curve": "exponential"},
    ],
)
def test_invalid_inputs_fail_fast(overrides):
    with pytest.raises(InvalidInputError):
        SimulationInput(**_params(**overrides))


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError, match="home_price"):
        SimulationInput(**_params(home_price=-10))


def test_boundary_values_are_accepted():
    SimulationInput(**_params(down_payment=0))
    SimulationInput(**_params(down_payment=400000))
    SimulationInput(**_params(years=1, max_return=1, mortgage_interest_rate=0))
    SimulationInput(**_params(max_return=3.0))


def test_better_option():
    assert ScenarioResult(scenario=0, appreciation_factor=1, diffs=[-5, 10]).better_option == "buying"
    assert ScenarioResult(scenario=0, appreciation_factor=1, diffs=[5, -10]).better_option == "renting"
    assert ScenarioResult(scenario=0, appreciation_factor=1, diffs=[0.0]).better_option == "tie"


def test_equity_subtracts_remaining_principal():
    result = ScenarioResult(
        scenario=1,
        appreciation_factor=2,
        home_values=[110.0, 120.0],
        remaining_principal=[60.0, 30.0],
    )
    assert result.equity == [50.0, 90.0]


def test_any_real_number_type_is_accepted():
    inputs = SimulationInput(
        **_params(
            home_price=fractions.Fraction(400000),
            years=fractions.Fraction(30),
            max_return=fractions.Fraction(5),
        )
    )
    assert inputs.months == 360
    assert inputs.scenario_count == 6


def test_booleans_are_not_numbers():
    with pytest.raises(InvalidInputError, match="must be a number"):
        SimulationInput(**_params(max_return=True))
