from __future__ import annotations

import itertools
import math
from math import isclose

import pytest

from cuppa.core.frequency import CompoundingFrequency, DepositFrequency
from cuppa.core.future_value import calculate_future_value
from cuppa.schemas.future_value import CalculationInput

ALL_COMBINATIONS = list(itertools.product(DepositFrequency, CompoundingFrequency))


@pytest.mark.parametrize(
    "initial, periodic, expected",
    [
        (1000, 100, 7907.04),
        (0, 100, 6630.76),
        (1000, 0, 1276.28),
    ],
)
def test_monthly_deposits_with_annual_compounding(initial, periodic, expected):
    result = calculate_future_value(
        initial_deposit=initial,
        periodic_deposit=periodic,
        deposit_frequency=DepositFrequency.MONTHLY,
        interest_rate=0.05,
        compounding_frequency=CompoundingFrequency.ANNUALLY,
        time_horizon=5,
    )
    assert isclose(result, expected, abs_tol=0.005)


def test_zero_rate_accumulates_deposits_linearly():
    """
    With zero interest there is no compounding: 50 a week for 3 years is 13 deposits
    per quarter over 12 quarters, on top of the untouched initial deposit.
    """
    result = calculate_future_value(
        initial_deposit=1000.0,
        periodic_deposit=50.0,
        deposit_frequency=DepositFrequency.WEEKLY,
        interest_rate=0.0,
        compounding_frequency=CompoundingFrequency.QUARTERLY,
        time_horizon=3.0,
    )
    assert isclose(result, 1000.0 + 50.0 * 13 * 12, abs_tol=1e-9)


@pytest.mark.parametrize("deposit_frequency, compounding_frequency", ALL_COMBINATIONS)
def test_zero_rate_matches_linear_formula(deposit_frequency, compounding_frequency):
    m = compounding_frequency.periods_per_year()
    ratio = deposit_frequency.periods_per_year() / m
    expected = 250.0 + 20.0 * ratio * (7.5 * m)

    result = calculate_future_value(250.0, 20.0, deposit_frequency, 0.0, compounding_frequency, 7.5)
    assert isclose(result, expected, rel_tol=1e-12)


def test_negative_zero_rate_takes_linear_branch():
    result = calculate_future_value(
        100.0, 10.0, DepositFrequency.MONTHLY, -0.0, CompoundingFrequency.ANNUALLY, 2.0
    )
    assert result == 340.0


@pytest.mark.parametrize("compounding_frequency", list(CompoundingFrequency))
def test_zero_periodic_deposit_is_compound_interest_on_principal(compounding_frequency):
    m = compounding_frequency.periods_per_year()
    expected = 2500.0 * (1 + 0.04 / m) ** (10 * m)

    result = calculate_future_value(
        2500.0, 0.0, DepositFrequency.DAILY, 0.04, compounding_frequency, 10.0
    )
    assert isclose(result, expected, rel_tol=1e-12)


@pytest.mark.parametrize("deposit_frequency, compounding_frequency", ALL_COMBINATIONS)
@pytest.mark.parametrize("rate, horizon", [(0.05, 5.0), (0.0, 12.0), (-0.03, -4.0), (0.2, 0.0)])
def test_nothing_deposited_is_worth_exactly_zero(deposit_frequency, compounding_frequency, rate, horizon):
    result = calculate_future_value(0.0, 0.0, deposit_frequency, rate, compounding_frequency, horizon)
    assert result == 0.0


@pytest.mark.parametrize("deposit_frequency, compounding_frequency", ALL_COMBINATIONS)
@pytest.mark.parametrize("rate", [0.0, 0.05])
def test_value_never_decreases_with_longer_horizon(deposit_frequency, compounding_frequency, rate):
    prev = -math.inf
    for horizon in [0.0, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]:
        result = calculate_future_value(1000.0, 100.0, deposit_frequency, rate, compounding_frequency, horizon)
        assert result >= prev, "future value should not shrink as the horizon grows"
        prev = result


def test_negative_inputs_follow_the_formula():
    """Negative deposits, rate and horizon are not rejected, just computed."""
    growth = (1 - 0.05) ** -5
    expected = -1000.0 * growth + (-100.0 * 52.0 * (growth - 1)) / -0.05

    result = calculate_future_value(
        -1000.0, -100.0, DepositFrequency.WEEKLY, -0.05, CompoundingFrequency.ANNUALLY, -5.0
    )
    assert isclose(result, expected, rel_tol=1e-12)


def test_negative_base_with_fractional_exponent_is_nan():
    result = calculate_future_value(
        1000.0, 0.0, DepositFrequency.ANNUALLY, -2.0, CompoundingFrequency.ANNUALLY, 0.5
    )
    assert math.isnan(result)


def test_overflow_gives_infinity():
    result = calculate_future_value(
        1.0, 1.0, DepositFrequency.DAILY, 1.0, CompoundingFrequency.DAILY, 1e6
    )
    assert result == math.inf


def test_rate_that_underflows_per_period_does_not_raise():
    result = calculate_future_value(
        100.0, 10.0, DepositFrequency.MONTHLY, 5e-324, CompoundingFrequency.MONTHLY, 1.0
    )
    assert math.isnan(result)


def test_calculation_input_delegates_to_formula():
    calculation = CalculationInput(
        initial_deposit=1000,
        periodic_deposit=100,
        deposit_frequency="monthly",
        interest_rate=0.05,
        compounding_frequency="annually",
        time_horizon=5,
    )
    assert isclose(calculation.future_value(), 7907.04, abs_tol=0.005)
