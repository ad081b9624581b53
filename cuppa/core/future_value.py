"""Future value of an initial deposit plus a stream of periodic deposits."""

from __future__ import annotations

import math

from cuppa.core.frequency import CompoundingFrequency, DepositFrequency


def _pow(base: float, exponent: float) -> float:
    """Real exponentiation with IEEE-754 results instead of exceptions."""
    if base == 0 and exponent < 0:
        if exponent.is_integer() and int(exponent) % 2:
            return math.copysign(math.inf, base)
        return math.inf
    try:
        return math.pow(base, exponent)
    except ValueError:
        # negative base with a non-integer exponent
        return math.nan
    except OverflowError:
        if base < 0 and exponent.is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def calculate_future_value(
    initial_deposit: float,
    periodic_deposit: float,
    deposit_frequency: DepositFrequency,
    interest_rate: float,
    compounding_frequency: CompoundingFrequency,
    time_horizon: float,
) -> float:
    """
    Future value of the principal compounded over the horizon plus the future
    value of the periodic deposits.

    `interest_rate` is an annual fraction (0.05 for 5%) and `time_horizon` is
    in years. Deposits are converted to an amount per compounding period by
    the ratio of deposit periods to compounding periods per year, then
    treated as an ordinary annuity. A rate of exactly zero accumulates the
    deposits linearly.

    No input range is enforced: out-of-domain inputs give whatever IEEE-754
    value the formula produces (negative, infinite or NaN), never an error.
    """
    initial_deposit = float(initial_deposit)
    periodic_deposit = float(periodic_deposit)
    interest_rate = float(interest_rate)
    time_horizon = float(time_horizon)

    compounding_periods = compounding_frequency.periods_per_year()
    periodic_interest_rate = interest_rate / compounding_periods
    num_periods = time_horizon * compounding_periods
    deposit_to_compounding_ratio = deposit_frequency.periods_per_year() / compounding_periods

    growth = _pow(1 + periodic_interest_rate, num_periods)
    future_value_of_principal = initial_deposit * growth

    if interest_rate == 0:
        future_value_of_deposits = periodic_deposit * deposit_to_compounding_ratio * num_periods
    else:
        future_value_of_deposits = _divide(
            periodic_deposit * deposit_to_compounding_ratio * (growth - 1),
            periodic_interest_rate,
        )

    return future_value_of_principal + future_value_of_deposits


__all__ = ["calculate_future_value"]
