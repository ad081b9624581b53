"""Calculator form handling: text parsing, rate conversion and currency display."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from cuppa.core.frequency import CompoundingFrequency, DepositFrequency
from cuppa.schemas.future_value import (
    CalculationInput,
    FormInput,
    FrequencyOption,
    FrequencyOptions,
)

logger = logging.getLogger(__name__)

# What a decimal keypad can produce: digits and a single separator.
_DECIMAL_PATTERN = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)


def parse_decimal(text: str) -> Optional[float]:
    """Return the number typed into a field, or None if it is not one."""
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    # a long enough digit string overflows to inf
    if not math.isfinite(value):
        return None
    return value


def parse_form(form: FormInput) -> Optional[CalculationInput]:
    """
    Turn the typed form into calculator inputs.

    Returns None as soon as any text field fails to parse, in which case no
    calculation should be attempted. The interest rate is typed as a
    percentage and converted to a fraction here.
    """
    initial_deposit = parse_decimal(form.initial_deposit)
    periodic_deposit = parse_decimal(form.periodic_deposit)
    interest_rate = parse_decimal(form.interest_rate)
    time_horizon = parse_decimal(form.time_horizon)

    if initial_deposit is None or periodic_deposit is None or interest_rate is None or time_horizon is None:
        return None

    return CalculationInput(
        initial_deposit=initial_deposit,
        periodic_deposit=periodic_deposit,
        deposit_frequency=form.deposit_frequency,
        interest_rate=interest_rate / 100,
        compounding_frequency=form.compounding_frequency,
        time_horizon=time_horizon,
    )


def format_currency(value: float, symbol: str = "$") -> str:
    """Two fraction digits with thousands separators, e.g. $7,907.04."""
    return f"{symbol}{value:,.2f}"


def calculate_from_form(form: FormInput, symbol: str = "$") -> Optional[str]:
    """Parse, calculate and format; None means there is no result to show."""
    calculation = parse_form(form)
    if calculation is None:
        logger.debug("Form input rejected, withholding result")
        return None
    value = calculation.future_value()
    if not math.isfinite(value):
        logger.debug("Future value is not finite, withholding result")
        return None
    return format_currency(value, symbol)


def frequency_options() -> FrequencyOptions:
    """The picker choices, in the order they are offered."""
    return FrequencyOptions(
        deposit_frequencies=[
            FrequencyOption(value=frequency.value, label=frequency.label)
            for frequency in DepositFrequency
        ],
        compounding_frequencies=[
            FrequencyOption(value=frequency.value, label=frequency.label)
            for frequency in CompoundingFrequency
        ],
    )
