"""Data contracts for future-value calculations."""

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from cuppa.core.frequency import CompoundingFrequency, DepositFrequency
from cuppa.core.future_value import calculate_future_value


class CalculationInput(BaseModel):
    """Already-parsed inputs to the future-value formula."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    # strict: numbers only, no numeric strings or booleans
    initial_deposit: float = Field(..., strict=True, description="Deposit made at period 0.")
    periodic_deposit: float = Field(
        ..., strict=True, description="Amount deposited every deposit period."
    )
    deposit_frequency: DepositFrequency
    interest_rate: float = Field(
        ...,
        strict=True,
        description="Annual interest rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    compounding_frequency: CompoundingFrequency
    time_horizon: float = Field(..., strict=True, description="Number of years to project.")

    def future_value(self) -> float:
        return calculate_future_value(
            initial_deposit=self.initial_deposit,
            periodic_deposit=self.periodic_deposit,
            deposit_frequency=self.deposit_frequency,
            interest_rate=self.interest_rate,
            compounding_frequency=self.compounding_frequency,
            time_horizon=self.time_horizon,
        )


class FutureValueResponse(BaseModel):
    """Numeric future value; NaN and infinities are reported as null."""

    future_value: Optional[float]

    @classmethod
    def from_value(cls, value: float) -> "FutureValueResponse":
        return cls(future_value=value if math.isfinite(value) else None)


class FormInput(BaseModel):
    """Text fields exactly as typed into the calculator form.

    `interest_rate` is a percentage ("5" for 5%). The frequencies come from
    fixed pickers, so they are enumerated values rather than text.
    """

    model_config = ConfigDict(extra="forbid")

    initial_deposit: str = ""
    periodic_deposit: str = ""
    deposit_frequency: DepositFrequency = DepositFrequency.MONTHLY
    interest_rate: str = ""
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.ANNUALLY
    time_horizon: str = ""


class FormResult(BaseModel):
    """Formatted result of a form submission; empty when input was rejected."""

    future_value: Optional[str] = None
    displayed: bool = False


class FrequencyOption(BaseModel):
    value: str
    label: str


class FrequencyOptions(BaseModel):
    deposit_frequencies: List[FrequencyOption]
    compounding_frequencies: List[FrequencyOption]
