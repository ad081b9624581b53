"""Deposit and compounding frequencies with their periods-per-year tables."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class DepositFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ANNUALLY = "annually"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def periods_per_year(self) -> float:
        return DEPOSIT_PERIODS_PER_YEAR[self]


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def periods_per_year(self) -> float:
        return COMPOUNDING_PERIODS_PER_YEAR[self]


DEPOSIT_PERIODS_PER_YEAR: Dict[DepositFrequency, float] = {
    DepositFrequency.DAILY: 365.0,
    DepositFrequency.WEEKLY: 52.0,
    DepositFrequency.MONTHLY: 12.0,
    DepositFrequency.ANNUALLY: 1.0,
}

COMPOUNDING_PERIODS_PER_YEAR: Dict[CompoundingFrequency, float] = {
    CompoundingFrequency.DAILY: 365.0,
    CompoundingFrequency.MONTHLY: 12.0,
    CompoundingFrequency.QUARTERLY: 4.0,
    CompoundingFrequency.ANNUALLY: 1.0,
}


__all__ = [
    "DepositFrequency",
    "CompoundingFrequency",
    "DEPOSIT_PERIODS_PER_YEAR",
    "COMPOUNDING_PERIODS_PER_YEAR",
]
