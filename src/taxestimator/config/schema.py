"""Pydantic v2 models for tax tables, calculation records, and history."""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

FilingStatus = Literal["single", "marriedJointly", "marriedSeparately", "headOfHousehold"]
StateCategory = Literal["none", "low", "medium", "high"]

FILING_STATUSES: tuple[str, ...] = (
    "single",
    "marriedJointly",
    "marriedSeparately",
    "headOfHousehold",
)
STATE_CATEGORIES: tuple[str, ...] = ("none", "low", "medium", "high")

DEFAULT_HISTORY_KEY = "taxHistory"
MAX_HISTORY_ENTRIES = 10

# Upper bound on user-supplied amounts; keeps cent scaling finite
MAX_AMOUNT = 1e12


class TaxBracket(BaseModel):
    """A contiguous income range taxed at a single marginal rate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min: float = Field(ge=0, description="Lower bound of the bracket")
    max: float | None = Field(default=None, description="Upper bound; None means unbounded")
    rate: float = Field(ge=0, lt=1, description="Marginal rate as a fraction")

    @property
    def upper(self) -> float:
        """Upper bound with ``math.inf`` standing in for an unbounded bracket."""
        return math.inf if self.max is None else self.max


class TaxTables(BaseModel):
    """Standard deductions, bracket schedules, and flat state rates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_deduction: dict[str, float]
    brackets: dict[str, list[TaxBracket]]
    state_rates: dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_tables(self) -> TaxTables:
        if "single" not in self.standard_deduction:
            raise ValueError("standard_deduction must include 'single'")
        if "single" not in self.brackets:
            raise ValueError("brackets must include 'single'")
        for status, amount in self.standard_deduction.items():
            if amount < 0:
                raise ValueError(f"standard_deduction for {status!r} must be non-negative")
        for status, schedule in self.brackets.items():
            _validate_schedule(status, schedule)
        for category, rate in self.state_rates.items():
            if not 0 <= rate < 1:
                raise ValueError(f"state rate for {category!r} must be in [0, 1), got {rate}")
        return self


def _validate_schedule(status: str, schedule: list[TaxBracket]) -> None:
    if not schedule:
        raise ValueError(f"bracket schedule for {status!r} is empty")
    for i, bracket in enumerate(schedule):
        is_last = i == len(schedule) - 1
        if bracket.max is None:
            if not is_last:
                raise ValueError(f"only the last {status!r} bracket may be unbounded")
            continue
        if is_last:
            raise ValueError(f"last {status!r} bracket must be unbounded")
        if bracket.max <= bracket.min:
            raise ValueError(f"{status!r} bracket {i} has max <= min")
        if schedule[i + 1].min != bracket.max:
            raise ValueError(
                f"{status!r} brackets {i} and {i + 1} are not contiguous "
                f"({bracket.max} != {schedule[i + 1].min})"
            )


class CalculationInput(BaseModel):
    """User-supplied calculation request.

    Filing status and state category are plain strings: values outside the
    known sets fall back to defaults instead of failing validation.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    income: float | None = Field(
        default=None, ge=0, le=MAX_AMOUNT, description="Gross annual income"
    )
    filing_status: str | None = Field(default=None, description="One of FILING_STATUSES")
    custom_deductions: float | None = Field(
        default=None,
        ge=0,
        le=MAX_AMOUNT,
        description="Overrides the standard deduction when non-zero",
    )
    state: str = Field(default="none", description="One of STATE_CATEGORIES")


class CalculationResult(BaseModel):
    """Derived tax figures for one calculation."""

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    income: float
    filing_status: str
    deductions: float
    taxable_income: float
    federal_tax: float
    state_tax: float
    total_tax: float
    after_tax_income: float
    effective_rate: float
    marginal_rate: float


class HistoryEntry(BaseModel):
    """One saved calculation, as persisted under the history key."""

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    date: str = Field(description="Human-readable date stamp, e.g. 10/18/2026")
    income: float
    filing_status: str
    federal_tax: float
    state_tax: float
    total_tax: float
    after_tax_income: float

    @classmethod
    def from_result(cls, result: CalculationResult, date: str) -> HistoryEntry:
        return cls(
            date=date,
            income=result.income,
            filing_status=result.filing_status,
            federal_tax=result.federal_tax,
            state_tax=result.state_tax,
            total_tax=result.total_tax,
            after_tax_income=result.after_tax_income,
        )


class HistorySettings(BaseModel):
    """Where and how much calculation history is kept."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(default=DEFAULT_HISTORY_KEY, min_length=1, description="Store key")
    max_entries: int = Field(
        default=MAX_HISTORY_ENTRIES, ge=1, description="Most-recent entries retained"
    )
