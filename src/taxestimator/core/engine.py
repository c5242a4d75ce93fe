"""Calculation orchestrator: deductions, federal and state tax, history."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from taxestimator.config.defaults import default_tax_tables
from taxestimator.config.schema import CalculationInput, CalculationResult, HistoryEntry
from taxestimator.history.store import HistoryStore
from taxestimator.taxes.state import FlatStateTaxModel
from taxestimator.taxes.us_federal import USFederalTaxModel
from taxestimator.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter your income and filing status."


def validate_input(calc_input: CalculationInput) -> None:
    """Raise InvalidInputError when income is zero/absent or status is absent."""
    if not calc_input.income or not calc_input.filing_status:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)


def format_date(day: date) -> str:
    """Short month/day/year stamp without zero padding, e.g. ``3/7/2024``."""
    return f"{day.month}/{day.day}/{day.year}"


def compute_tax(
    calc_input: CalculationInput,
    federal: USFederalTaxModel | None = None,
    state: FlatStateTaxModel | None = None,
) -> CalculationResult:
    """Compute federal, state, and total tax for one request.

    Args:
        calc_input: Income, filing status, optional custom deduction, and
            state category.
        federal: Federal model; defaults to the packaged tables.
        state: State model; defaults to the packaged flat rates.

    Returns:
        CalculationResult. State tax is computed on gross income, federal
        tax on taxable income.

    Raises:
        InvalidInputError: If income is zero/absent or filing status is absent.
    """
    validate_input(calc_input)
    if federal is None or state is None:
        tables = default_tax_tables()
        if federal is None:
            federal = USFederalTaxModel(tables)
        if state is None:
            state = FlatStateTaxModel(tables.state_rates)

    # validate_input guarantees both are set
    income = float(calc_input.income)  # type: ignore[arg-type]
    filing_status: str = calc_input.filing_status  # type: ignore[assignment]

    deductions = federal.deductions(filing_status, calc_input.custom_deductions)
    taxable_income = max(0.0, income - deductions)

    federal_tax = federal.federal_tax(taxable_income, filing_status)
    state_tax = state.tax_on_income(income, calc_input.state)
    total_tax = federal_tax + state_tax

    return CalculationResult(
        income=income,
        filing_status=filing_status,
        deductions=deductions,
        taxable_income=taxable_income,
        federal_tax=federal_tax,
        state_tax=state_tax,
        total_tax=total_tax,
        after_tax_income=income - total_tax,
        effective_rate=total_tax / income,
        marginal_rate=federal.marginal_rate(taxable_income, filing_status),
    )


class TaxCalculator:
    """Runs calculations and records each successful one in the history.

    Args:
        history: History store to append to; None disables recording.
        federal: Federal model; defaults to the packaged tables.
        state: State model; defaults to the packaged flat rates.
        today: Clock used for the history date stamp.
    """

    def __init__(
        self,
        history: HistoryStore | None = None,
        federal: USFederalTaxModel | None = None,
        state: FlatStateTaxModel | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        if federal is None or state is None:
            tables = default_tax_tables()
            federal = federal or USFederalTaxModel(tables)
            state = state or FlatStateTaxModel(tables.state_rates)
        self._federal = federal
        self._state = state
        self._history = history
        self._today = today

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    def calculate(self, calc_input: CalculationInput) -> CalculationResult:
        """Compute taxes and prepend the outcome to the history.

        Raises:
            InvalidInputError: Nothing is computed or recorded.
        """
        result = compute_tax(calc_input, self._federal, self._state)
        if self._history is not None:
            self._history.append(HistoryEntry.from_result(result, format_date(self._today())))
        logger.debug(
            "Calculated %s: federal=%.2f state=%.2f",
            result.filing_status,
            result.federal_tax,
            result.state_tax,
        )
        return result

    def clear_history(self) -> None:
        if self._history is not None:
            self._history.clear()
