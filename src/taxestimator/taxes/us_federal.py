"""US Federal bracket-based income tax model."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from taxestimator.config.defaults import default_tax_tables
from taxestimator.config.schema import TaxBracket, TaxTables
from taxestimator.taxes.deductions import resolve_deductions
from taxestimator.utils.money import round_currency

logger = logging.getLogger(__name__)


def apply_brackets(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Compute tax using progressive brackets, rounded to cents.

    Income within each bracket is taxed only at that bracket's rate.
    """
    tax = 0.0
    for bracket in brackets:
        if taxable_income > bracket.min:
            tax += (min(taxable_income, bracket.upper) - bracket.min) * bracket.rate
    return round_currency(tax)


def marginal_rate(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Return the rate of the bracket containing ``taxable_income``."""
    for bracket in brackets:
        if bracket.min <= taxable_income < bracket.upper:
            return bracket.rate
    # Only reachable when the top bracket is bounded
    return brackets[-1].rate


class USFederalTaxModel:
    """US Federal income tax with progressive brackets.

    Filing statuses without their own schedule are taxed on the single
    schedule, while their standard deduction is still looked up by status.
    """

    def __init__(self, tables: TaxTables | None = None) -> None:
        if tables is None:
            tables = default_tax_tables()
        self._standard_deduction: dict[str, float] = tables.standard_deduction
        self._brackets: dict[str, list[TaxBracket]] = tables.brackets

    def standard_deduction(self, filing_status: str) -> float:
        """Return standard deduction for filing status."""
        return resolve_deductions(filing_status, None, self._standard_deduction)

    def deductions(self, filing_status: str, custom_deductions: float | None) -> float:
        """Custom deduction when non-zero, otherwise the standard deduction."""
        return resolve_deductions(filing_status, custom_deductions, self._standard_deduction)

    def brackets_for(self, filing_status: str) -> list[TaxBracket]:
        """Bracket schedule for the filing status, defaulting to single."""
        if filing_status not in self._brackets:
            logger.debug("No bracket schedule for %r; using single", filing_status)
            return self._brackets["single"]
        return self._brackets[filing_status]

    def federal_tax(self, taxable_income: float, filing_status: str) -> float:
        """Tax on income already net of deductions."""
        return apply_brackets(taxable_income, self.brackets_for(filing_status))

    def marginal_rate(self, taxable_income: float, filing_status: str) -> float:
        """Marginal ordinary income tax rate at given taxable income."""
        return marginal_rate(taxable_income, self.brackets_for(filing_status))
