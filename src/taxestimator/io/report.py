"""Plain-text rendering of results and history for the CLI."""

from __future__ import annotations

from collections.abc import Sequence

from taxestimator.config.schema import CalculationResult, HistoryEntry

EMPTY_HISTORY_MESSAGE = "No calculations yet."


def format_currency(amount: float) -> str:
    """Dollar amount with thousands separators, e.g. ``$44,382.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(rate: float, decimals: int = 2) -> str:
    return f"{rate * 100:.{decimals}f}%"


def summary_lines(result: CalculationResult) -> list[str]:
    """Headline figures: federal, state, total, and after-tax income."""
    return [
        f"Federal Tax:       {format_currency(result.federal_tax)}",
        f"State Tax:         {format_currency(result.state_tax)}",
        f"Total Tax:         {format_currency(result.total_tax)}",
        f"After-Tax Income:  {format_currency(result.after_tax_income)}",
    ]


def breakdown_lines(result: CalculationResult) -> list[str]:
    """Detailed breakdown. Effective rate to 2 decimals, marginal to 1."""
    return [
        f"Gross Income:       {format_currency(result.income)}",
        f"Deductions:         {format_currency(result.deductions)}",
        f"Taxable Income:     {format_currency(result.taxable_income)}",
        f"Effective Tax Rate: {format_percent(result.effective_rate, 2)}",
        f"Marginal Tax Rate:  {format_percent(result.marginal_rate, 1)}",
    ]


def history_lines(entries: Sequence[HistoryEntry]) -> list[str]:
    if not entries:
        return [EMPTY_HISTORY_MESSAGE]
    return [
        f"Date: {e.date} | Income: {format_currency(e.income)} | Status: {e.filing_status}"
        f" | Total Tax: {format_currency(e.total_tax)}"
        f" | After-Tax: {format_currency(e.after_tax_income)}"
        for e in entries
    ]
