"""Flat-rate state tax estimate keyed by a coarse category."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from taxestimator.utils.money import round_currency

logger = logging.getLogger(__name__)


class FlatStateTaxModel:
    """Applies a single flat rate per state category to gross income."""

    def __init__(self, rates: Mapping[str, float]) -> None:
        self._rates = dict(rates)

    def rate(self, category: str) -> float:
        """Rate for the category; unknown categories are untaxed."""
        if category not in self._rates:
            logger.debug("Unknown state category %r; using rate 0", category)
            return 0.0
        return self._rates[category]

    def tax_on_income(self, gross_income: float, category: str) -> float:
        """State tax on gross (pre-deduction) income, rounded to cents."""
        return round_currency(gross_income * self.rate(category))
