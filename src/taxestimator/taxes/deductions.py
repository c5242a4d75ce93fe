"""Standard vs. custom deduction resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def resolve_deductions(
    filing_status: str,
    custom_deductions: float | None,
    standard_deductions: Mapping[str, float],
) -> float:
    """Return the deduction to subtract from gross income.

    A non-zero custom amount wins. Otherwise the standard deduction for the
    filing status applies, falling back to the single filer amount for an
    unrecognized status.
    """
    if custom_deductions:
        return custom_deductions
    if filing_status not in standard_deductions:
        logger.debug("No standard deduction for %r; using single", filing_status)
        return standard_deductions["single"]
    return standard_deductions[filing_status]
