"""Custom exceptions for taxestimator."""

from __future__ import annotations


class TaxEstimatorError(Exception):
    """Base exception for taxestimator."""


class ConfigError(TaxEstimatorError):
    """Invalid bracket, deduction, or state rate tables."""


class InvalidInputError(TaxEstimatorError):
    """User-facing validation failure; the calculation was not performed."""
