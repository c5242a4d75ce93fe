"""Default configuration values for taxestimator."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import click
from pydantic import ValidationError

from taxestimator.config.schema import (
    DEFAULT_HISTORY_KEY,
    MAX_HISTORY_ENTRIES,
    CalculationInput,
    HistorySettings,
    TaxTables,
)
from taxestimator.io.yaml_loader import load_package_yaml
from taxestimator.utils.exceptions import ConfigError

TAX_TABLES_PATH = "taxes/tables/tax_tables.yaml"
DEFAULT_FILING_STATUS = "single"


@lru_cache(maxsize=1)
def default_tax_tables() -> TaxTables:
    """Bracket, deduction, and state rate tables shipped with the package.

    Parsed once per process; the returned model is frozen and shared.
    """
    try:
        return TaxTables.model_validate(load_package_yaml(TAX_TABLES_PATH))
    except ValidationError as exc:
        raise ConfigError(f"Invalid tax tables in {TAX_TABLES_PATH}: {exc}") from exc


def default_input() -> CalculationInput:
    """Example request: $50k single filer, standard deduction, low-tax state."""
    return CalculationInput(income=50_000, filing_status=DEFAULT_FILING_STATUS, state="low")


def default_history_settings() -> HistorySettings:
    """History kept under ``taxHistory``, ten most recent entries."""
    return HistorySettings(key=DEFAULT_HISTORY_KEY, max_entries=MAX_HISTORY_ENTRIES)


def default_store_path() -> Path:
    """Per-user JSON file backing the history store."""
    return Path(click.get_app_dir("taxestimator")) / "store.json"
