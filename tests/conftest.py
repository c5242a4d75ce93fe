"""Shared test fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from taxestimator.config.defaults import default_tax_tables
from taxestimator.config.schema import TaxTables
from taxestimator.core.engine import TaxCalculator
from taxestimator.history.backends import InMemoryStore
from taxestimator.history.store import HistoryStore
from taxestimator.taxes.state import FlatStateTaxModel
from taxestimator.taxes.us_federal import USFederalTaxModel


@pytest.fixture
def tables() -> TaxTables:
    return default_tax_tables()


@pytest.fixture
def federal(tables: TaxTables) -> USFederalTaxModel:
    return USFederalTaxModel(tables)


@pytest.fixture
def state_model(tables: TaxTables) -> FlatStateTaxModel:
    return FlatStateTaxModel(tables.state_rates)


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def history(memory_store: InMemoryStore) -> HistoryStore:
    return HistoryStore.open(memory_store)


@pytest.fixture
def calculator(
    history: HistoryStore,
    federal: USFederalTaxModel,
    state_model: FlatStateTaxModel,
) -> TaxCalculator:
    """Calculator with a fixed clock (7 March 2024)."""
    return TaxCalculator(
        history=history,
        federal=federal,
        state=state_model,
        today=lambda: date(2024, 3, 7),
    )

