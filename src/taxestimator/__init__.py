"""taxestimator: progressive income tax estimates with a bounded history."""

__version__ = "0.1.0"

from taxestimator.config.defaults import default_input as default_input
from taxestimator.config.defaults import default_tax_tables as default_tax_tables
from taxestimator.config.schema import CalculationInput as CalculationInput
from taxestimator.config.schema import CalculationResult as CalculationResult
from taxestimator.config.schema import HistoryEntry as HistoryEntry
from taxestimator.config.schema import TaxBracket as TaxBracket
from taxestimator.config.schema import TaxTables as TaxTables
from taxestimator.core.engine import TaxCalculator as TaxCalculator
from taxestimator.core.engine import compute_tax as compute_tax
from taxestimator.history.backends import InMemoryStore as InMemoryStore
from taxestimator.history.backends import JsonFileStore as JsonFileStore
from taxestimator.history.store import HistoryStore as HistoryStore
from taxestimator.utils.exceptions import InvalidInputError as InvalidInputError
