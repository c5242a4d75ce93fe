"""Serialization for calculation results and history."""

from __future__ import annotations

from pydantic import TypeAdapter

from taxestimator.config.schema import CalculationResult, HistoryEntry

_HISTORY_ADAPTER: TypeAdapter[list[HistoryEntry]] = TypeAdapter(list[HistoryEntry])


def dump_history(entries: list[HistoryEntry]) -> str:
    """Serialize history entries to a JSON array with camelCase keys."""
    return _HISTORY_ADAPTER.dump_json(entries, by_alias=True).decode()


def load_history(json_str: str) -> list[HistoryEntry]:
    """Deserialize history entries.

    Raises:
        pydantic.ValidationError: If the text is not a JSON array of entries.
    """
    return _HISTORY_ADAPTER.validate_json(json_str)


def dump_result(result: CalculationResult) -> str:
    """Serialize a calculation result to JSON."""
    return result.model_dump_json(by_alias=True, indent=2)
