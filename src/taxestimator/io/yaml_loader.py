"""Packaged YAML data (bracket, deduction, and state rate tables)."""

from __future__ import annotations

from importlib.resources import files
from typing import Any

import yaml

PACKAGE = "taxestimator"


def load_package_yaml(relative_path: str) -> Any:
    """Parse a YAML resource shipped inside the taxestimator package.

    Reads through ``importlib.resources`` so the tables resolve from a
    wheel or zip install as well as a source checkout.

    Args:
        relative_path: ``/``-separated path below the package,
            e.g. ``"taxes/tables/tax_tables.yaml"``.

    Raises:
        FileNotFoundError: If no such resource exists.
    """
    resource = files(PACKAGE).joinpath(*relative_path.split("/"))
    if not resource.is_file():
        raise FileNotFoundError(f"No packaged resource {relative_path!r} in {PACKAGE}")
    return yaml.safe_load(resource.read_text(encoding="utf-8"))
