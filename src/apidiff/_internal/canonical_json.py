"""Canonical and display JSON serialization for API files and reports."""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization for machine-readable reports.

    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":")
    - List order preserved (problem order is meaningful)
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def copy_with_sorted_keys(value: Any) -> Any:
    """Return a new object with mapping keys sorted at every level.

    Lists keep their order; their elements are sorted recursively.
    """
    if isinstance(value, list):
        return [copy_with_sorted_keys(item) for item in value]
    if not isinstance(value, dict):
        return value
    return {key: copy_with_sorted_keys(value[key]) for key in sorted(value)}


def format_api(api: Any) -> str:
    """Format an API for printing into an API file.

    Every line after the first is indented two spaces so the output nests
    under a surrounding key.
    """
    text = json.dumps(copy_with_sorted_keys(api), indent=2, ensure_ascii=False)
    return text.replace("\n", "\n  ")
