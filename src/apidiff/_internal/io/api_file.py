"""API file I/O helpers (internal)."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from apidiff.kernel.model import APIDescription, InvalidAPIError, coerce_api


def load_json(path: Union[str, Path]) -> Any:
    """Load a JSON document from path.

    Raises:
        FileNotFoundError: if path does not exist
        InvalidAPIError: if the file is not valid JSON
    """
    json_path = Path(path)
    if not json_path.exists():
        raise FileNotFoundError(f"API file not found: {json_path}")
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidAPIError(f"Could not parse {json_path}: {e}") from e


def load_api_file(path: Union[str, Path]) -> APIDescription:
    """Load and validate a single API description."""
    return coerce_api(load_json(path), label=str(path))


def load_macro_api_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a macro API (sim name -> API); the APIs are validated when compared."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise InvalidAPIError(f"{path} must hold a JSON object mapping simulation names to APIs")
    return data
