"""Public API for apidiff.

High-level functions that accept paths, parsed JSON or models and return
complete, structured results. Callers should use these functions instead of
importing from _internal.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, Field

from apidiff.kernel.model import APIDescription, Problem
from apidiff.kernel.compare import compare_apis
from apidiff.kernel.macro import compare_macro_apis
from apidiff._internal.io.api_file import load_api_file, load_json, load_macro_api_file
from apidiff._internal.canonical_json import format_api
from apidiff._internal.reporting.problems import format_macro_problems, format_problems


PathLike = Union[str, os.PathLike, Path]


def _normalize_path(path: PathLike) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class ComparisonResult(BaseModel):
    """Stable result model for comparing two API descriptions."""
    ok: bool  # True if no problems were found
    problem_count: int
    problems: List[Problem] = Field(default_factory=list)  # In detection order

    @property
    def formatted(self) -> str:
        return format_problems(self.problems)


class MacroComparisonResult(BaseModel):
    """Stable result model for comparing two macro APIs."""
    ok: bool
    problem_count: int
    problems: Dict[str, List[Problem]] = Field(default_factory=dict)  # sim -> problems (sims with problems only)

    @property
    def formatted(self) -> str:
        return format_macro_problems(self.problems)


def _load_api(api: Union[PathLike, APIDescription, Mapping[str, Any]]) -> Union[APIDescription, Mapping[str, Any]]:
    if isinstance(api, (APIDescription, Mapping)):
        return api
    return load_api_file(_normalize_path(api))


def compare(
    old_api: Union[PathLike, APIDescription, Mapping[str, Any]],
    new_api: Union[PathLike, APIDescription, Mapping[str, Any]],
) -> ComparisonResult:
    """
    Compare two API descriptions and report breaking changes.

    Args:
        old_api: Earlier API (path, parsed JSON dict, or APIDescription)
        new_api: Later API (path, parsed JSON dict, or APIDescription)

    Returns:
        ComparisonResult with problems in detection order

    Raises:
        FileNotFoundError: if a path does not exist
        InvalidAPIError: if an API cannot be parsed or lacks phetioElements
    """
    problems = compare_apis(_load_api(old_api), _load_api(new_api))
    return ComparisonResult(
        ok=not problems,
        problem_count=len(problems),
        problems=problems,
    )


def compare_macro(
    macro_a: Union[PathLike, Mapping[str, Any]],
    macro_b: Union[PathLike, Mapping[str, Any]],
) -> MacroComparisonResult:
    """Compare two macro APIs (sim name -> API) and report breaking changes per sim."""
    if not isinstance(macro_a, Mapping):
        macro_a = load_macro_api_file(_normalize_path(macro_a))
    if not isinstance(macro_b, Mapping):
        macro_b = load_macro_api_file(_normalize_path(macro_b))

    comparison = compare_macro_apis(macro_a, macro_b)
    return MacroComparisonResult(
        ok=comparison.problem_count == 0,
        problem_count=comparison.problem_count,
        problems=comparison.problems,
    )


def format_api_file(path: PathLike) -> str:
    """Load any JSON API file and return it formatted with recursively sorted keys."""
    return format_api(load_json(_normalize_path(path)))
