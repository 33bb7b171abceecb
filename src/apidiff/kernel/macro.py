"""Comparison of macro APIs (one JSON file holding the APIs of many sims)."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .compare import compare_apis
from .model import InvalidAPIError, Problem


@dataclass(frozen=True)
class MacroComparison:
    """Problems per simulation; simulations without problems are omitted."""
    problems: Dict[str, List[Problem]]

    @property
    def problem_count(self) -> int:
        return sum(len(p) for p in self.problems.values())


def compare_macro_apis(macro_a: Mapping[str, Any], macro_b: Mapping[str, Any]) -> MacroComparison:
    """
    Compare every simulation API of macro_a with its counterpart in macro_b.

    Simulations only in macro_b are additions and are not reported.

    Raises:
        InvalidAPIError: if a macro API is not a mapping or one of its APIs is malformed
    """
    for label, macro in (("First macro API", macro_a), ("Second macro API", macro_b)):
        if not isinstance(macro, Mapping):
            raise InvalidAPIError(f"{label} must be a JSON object, got {type(macro).__name__}")

    problems: Dict[str, List[Problem]] = {}
    for sim, api_a in macro_a.items():
        if sim not in macro_b:
            problems[sim] = [Problem(message=f"Second macro API missing simulation: {sim}")]
            continue
        try:
            sim_problems = compare_apis(api_a, macro_b[sim])
        except InvalidAPIError as e:
            raise InvalidAPIError(f"{sim}: {e}") from e
        if sim_problems:
            problems[sim] = sim_problems

    return MacroComparison(problems=problems)
