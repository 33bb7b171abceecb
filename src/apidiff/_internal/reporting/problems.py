"""Render problem sequences as human-readable text (internal)."""

from typing import Dict, List, Sequence

from apidiff.kernel.model import Problem


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_problems(problems: Sequence[Problem], header: bool = True) -> str:
    """Join problem messages, one per line, under an optional count header."""
    if not problems:
        return "No problems found"
    lines: List[str] = []
    if header:
        lines.append(f"{_plural(len(problems), 'problem')} found")
    lines.extend(problem.message for problem in problems)
    return "\n".join(lines)


def format_macro_problems(problems: Dict[str, List[Problem]]) -> str:
    """Render per-simulation problems under a total issue count."""
    count = sum(len(p) for p in problems.values())
    lines = [f"{_plural(count, 'issue')} detected"]
    for sim, sim_problems in problems.items():
        lines.append(sim)
        for problem in sim_problems:
            # Multi-line messages (missing elements) stay aligned under the sim
            lines.append("  " + problem.message.replace("\n", "\n  "))
    return "\n".join(lines)
