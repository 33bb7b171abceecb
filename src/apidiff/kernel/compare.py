"""Structural comparison between two versions of a PhET-iO API."""

from typing import List

from .model import APILike, Problem, coerce_api
from .rules import METADATA_RULES, Value, rule_reports


def render_value(value: Value) -> str:
    """Render a metadata value the way published API reports always have."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def missing_elements_message(missing: List[str]) -> str:
    body = "\n\t".join(missing)
    return f"Second API missing elements:\n\t{body}"


def compare_apis(old_api: APILike, new_api: APILike) -> List[Problem]:
    """
    Compute the compatibility problems introduced by new_api relative to old_api.

    Elements removed in new_api are reported together as a single problem.
    Elements added in new_api are never reported. For elements present in
    both, each row of METADATA_RULES is checked in order.

    Neither input is mutated. Differences are returned, never raised.

    Raises:
        InvalidAPIError: if either side lacks a well-formed phetioElements mapping
    """
    old = coerce_api(old_api, label="First API")
    new = coerce_api(new_api, label="Second API")

    problems: List[Problem] = []

    old_elements = old.phetio_elements
    new_elements = new.phetio_elements

    # Set comparison: key order differs freely between independently written documents
    if set(old_elements) != set(new_elements):
        missing = [phetio_id for phetio_id in old_elements if phetio_id not in new_elements]
        if missing:
            problems.append(Problem(message=missing_elements_message(missing)))

    for phetio_id, old_metadata in old_elements.items():
        new_metadata = new_elements.get(phetio_id)
        if new_metadata is None:
            continue
        for rule in METADATA_RULES:
            old_value = getattr(old_metadata, rule.field)
            new_value = getattr(new_metadata, rule.field)
            if rule_reports(rule, old_value, new_value):
                problems.append(Problem(
                    message=(
                        f"{phetio_id}.{rule.report_name} changed from "
                        f"{render_value(old_value)} to {render_value(new_value)}"
                    )
                ))

    return problems
