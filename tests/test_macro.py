"""Tests for macro API comparison."""

import pytest

from apidiff.kernel.macro import compare_macro_apis
from apidiff.kernel.model import InvalidAPIError


def _api(**elements):
    return {"phetioElements": elements}


def test_identical_macro_apis_clean():
    macro = {"gravity": _api(**{"gravity.x": {"phetioState": True}})}
    result = compare_macro_apis(macro, macro)
    assert result.problems == {}
    assert result.problem_count == 0


def test_missing_simulation_reported():
    macro_a = {"gravity": _api(), "waves": _api()}
    macro_b = {"gravity": _api()}

    result = compare_macro_apis(macro_a, macro_b)

    assert list(result.problems) == ["waves"]
    assert result.problems["waves"][0].message == "Second macro API missing simulation: waves"
    assert result.problem_count == 1


def test_added_simulation_silent():
    result = compare_macro_apis({"gravity": _api()}, {"gravity": _api(), "waves": _api()})
    assert result.problem_count == 0


def test_problems_grouped_by_simulation():
    macro_a = {
        "gravity": _api(**{"gravity.x": {"phetioTypeName": "A", "phetioState": True}}),
        "friction": _api(**{"friction.y": {}}),
    }
    macro_b = {
        "gravity": _api(**{"gravity.x": {"phetioTypeName": "B", "phetioState": False}}),
        "friction": _api(**{"friction.y": {}}),
    }

    result = compare_macro_apis(macro_a, macro_b)

    assert list(result.problems) == ["gravity"]
    assert [p.message for p in result.problems["gravity"]] == [
        "gravity.x.typeName changed from A to B",
        "gravity.x.state changed from true to false",
    ]
    assert result.problem_count == 2


def test_non_mapping_macro_raises():
    with pytest.raises(InvalidAPIError, match="Second macro API"):
        compare_macro_apis({}, ["gravity"])


def test_malformed_sim_api_names_simulation():
    with pytest.raises(InvalidAPIError, match="^gravity: "):
        compare_macro_apis({"gravity": {}}, {"gravity": _api()})
