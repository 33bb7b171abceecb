"""Tests for canonical JSON and API file formatting."""

import json

from apidiff._internal.canonical_json import canonical_dumps, copy_with_sorted_keys, format_api


def test_canonical_dumps_sorted_and_compact():
    assert canonical_dumps({"b": 1, "a": [2, 1]}) == '{"a":[2,1],"b":1}'


def test_canonical_dumps_keeps_unicode():
    assert canonical_dumps({"name": "Schrödinger"}) == '{"name":"Schrödinger"}'


def test_copy_with_sorted_keys_recurses():
    data = {"z": {"b": 1, "a": 2}, "a": [{"y": 1, "x": 2}, 3]}

    result = copy_with_sorted_keys(data)

    assert list(result) == ["a", "z"]
    assert list(result["z"]) == ["a", "b"]
    assert list(result["a"][0]) == ["x", "y"]
    assert result["a"][1] == 3


def test_copy_with_sorted_keys_does_not_mutate():
    data = {"b": {"d": 1, "c": 2}, "a": None}
    copy_with_sorted_keys(data)
    assert list(data) == ["b", "a"]
    assert list(data["b"]) == ["d", "c"]


def test_copy_with_sorted_keys_primitives():
    assert copy_with_sorted_keys(None) is None
    assert copy_with_sorted_keys("text") == "text"
    assert copy_with_sorted_keys(1.5) == 1.5


def test_format_api_indents_continuation_lines():
    formatted = format_api({"phetioElements": {"sim.x": {"phetioState": True}}})

    assert formatted == (
        '{\n'
        '    "phetioElements": {\n'
        '      "sim.x": {\n'
        '        "phetioState": true\n'
        '      }\n'
        '    }\n'
        '  }'
    )


def test_format_api_output_is_valid_json():
    api = {"b": [3, {"d": 1, "c": 2}], "a": "x"}
    assert json.loads(format_api(api)) == api
