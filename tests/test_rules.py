"""Tests for the metadata policy table."""

import dataclasses

import pytest

from apidiff.kernel.model import ElementMetadata
from apidiff.kernel.rules import METADATA_RULES, NON_BREAKING_FIELDS, MetadataRule, rule_reports


def _rule(report_name: str) -> MetadataRule:
    return next(rule for rule in METADATA_RULES if rule.report_name == report_name)


def test_rule_order_is_stable():
    assert [rule.report_name for rule in METADATA_RULES] == [
        "typeName",
        "eventType",
        "playback",
        "isDynamicElement",
        "isArchetype",
        "archetypePhetioID",
        "state",
        "readOnly",
    ]


def test_rule_fields_exist_on_metadata():
    fields = set(ElementMetadata.model_fields)
    for rule in METADATA_RULES:
        assert rule.field in fields
    for field in NON_BREAKING_FIELDS:
        assert field in fields


def test_non_breaking_fields_not_in_rules():
    compared = {rule.field for rule in METADATA_RULES}
    assert compared.isdisjoint(NON_BREAKING_FIELDS)


def test_directional_rules():
    assert _rule("state").breaking_value is False
    assert _rule("readOnly").breaking_value is True
    assert all(rule.breaking_value is None for rule in METADATA_RULES if rule.report_name not in ("state", "readOnly"))


@pytest.mark.parametrize("old,new,expected", [
    ("A", "B", True),
    ("A", "A", False),
    (None, "A", True),
    ("A", None, True),
    (None, None, False),
])
def test_symmetric_rule(old, new, expected):
    assert rule_reports(_rule("typeName"), old, new) is expected


@pytest.mark.parametrize("old,new,expected", [
    (True, False, True),
    (None, False, True),
    (False, True, False),
    (None, True, False),
    (False, None, False),
    (False, False, False),
])
def test_state_rule(old, new, expected):
    assert rule_reports(_rule("state"), old, new) is expected


@pytest.mark.parametrize("old,new,expected", [
    (False, True, True),
    (None, True, True),
    (True, False, False),
    (True, True, False),
    (True, None, False),
])
def test_read_only_rule(old, new, expected):
    assert rule_reports(_rule("readOnly"), old, new) is expected


def test_rules_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _rule("state").breaking_value = True
