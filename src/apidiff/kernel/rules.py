"""Policy table deciding which metadata changes break an API.

Adding a compared attribute means adding one row to METADATA_RULES.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

Value = Union[str, bool, None]


@dataclass(frozen=True)
class MetadataRule:
    """How one ElementMetadata field is compared."""
    field: str  # ElementMetadata attribute
    report_name: str  # Name used in problem messages, e.g. "typeName"
    breaking_value: Optional[bool] = None  # None: any change breaks; otherwise only a move to this value


METADATA_RULES: Tuple[MetadataRule, ...] = (
    MetadataRule("type_name", "typeName"),
    MetadataRule("event_type", "eventType"),
    MetadataRule("playback", "playback"),
    MetadataRule("is_dynamic_element", "isDynamicElement"),
    MetadataRule("is_archetype", "isArchetype"),
    MetadataRule("archetype_phetio_id", "archetypePhetioID"),
    MetadataRule("state", "state", breaking_value=False),  # element stopped being stateful
    MetadataRule("read_only", "readOnly", breaking_value=True),  # element became read-only
)

# featured/studioControl are presentation hints. highFrequency is safe as long as
# clients with data have the full data stream.
NON_BREAKING_FIELDS: Tuple[str, ...] = ("featured", "studio_control", "high_frequency")


def rule_reports(rule: MetadataRule, old_value: Value, new_value: Value) -> bool:
    """Return True if moving from old_value to new_value breaks the API under rule."""
    if _same(old_value, new_value):
        return False
    if rule.breaking_value is None:
        return True
    # Directional: widening changes (becoming stateful, becoming writable) are fine
    return _same(new_value, rule.breaking_value)


def _same(a: Value, b: Value) -> bool:
    # Strict equality: True must not equal 1, "true" must not equal True
    return type(a) is type(b) and a == b
