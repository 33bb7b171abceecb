"""Pydantic models for PhET-iO API descriptions."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError


class InvalidAPIError(ValueError):
    """An API description does not have the shape the comparator needs."""


class ElementMetadata(BaseModel):
    """Metadata for a single phetioID.

    Fields are read from their historical JSON names (``phetioTypeName``, ...).
    Attributes the comparator does not know about are kept in ``model_extra``.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    type_name: Optional[StrictStr] = Field(None, alias="phetioTypeName")
    event_type: Optional[StrictStr] = Field(None, alias="phetioEventType")
    playback: Optional[StrictBool] = Field(None, alias="phetioPlayback")
    is_dynamic_element: Optional[StrictBool] = Field(None, alias="phetioDynamicElement")
    is_archetype: Optional[StrictBool] = Field(None, alias="phetioIsArchetype")
    archetype_phetio_id: Optional[StrictStr] = Field(None, alias="phetioArchetypePhetioID")
    state: Optional[StrictBool] = Field(None, alias="phetioState")
    read_only: Optional[StrictBool] = Field(None, alias="phetioReadOnly")

    # Non-breaking by policy, never compared
    featured: Optional[StrictBool] = Field(None, alias="phetioFeatured")
    studio_control: Optional[StrictBool] = Field(None, alias="phetioStudioControl")
    high_frequency: Optional[StrictBool] = Field(None, alias="phetioHighFrequency")


class APIDescription(BaseModel):
    """A snapshot of a simulation's public PhET-iO surface."""
    model_config = ConfigDict(extra="allow", frozen=True)

    phetio_elements: Dict[str, ElementMetadata] = Field(..., alias="phetioElements")

    def element_ids(self) -> list[str]:
        """Get element identifiers in document order."""
        return list(self.phetio_elements.keys())


class Problem(BaseModel):
    """A single detected incompatibility."""
    model_config = ConfigDict(frozen=True)

    message: str


APILike = Union[APIDescription, Mapping[str, Any]]


def coerce_api(api: APILike, label: str = "API") -> APIDescription:
    """Return an APIDescription for either a model or a parsed JSON mapping.

    Raises:
        InvalidAPIError: if the ``phetioElements`` mapping is absent or malformed
    """
    if isinstance(api, APIDescription):
        return api
    if not isinstance(api, Mapping):
        raise InvalidAPIError(f"{label} must be a JSON object, got {type(api).__name__}")
    if "phetioElements" not in api:
        raise InvalidAPIError(f"{label} is missing the 'phetioElements' mapping")
    try:
        return APIDescription.model_validate(api)
    except ValidationError as e:
        wrong_types = [
            ".".join(str(part) for part in error["loc"])
            for error in e.errors()
            if error["type"] in ("string_type", "bool_type")
        ]
        if wrong_types:
            raise InvalidAPIError(
                f"{label} has recognized attributes with values that are not strings or booleans: "
                f"{', '.join(wrong_types)}"
            ) from e
        raise InvalidAPIError(f"{label} is malformed: {e}") from e
