"""Data model for a loaded IMDF feature.

A Feature is one GeoJSON feature from an archive collection, reduced to
the four members validation cares about: identifier, declared feature
type, geometry, and properties.  Features are created once by the
archive loader and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from imdf_validator.core.constants import GEOJSON_FEATURE, FeatureType


@dataclass(frozen=True, slots=True)
class Feature:
    """A single IMDF feature.

    Attributes:
        id: Opaque feature identifier (UUID in conforming archives).
        feature_type: Declared IMDF feature type.
        geometry: GeoJSON geometry object, or ``None`` for null geometry.
        properties: Raw GeoJSON ``properties`` mapping.
        source_index: Zero-based position of the feature in its collection.
    """

    id: str
    feature_type: FeatureType
    geometry: dict[str, Any] | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    source_index: int = 0

    @property
    def key(self) -> tuple[FeatureType, str]:
        """The ``(feature_type, id)`` pair references resolve against."""
        return (self.feature_type, self.id)

    def has_property(self, name: str) -> bool:
        """Whether *name* is present in ``properties`` (even when ``null``)."""
        return name in self.properties

    def get(self, name: str, default: Any = None) -> Any:
        """Return property *name*, or *default* when it is absent."""
        return self.properties.get(name, default)

    def to_dict(self) -> dict[str, object]:
        """Serialise back to a GeoJSON feature object."""
        return {
            "type": GEOJSON_FEATURE,
            "id": self.id,
            "feature_type": self.feature_type.value,
            "geometry": self.geometry,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object], *, source_index: int = 0) -> Feature:
        """Deserialise from a GeoJSON feature object.

        The feature type is read from the top-level ``feature_type`` member,
        falling back to ``properties.feature_type``.

        Raises:
            TypeError: If ``id`` is not a string, ``properties`` is not an
                object, or ``geometry`` is neither an object nor ``null``.
            ValueError: If the declared feature type is not an IMDF type.
        """
        feature_id = data.get("id")
        if not isinstance(feature_id, str):
            msg = f"id must be a string, got {type(feature_id).__name__}"
            raise TypeError(msg)

        properties = data.get("properties")
        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            msg = f"properties must be an object, got {type(properties).__name__}"
            raise TypeError(msg)

        geometry = data.get("geometry")
        if geometry is not None and not isinstance(geometry, dict):
            msg = f"geometry must be an object or null, got {type(geometry).__name__}"
            raise TypeError(msg)

        declared = declared_feature_type(data)
        feature_type = FeatureType.parse(declared)
        if feature_type is None:
            msg = f"feature_type {declared!r} is not an IMDF feature type"
            raise ValueError(msg)

        return cls(
            id=feature_id,
            feature_type=feature_type,
            geometry=geometry,
            properties=dict(properties),
            source_index=source_index,
        )


def declared_feature_type(data: dict[str, object]) -> object:
    """Return the raw ``feature_type`` declared by a GeoJSON feature object."""
    if "feature_type" in data:
        return data["feature_type"]
    properties = data.get("properties")
    if isinstance(properties, dict):
        return properties.get("feature_type")
    return None


@dataclass(frozen=True, slots=True)
class FeatureReference:
    """A polymorphic ``{id, feature_type}`` reference (relationship endpoints).

    Attributes:
        id: Referenced feature identifier.
        feature_type: Feature type the reference declares for its target.
    """

    id: str
    feature_type: FeatureType

    def to_dict(self) -> dict[str, str]:
        """Serialise to the IMDF ``FeatureReference`` object shape."""
        return {"id": self.id, "feature_type": self.feature_type.value}

    @classmethod
    def from_value(cls, value: object) -> FeatureReference | None:
        """Parse a raw property value, returning ``None`` if it is malformed."""
        if not isinstance(value, dict):
            return None
        ref_id = value.get("id")
        feature_type = FeatureType.parse(value.get("feature_type"))
        if not isinstance(ref_id, str) or feature_type is None:
            return None
        return cls(id=ref_id, feature_type=feature_type)
