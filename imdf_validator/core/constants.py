"""Shared validator constants: single source of truth.

Centralises the IMDF feature type names, geometry kinds, and GeoJSON
type strings used by the schema table, loader, and validation stages.
"""

from __future__ import annotations

import enum


class FeatureType(str, enum.Enum):
    """The 16 IMDF feature types.  Values are the archive collection names."""

    ADDRESS = "address"
    AMENITY = "amenity"
    ANCHOR = "anchor"
    BUILDING = "building"
    DETAIL = "detail"
    FIXTURE = "fixture"
    FOOTPRINT = "footprint"
    GEOFENCE = "geofence"
    KIOSK = "kiosk"
    LEVEL = "level"
    OCCUPANT = "occupant"
    OPENING = "opening"
    RELATIONSHIP = "relationship"
    SECTION = "section"
    UNIT = "unit"
    VENUE = "venue"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: object) -> FeatureType | None:
        """Return the member for *value*, or ``None`` if it is not a feature type."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


ALL_FEATURE_TYPES: frozenset[FeatureType] = frozenset(FeatureType)
"""Every feature type; the target set of polymorphic references."""


class GeometryKind(enum.Enum):
    """Geometry shape mandated for a feature type.

    Values:
        NONE:      Geometry must be ``null``.
        POINT:     A GeoJSON ``Point``.
        LINE:      A GeoJSON ``LineString``.
        POLYGONAL: A GeoJSON ``Polygon`` or ``MultiPolygon``.
        ANY:       ``null`` or any GeoJSON geometry.
    """

    NONE = "none"
    POINT = "point"
    LINE = "line"
    POLYGONAL = "polygonal"
    ANY = "any"


# ---------------------------------------------------------------------------
# GeoJSON type names
# ---------------------------------------------------------------------------

GEOJSON_FEATURE_COLLECTION = "FeatureCollection"
GEOJSON_FEATURE = "Feature"

GEOMETRY_TYPES_BY_KIND: dict[GeometryKind, frozenset[str]] = {
    GeometryKind.POINT: frozenset({"Point"}),
    GeometryKind.LINE: frozenset({"LineString"}),
    GeometryKind.POLYGONAL: frozenset({"Polygon", "MultiPolygon"}),
}

GEOJSON_GEOMETRY_TYPES: frozenset[str] = frozenset(
    {
        "Point",
        "MultiPoint",
        "LineString",
        "MultiLineString",
        "Polygon",
        "MultiPolygon",
        "GeometryCollection",
    }
)

# ---------------------------------------------------------------------------
# Archive layout
# ---------------------------------------------------------------------------

ARCHIVE_FILE_SUFFIX = ".geojson"
"""Each collection is stored as ``<feature_type>.geojson`` inside the archive."""
