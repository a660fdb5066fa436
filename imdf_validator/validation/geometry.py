"""Geometry checks: geometry kind, buildability, validity, display points.

Geometry correctness is delegated to shapely; this module only decides
which shapely findings become which diagnostics:

- wrong or missing geometry for the feature type → ``GeometryKindMismatch``
- coordinates shapely cannot build (or empty)   → ``MalformedGeometry``
- built but ``is_valid`` is false               → ``InvalidGeometry`` (warning)
- display point farther than the tolerance from
  the feature geometry                           → ``DisplayPointOutOfBounds`` (warning)

Display-point containment is soft: a point on or inside the geometry
passes, and a point outside passes when its geodesic distance to the
geometry (WGS 84 ellipsoid, via pyproj) is within the configured
tolerance.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from pyproj import Geod
from shapely.errors import ShapelyError
from shapely.geometry import Point, shape
from shapely.ops import nearest_points
from shapely.validation import explain_validity

from imdf_validator.core.constants import (
    GEOJSON_GEOMETRY_TYPES,
    GEOMETRY_TYPES_BY_KIND,
    GeometryKind,
)
from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode
from imdf_validator.utils.helpers import is_number

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry

    from imdf_validator.models.feature import Feature
    from imdf_validator.schema.tables import FeatureSchema

logger = logging.getLogger("imdf_validator.validation.geometry")

# WGS 84 coordinate bounds
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

_GEOD = Geod(ellps="WGS84")

_KIND_LABELS: dict[GeometryKind, str] = {
    GeometryKind.POINT: "Point",
    GeometryKind.LINE: "LineString",
    GeometryKind.POLYGONAL: "Polygon or MultiPolygon",
}


# ---------------------------------------------------------------------------
# Stage 1: geometry kind
# ---------------------------------------------------------------------------


def check_geometry(
    feature: Feature,
    schema: FeatureSchema,
    *,
    check_validity: bool = True,
) -> tuple[list[Diagnostic], BaseGeometry | None]:
    """Check a feature's geometry against its schema entry.

    Returns:
        The diagnostics, and the shapely geometry when one could be
        built (reused by the display-point check).
    """
    geometry = feature.geometry
    kind = schema.geometry

    if kind is GeometryKind.NONE:
        if geometry is None:
            return [], None
        return [
            _diagnostic(
                DiagnosticCode.GEOMETRY_KIND_MISMATCH,
                feature,
                f"{feature.feature_type.value} geometry must be null, "
                f"got {_type_label(geometry)}",
            )
        ], None

    if geometry is None:
        if kind is GeometryKind.ANY:
            return [], None
        return [
            _diagnostic(
                DiagnosticCode.GEOMETRY_KIND_MISMATCH,
                feature,
                f"{feature.feature_type.value} geometry must be {_KIND_LABELS[kind]}, got null",
            )
        ], None

    geom_type = geometry.get("type")
    allowed = GEOMETRY_TYPES_BY_KIND.get(kind, GEOJSON_GEOMETRY_TYPES)
    if not isinstance(geom_type, str) or geom_type not in allowed:
        expected = _KIND_LABELS.get(kind, "a GeoJSON geometry")
        return [
            _diagnostic(
                DiagnosticCode.GEOMETRY_KIND_MISMATCH,
                feature,
                f"{feature.feature_type.value} geometry must be {expected}, "
                f"got {_type_label(geometry)}",
            )
        ], None

    built, problem = build_shape(geometry)
    if built is None:
        return [
            _diagnostic(
                DiagnosticCode.MALFORMED_GEOMETRY,
                feature,
                f"{geom_type} geometry cannot be built: {problem}",
            )
        ], None

    diagnostics: list[Diagnostic] = []
    if check_validity and not built.is_valid:
        diagnostics.append(
            _diagnostic(
                DiagnosticCode.INVALID_GEOMETRY,
                feature,
                f"{geom_type} geometry is invalid: {explain_validity(built)}",
            )
        )
    return diagnostics, built


def build_shape(geometry: dict[str, object]) -> tuple[BaseGeometry | None, str]:
    """Build a shapely geometry from a GeoJSON object.

    Returns:
        ``(geometry, "")`` on success, ``(None, reason)`` on failure.
    """
    try:
        built = shape(geometry)
    except (
        ShapelyError,
        ValueError,
        TypeError,
        IndexError,
        KeyError,
        AttributeError,
        OverflowError,
    ) as exc:
        return None, str(exc) or type(exc).__name__
    if built.is_empty:
        return None, "geometry is empty"
    for lon, lat in _coordinates(built):
        if not (math.isfinite(lon) and math.isfinite(lat)):
            return None, "coordinates must be finite numbers"
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE):
            return None, f"coordinate ({lon}, {lat}) is outside WGS 84 bounds"
    return built, ""


# ---------------------------------------------------------------------------
# Display points
# ---------------------------------------------------------------------------


def display_point_problem(value: object) -> str | None:
    """Return why *value* is not a valid GeoJSON Point, or ``None`` if it is."""
    if not isinstance(value, dict):
        return f"display_point must be a GeoJSON Point object, got {type(value).__name__}"
    if value.get("type") != "Point":
        return f"display_point must be a Point, got {value.get('type')!r}"
    coords = value.get("coordinates")
    if (
        not isinstance(coords, list)
        or len(coords) not in (2, 3)
        or not all(is_number(c) for c in coords)
    ):
        return "display_point coordinates must be [longitude, latitude]"
    try:
        lon, lat = float(coords[0]), float(coords[1])
    except OverflowError:
        return "display_point coordinates must be finite numbers"
    if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE):
        return f"display_point ({lon}, {lat}) is outside WGS 84 bounds"
    return None


def check_display_point(
    feature: Feature,
    schema: FeatureSchema,
    built: BaseGeometry | None,
    *,
    tolerance_m: float,
) -> list[Diagnostic]:
    """Warn when a feature's display point lies outside its own geometry.

    Skipped when the feature type has no display point, the value is
    null or malformed (reported elsewhere), or no geometry was built.
    """
    if "display_point" not in schema.properties or built is None:
        return []
    value = feature.get("display_point")
    if value is None or display_point_problem(value) is not None:
        return []

    lon, lat = value["coordinates"][:2]
    point = Point(float(lon), float(lat))
    if built.covers(point):
        return []

    distance_m = geodesic_distance_m(point, built)
    if distance_m <= tolerance_m:
        return []

    logger.debug(
        "Display point outside geometry | type=%s | id=%s | distance_m=%.3f",
        feature.feature_type.value,
        feature.id,
        distance_m,
    )
    return [
        _diagnostic(
            DiagnosticCode.DISPLAY_POINT_OUT_OF_BOUNDS,
            feature,
            f"display_point lies {distance_m:.2f} m outside the feature geometry "
            f"(tolerance {tolerance_m:g} m)",
            field="display_point",
        )
    ]


def geodesic_distance_m(point: Point, geometry: BaseGeometry) -> float:
    """Geodesic distance in metres from *point* to the nearest point of *geometry*."""
    _, nearest = nearest_points(point, geometry)
    _, _, distance = _GEOD.inv(point.x, point.y, nearest.x, nearest.y)
    return abs(float(distance))


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _coordinates(geometry: BaseGeometry) -> list[tuple[float, float]]:
    """Flatten every vertex of *geometry* into ``(lon, lat)`` pairs."""
    if hasattr(geometry, "geoms"):
        return [c for part in geometry.geoms for c in _coordinates(part)]
    if geometry.geom_type == "Polygon":
        rings = [geometry.exterior, *geometry.interiors]
        return [(c[0], c[1]) for ring in rings for c in ring.coords]
    return [(c[0], c[1]) for c in geometry.coords]


def _type_label(geometry: dict[str, object]) -> str:
    geom_type = geometry.get("type")
    return str(geom_type) if isinstance(geom_type, str) else "an untyped geometry"


def _diagnostic(
    code: DiagnosticCode,
    feature: Feature,
    message: str,
    *,
    field: str | None = None,
) -> Diagnostic:
    return Diagnostic.create(code, feature.feature_type, feature.id, message, field=field)
