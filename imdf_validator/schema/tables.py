"""Feature schema table: per-feature-type structural rules.

The table is the single source of per-variant rules.  For each of the
16 IMDF feature types it declares the mandated geometry kind and every
property: its value kind, whether it is required (present and non-null),
its controlled vocabulary, and, for identifier references, the target
feature type(s), cardinality, and nullability.

Required vs. optional follows the IMDF declarations: a property typed
``X | null`` is optional (may be absent or ``null``); any other property
is required.  A type that declares no geometry member (detail) inherits
the base feature's ``Geometry | null`` and accepts any geometry.

Kiosk references are declared in camelCase (``anchorId`` / ``levelId``)
by the IMDF type declarations and in snake_case by every other feature
type; kiosk accepts both spellings and resolves each independently.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from imdf_validator.core.constants import ALL_FEATURE_TYPES, FeatureType, GeometryKind
from imdf_validator.core.exceptions import UnknownFeatureTypeError
from imdf_validator.schema.vocabulary import CategoryKind

if TYPE_CHECKING:
    from collections.abc import Mapping


class PropertyKind(enum.Enum):
    """Value shape of a property."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    LABELS = "labels"
    CATEGORY = "category"
    DISPLAY_POINT = "display_point"
    REFERENCE = "reference"
    FEATURE_REFERENCE = "feature_reference"
    DOOR = "door"
    TEMPORALITY = "temporality"
    COUNTRY = "country"
    SUBDIVISION = "subdivision"


class Cardinality(enum.Enum):
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class ReferenceSpec:
    """Identifier reference declaration.

    Attributes:
        targets: Feature types the referenced id may resolve to.
        cardinality: ``ONE`` for a single id, ``MANY`` for an array of ids.
        nullable: Whether ``null`` is a valid value.
        polymorphic: The value is a ``FeatureReference`` object declaring
            its own target type (relationship endpoints).
    """

    targets: frozenset[FeatureType]
    cardinality: Cardinality = Cardinality.ONE
    nullable: bool = False
    polymorphic: bool = False


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """Declaration of one feature property.

    Attributes:
        name: Property key.
        kind: Value shape.
        required: Must be present and non-null.
        category: Vocabulary for ``CATEGORY`` properties.
        multiple: A ``CATEGORY`` property that also accepts an array of tokens.
        reference: Target declaration for ``REFERENCE``/``FEATURE_REFERENCE``.
    """

    name: str
    kind: PropertyKind
    required: bool = False
    category: CategoryKind | None = None
    multiple: bool = False
    reference: ReferenceSpec | None = None


@dataclass(frozen=True)
class FeatureSchema:
    """Structural rules for one feature type.

    Attributes:
        feature_type: The feature type described.
        geometry: Mandated geometry kind.
        properties: Property name → declaration.
    """

    feature_type: FeatureType
    geometry: GeometryKind
    properties: Mapping[str, PropertySpec]

    @property
    def required_props(self) -> frozenset[str]:
        return frozenset(name for name, spec in self.properties.items() if spec.required)

    @property
    def optional_props(self) -> frozenset[str]:
        return frozenset(name for name, spec in self.properties.items() if not spec.required)

    @property
    def references(self) -> Mapping[str, ReferenceSpec]:
        """Property name → reference declaration, for reference properties only."""
        return MappingProxyType(
            {
                name: spec.reference
                for name, spec in self.properties.items()
                if spec.reference is not None
            }
        )


# ---------------------------------------------------------------------------
# Declaration helpers
# ---------------------------------------------------------------------------


def _prop(name: str, kind: PropertyKind, *, required: bool = False) -> PropertySpec:
    return PropertySpec(name=name, kind=kind, required=required)


def _string(name: str, *, required: bool = False) -> PropertySpec:
    return _prop(name, PropertyKind.STRING, required=required)


def _labels(name: str, *, required: bool = False) -> PropertySpec:
    return _prop(name, PropertyKind.LABELS, required=required)


def _category(
    name: str, category: CategoryKind, *, required: bool = False, multiple: bool = False
) -> PropertySpec:
    return PropertySpec(
        name=name,
        kind=PropertyKind.CATEGORY,
        required=required,
        category=category,
        multiple=multiple,
    )


def _ref(
    name: str, target: FeatureType, *, required: bool = False, many: bool = False
) -> PropertySpec:
    return PropertySpec(
        name=name,
        kind=PropertyKind.REFERENCE,
        required=required,
        reference=ReferenceSpec(
            targets=frozenset({target}),
            cardinality=Cardinality.MANY if many else Cardinality.ONE,
            nullable=not required,
        ),
    )


def _feature_ref(name: str) -> PropertySpec:
    return PropertySpec(
        name=name,
        kind=PropertyKind.FEATURE_REFERENCE,
        reference=ReferenceSpec(targets=ALL_FEATURE_TYPES, nullable=True, polymorphic=True),
    )


def _display_point(*, required: bool = False) -> PropertySpec:
    return _prop("display_point", PropertyKind.DISPLAY_POINT, required=required)


def _accessibility() -> PropertySpec:
    return _category("accessibility", CategoryKind.ACCESSIBILITY, multiple=True)


def _restriction(*, required: bool = False) -> PropertySpec:
    return _category("restriction", CategoryKind.RESTRICTION, required=required)


def _schema(
    feature_type: FeatureType, geometry: GeometryKind, *props: PropertySpec
) -> FeatureSchema:
    return FeatureSchema(
        feature_type=feature_type,
        geometry=geometry,
        properties=MappingProxyType({p.name: p for p in props}),
    )


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

_FT = FeatureType
_G = GeometryKind
_K = CategoryKind

SCHEMA_TABLE: Mapping[FeatureType, FeatureSchema] = MappingProxyType(
    {
        _FT.ADDRESS: _schema(
            _FT.ADDRESS,
            _G.NONE,
            _string("address", required=True),
            _string("unit"),
            _string("locality", required=True),
            _prop("province", PropertyKind.SUBDIVISION),
            _prop("country", PropertyKind.COUNTRY, required=True),
            _string("postal_code"),
            _string("postal_code_ext"),
            _string("postal_code_vanity"),
        ),
        _FT.AMENITY: _schema(
            _FT.AMENITY,
            _G.POINT,
            _category("category", _K.AMENITY, required=True),
            _accessibility(),
            _labels("name"),
            _labels("alt_name"),
            _string("hours"),
            _string("phone"),
            _string("website"),
            _ref("unit_ids", _FT.UNIT, required=True, many=True),
            _ref("address_id", _FT.ADDRESS),
            _ref("correlation_id", _FT.AMENITY),
        ),
        _FT.ANCHOR: _schema(
            _FT.ANCHOR,
            _G.POINT,
            _ref("address_id", _FT.ADDRESS),
            _ref("unit_id", _FT.UNIT, required=True),
        ),
        _FT.BUILDING: _schema(
            _FT.BUILDING,
            _G.NONE,
            _category("category", _K.BUILDING, required=True),
            _restriction(required=True),
            _labels("name"),
            _labels("alt_name"),
            _display_point(),
            _ref("address_id", _FT.ADDRESS),
        ),
        _FT.DETAIL: _schema(
            _FT.DETAIL,
            _G.ANY,
            _ref("level_id", _FT.LEVEL, required=True),
        ),
        _FT.FIXTURE: _schema(
            _FT.FIXTURE,
            _G.POLYGONAL,
            _category("category", _K.FIXTURE, required=True),
            _labels("name"),
            _labels("alt_name"),
            _ref("anchor_id", _FT.ANCHOR),
            _ref("level_id", _FT.LEVEL, required=True),
            _display_point(),
        ),
        _FT.FOOTPRINT: _schema(
            _FT.FOOTPRINT,
            _G.POLYGONAL,
            _category("category", _K.FOOTPRINT, required=True),
            _labels("name"),
            _ref("building_ids", _FT.BUILDING, required=True, many=True),
        ),
        _FT.GEOFENCE: _schema(
            _FT.GEOFENCE,
            _G.POLYGONAL,
            _category("category", _K.GEOFENCE, required=True),
        ),
        _FT.KIOSK: _schema(
            _FT.KIOSK,
            _G.POLYGONAL,
            _labels("name", required=True),
            _labels("alt_name", required=True),
            _ref("anchor_id", _FT.ANCHOR),
            _ref("level_id", _FT.LEVEL),
            _ref("anchorId", _FT.ANCHOR),
            _ref("levelId", _FT.LEVEL),
            _display_point(),
        ),
        _FT.LEVEL: _schema(
            _FT.LEVEL,
            _G.POLYGONAL,
            _category("category", _K.LEVEL, required=True),
            _restriction(),
            _prop("outdoor", PropertyKind.BOOLEAN, required=True),
            _prop("ordinal", PropertyKind.INTEGER, required=True),
            _labels("name", required=True),
            _labels("short_name", required=True),
            _display_point(),
            _ref("address_id", _FT.ADDRESS),
            _ref("building_ids", _FT.BUILDING, many=True),
        ),
        _FT.OCCUPANT: _schema(
            _FT.OCCUPANT,
            _G.NONE,
            _labels("name", required=True),
            _category("category", _K.OCCUPANT, required=True),
            _ref("anchor_id", _FT.ANCHOR, required=True),
            _string("hours"),
            _string("phone"),
            _string("website"),
            _prop("validity", PropertyKind.TEMPORALITY),
            _ref("correlation_id", _FT.OCCUPANT),
        ),
        _FT.OPENING: _schema(
            _FT.OPENING,
            _G.LINE,
            _category("category", _K.OPENING, required=True),
            _accessibility(),
            _category("access_control", _K.ACCESS_CONTROL),
            _prop("door", PropertyKind.DOOR),
            _labels("name"),
            _labels("alt_name"),
            _display_point(),
            _ref("level_id", _FT.LEVEL, required=True),
        ),
        _FT.RELATIONSHIP: _schema(
            _FT.RELATIONSHIP,
            _G.ANY,
            _category("category", _K.RELATIONSHIP, required=True),
            _category("direction", _K.RELATIONSHIP_DIRECTION, required=True),
            _feature_ref("origin"),
            _feature_ref("intermediary"),
            _feature_ref("destination"),
            _string("hours"),
        ),
        _FT.SECTION: _schema(
            _FT.SECTION,
            _G.POLYGONAL,
            _category("category", _K.SECTION, required=True),
            _restriction(),
            _accessibility(),
            _labels("name"),
            _labels("alt_name"),
            _display_point(),
            _ref("level_id", _FT.LEVEL, required=True),
            _ref("address_id", _FT.ADDRESS),
            _ref("correlation_id", _FT.SECTION),
            _ref("parents", _FT.SECTION),
        ),
        _FT.UNIT: _schema(
            _FT.UNIT,
            _G.POLYGONAL,
            _category("category", _K.UNIT, required=True),
            _restriction(),
            _accessibility(),
            _labels("name"),
            _labels("alt_name"),
            _ref("level_id", _FT.LEVEL, required=True),
            _display_point(),
        ),
        _FT.VENUE: _schema(
            _FT.VENUE,
            _G.POLYGONAL,
            _category("category", _K.VENUE, required=True),
            _restriction(),
            _labels("name", required=True),
            _labels("alt_name"),
            _string("hours"),
            _string("phone"),
            _string("website"),
            _display_point(required=True),
            _ref("address_id", _FT.ADDRESS, required=True),
        ),
    }
)


def schema_for(feature_type: FeatureType | str) -> FeatureSchema:
    """Return the schema entry for *feature_type*.

    Raises:
        UnknownFeatureTypeError: If *feature_type* is not in the table.
    """
    parsed = FeatureType.parse(feature_type)
    if parsed is None or parsed not in SCHEMA_TABLE:
        raise UnknownFeatureTypeError(feature_type)
    return SCHEMA_TABLE[parsed]
