"""Property checks: required presence, value types, and category tokens.

Two stages live here:

Stage 2, required presence
    One ``MissingRequiredProperty`` per feature and field when a required
    property is absent or ``null``.

Stage 3, per-property type and category
    Every declared property that is present and non-null is checked
    against its ``PropertyKind``.  Wrong JSON shape gives
    ``InvalidPropertyType``, a well-shaped value outside its domain gives
    ``InvalidPropertyValue``, and a token missing from its vocabulary
    gives ``InvalidCategoryValue``.  Keys the schema does not declare
    give ``UnknownProperty`` warnings when enabled.

Labels are left to ``validation.labels``; reference existence is left to
the resolver.  Only the JSON shape of references is checked here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from imdf_validator.core.constants import FeatureType
from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode
from imdf_validator.schema.tables import Cardinality, PropertyKind
from imdf_validator.schema.vocabulary import CategoryKind
from imdf_validator.utils.helpers import (
    COUNTRY_CODE_RE,
    SUBDIVISION_CODE_RE,
    is_integer,
    parse_timestamp,
)
from imdf_validator.validation.geometry import display_point_problem

if TYPE_CHECKING:
    from collections.abc import Callable

    from imdf_validator.models.feature import Feature
    from imdf_validator.schema.tables import FeatureSchema, PropertySpec
    from imdf_validator.schema.vocabulary import VocabularyRegistry

# Keys allowed in ``properties`` without a schema declaration
PASSTHROUGH_PROPERTIES: frozenset[str] = frozenset({"feature_type"})

TEMPORALITY_KEYS: tuple[str, ...] = ("start", "end", "modified")


# ---------------------------------------------------------------------------
# Stage 2: required presence
# ---------------------------------------------------------------------------


def check_required(feature: Feature, schema: FeatureSchema) -> list[Diagnostic]:
    """Report each required property that is absent or ``null``."""
    diagnostics: list[Diagnostic] = []
    for name in sorted(schema.required_props):
        if feature.get(name) is not None:
            continue
        state = "null" if feature.has_property(name) else "absent"
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MISSING_REQUIRED_PROPERTY,
                feature.feature_type,
                feature.id,
                f"Required property {name!r} is {state}",
                field=name,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Stage 3: types and categories
# ---------------------------------------------------------------------------


def check_properties(
    feature: Feature,
    schema: FeatureSchema,
    registry: VocabularyRegistry,
    *,
    warn_unknown: bool = True,
) -> list[Diagnostic]:
    """Check every present, non-null property against its declaration."""
    checker = _PropertyChecker(feature, registry)
    for name in sorted(schema.properties):
        value = feature.get(name)
        if value is None:
            continue
        checker.check(schema.properties[name], value)

    if warn_unknown:
        for name in sorted(feature.properties):
            if name in schema.properties or name in PASSTHROUGH_PROPERTIES:
                continue
            checker.add(
                DiagnosticCode.UNKNOWN_PROPERTY,
                name,
                f"Property {name!r} is not declared for {feature.feature_type.value} features",
            )
    return checker.diagnostics


class _PropertyChecker:
    """Accumulates stage 3 diagnostics for one feature."""

    def __init__(self, feature: Feature, registry: VocabularyRegistry) -> None:
        self.feature = feature
        self.registry = registry
        self.diagnostics: list[Diagnostic] = []
        self._dispatch: dict[PropertyKind, Callable[[PropertySpec, object], None]] = {
            PropertyKind.STRING: self._string,
            PropertyKind.BOOLEAN: self._boolean,
            PropertyKind.INTEGER: self._integer,
            PropertyKind.CATEGORY: self._category,
            PropertyKind.DISPLAY_POINT: self._display_point,
            PropertyKind.REFERENCE: self._reference,
            PropertyKind.FEATURE_REFERENCE: self._feature_reference,
            PropertyKind.DOOR: self._door,
            PropertyKind.TEMPORALITY: self._temporality,
            PropertyKind.COUNTRY: self._country,
            PropertyKind.SUBDIVISION: self._subdivision,
        }

    def check(self, spec: PropertySpec, value: object) -> None:
        handler = self._dispatch.get(spec.kind)
        if handler is not None:
            handler(spec, value)

    def add(
        self,
        code: DiagnosticCode,
        field: str,
        message: str,
        *,
        index: int | None = None,
    ) -> None:
        self.diagnostics.append(
            Diagnostic.create(
                code,
                self.feature.feature_type,
                self.feature.id,
                message,
                field=field,
                index=index,
            )
        )

    def _wrong_type(
        self, field: str, expected: str, value: object, *, index: int | None = None
    ) -> None:
        self.add(
            DiagnosticCode.INVALID_PROPERTY_TYPE,
            field,
            f"{field} must be {expected}, got {_json_type(value)}",
            index=index,
        )

    # -- scalar kinds -------------------------------------------------------

    def _string(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, str):
            self._wrong_type(spec.name, "a string", value)

    def _boolean(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, bool):
            self._wrong_type(spec.name, "a boolean", value)

    def _integer(self, spec: PropertySpec, value: object) -> None:
        if not is_integer(value):
            self._wrong_type(spec.name, "an integer", value)

    def _country(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, str):
            self._wrong_type(spec.name, "a string", value)
        elif not COUNTRY_CODE_RE.fullmatch(value):
            self.add(
                DiagnosticCode.INVALID_PROPERTY_VALUE,
                spec.name,
                f"{spec.name} {value!r} is not an ISO 3166-1 alpha-2 country code",
            )

    def _subdivision(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, str):
            self._wrong_type(spec.name, "a string", value)
        elif not SUBDIVISION_CODE_RE.fullmatch(value):
            self.add(
                DiagnosticCode.INVALID_PROPERTY_VALUE,
                spec.name,
                f"{spec.name} {value!r} is not an ISO 3166-2 subdivision code",
            )

    # -- categories ---------------------------------------------------------

    def _category(self, spec: PropertySpec, value: object) -> None:
        if spec.category is None:
            return
        if spec.multiple and isinstance(value, list):
            for index, token in enumerate(value):
                self._token(spec.name, spec.category, token, index=index)
            return
        self._token(spec.name, spec.category, value)

    def _token(
        self,
        field: str,
        kind: CategoryKind,
        token: object,
        *,
        index: int | None = None,
    ) -> None:
        if isinstance(token, bool) or not isinstance(token, (str, int)):
            self._wrong_type(field, f"a {kind.value} category token", token, index=index)
            return
        if not self.registry.is_valid(kind, token):
            self.add(
                DiagnosticCode.INVALID_CATEGORY_VALUE,
                field,
                f"{token!r} is not a valid {kind.value} category",
                index=index,
            )

    # -- geometry-valued ----------------------------------------------------

    def _display_point(self, spec: PropertySpec, value: object) -> None:
        problem = display_point_problem(value)
        if problem is None:
            return
        code = (
            DiagnosticCode.INVALID_PROPERTY_VALUE
            if isinstance(value, dict) and value.get("type") == "Point"
            else DiagnosticCode.INVALID_PROPERTY_TYPE
        )
        self.add(code, spec.name, problem)

    # -- references ---------------------------------------------------------

    def _reference(self, spec: PropertySpec, value: object) -> None:
        if spec.reference is None:
            return
        if spec.reference.cardinality is Cardinality.ONE:
            if not isinstance(value, str):
                self._wrong_type(spec.name, "a feature id string", value)
            elif not value:
                self.add(DiagnosticCode.INVALID_PROPERTY_VALUE, spec.name, f"{spec.name} is empty")
            return

        if not isinstance(value, list):
            self._wrong_type(spec.name, "an array of feature ids", value)
            return
        if not value and spec.required:
            self.add(
                DiagnosticCode.INVALID_PROPERTY_VALUE,
                spec.name,
                f"{spec.name} must list at least one feature id",
            )
        for index, element in enumerate(value):
            if not isinstance(element, str) or not element:
                self._wrong_type(spec.name, "a feature id string", element, index=index)

    def _feature_reference(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, dict):
            self._wrong_type(spec.name, "a {id, feature_type} object", value)
            return
        ref_id = value.get("id")
        if not isinstance(ref_id, str) or not ref_id:
            self._wrong_type(spec.name, "a reference with a string id", ref_id)
        feature_type = value.get("feature_type")
        if not isinstance(feature_type, str):
            self._wrong_type(spec.name, "a reference with a string feature_type", feature_type)
        elif FeatureType.parse(feature_type) is None:
            self.add(
                DiagnosticCode.INVALID_PROPERTY_VALUE,
                spec.name,
                f"{spec.name} feature_type {feature_type!r} is not an IMDF feature type",
            )

    # -- structured values --------------------------------------------------

    def _door(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, dict):
            self._wrong_type(spec.name, "a door object", value)
            return
        door_type = value.get("type")
        if door_type is not None:
            self._token(spec.name, CategoryKind.DOOR_TYPE, door_type)
        automatic = value.get("automatic")
        if automatic is not None and not isinstance(automatic, bool):
            self._wrong_type(spec.name, "a door with boolean 'automatic'", automatic)
        material = value.get("material")
        if material is not None:
            self._token(spec.name, CategoryKind.DOOR_MATERIAL, material)

    def _temporality(self, spec: PropertySpec, value: object) -> None:
        if not isinstance(value, dict):
            self._wrong_type(spec.name, "a temporality object", value)
            return
        parsed = {}
        for key in TEMPORALITY_KEYS:
            raw = value.get(key)
            if raw is None:
                continue
            timestamp = parse_timestamp(raw)
            if timestamp is None:
                self.add(
                    DiagnosticCode.INVALID_PROPERTY_VALUE,
                    spec.name,
                    f"{spec.name}.{key} {raw!r} is not an ISO 8601 timestamp",
                )
                continue
            parsed[key] = timestamp
        if "start" in parsed and "end" in parsed and parsed["start"] > parsed["end"]:
            self.add(
                DiagnosticCode.INVALID_PROPERTY_VALUE,
                spec.name,
                f"{spec.name}.start is after {spec.name}.end",
            )


def _json_type(value: object) -> str:
    """JSON type name of a decoded value, for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
