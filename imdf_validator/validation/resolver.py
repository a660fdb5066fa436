"""Reference resolver: checks identifier references against the archive index.

For every feature and every reference property its schema declares,
each referenced id is looked up by ``(feature_type, id)`` in the
read-only ``Archive`` index:

- found under an expected target type     → ``ResolvedReference``
- found only under other feature types    → ``ReferenceTypeMismatch``
- not found anywhere in the archive       → ``DanglingReference``

``null`` values are skipped: a nullable reference is valid when null,
and a null required reference is reported once, by the
required-property stage.  Values of the wrong JSON shape are skipped
too; the property stage reports those.  Arrays are resolved
element-wise and duplicate entries are not an error.

Diagnostics are ordered by feature type, feature id, field name, and
array index, so repeated runs produce identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode, sort_diagnostics
from imdf_validator.models.feature import FeatureReference
from imdf_validator.schema.tables import Cardinality, schema_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from imdf_validator.core.constants import FeatureType
    from imdf_validator.models.archive import Archive
    from imdf_validator.models.feature import Feature
    from imdf_validator.schema.tables import ReferenceSpec

logger = logging.getLogger("imdf_validator.validation.resolver")


@dataclass(frozen=True, slots=True)
class ResolvedReference:
    """A reference occurrence that resolved to a loaded feature.

    Attributes:
        source: Feature holding the reference.
        field: Reference property name.
        index: Array element index (``None`` for single-valued fields).
        target: The feature the reference resolved to.
    """

    source: Feature
    field: str
    index: int | None
    target: Feature


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved handles and reference diagnostics for a set of features."""

    resolved: tuple[ResolvedReference, ...] = field(default_factory=tuple)
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


class ReferenceResolver:
    """Resolve reference properties against one archive's id index."""

    def __init__(self, archive: Archive) -> None:
        self._archive = archive

    def resolve(self, features: Iterable[Feature] | None = None) -> ResolutionResult:
        """Resolve every reference occurrence of *features*.

        Args:
            features: Features to resolve; defaults to the whole archive.

        Raises:
            UnknownFeatureTypeError: If a feature's type has no schema entry.
        """
        if features is None:
            features = self._archive.features()

        resolved: list[ResolvedReference] = []
        diagnostics: list[Diagnostic] = []
        for feature in features:
            feature_resolved, feature_diagnostics = self.resolve_feature(feature)
            resolved.extend(feature_resolved)
            diagnostics.extend(feature_diagnostics)

        return ResolutionResult(
            resolved=tuple(resolved),
            diagnostics=tuple(sort_diagnostics(diagnostics)),
        )

    def resolve_feature(
        self, feature: Feature
    ) -> tuple[list[ResolvedReference], list[Diagnostic]]:
        """Resolve the reference properties of a single feature."""
        resolved: list[ResolvedReference] = []
        diagnostics = self._walk(feature, resolved)
        return resolved, diagnostics

    def check_feature(self, feature: Feature) -> list[Diagnostic]:
        """Return the reference diagnostics of a single feature.

        Same checks as :meth:`resolve_feature`, without collecting the
        resolved handles.
        """
        return self._walk(feature, None)

    # -- internals ----------------------------------------------------------

    def _walk(
        self, feature: Feature, resolved: list[ResolvedReference] | None
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        references = schema_for(feature.feature_type).references

        for name in sorted(references):
            spec = references[name]
            value = feature.get(name)
            if value is None:
                continue
            for index, ref_id, declared_type in _occurrences(value, spec):
                targets = spec.targets
                if declared_type is not None:
                    if declared_type not in targets:
                        diagnostics.append(
                            _type_mismatch(feature, name, index, ref_id, declared_type, spec)
                        )
                        continue
                    targets = frozenset({declared_type})
                target = self._lookup(ref_id, targets)
                if target is not None:
                    if resolved is not None:
                        resolved.append(ResolvedReference(feature, name, index, target))
                    continue
                diagnostics.append(self._unresolved(feature, name, index, ref_id, targets))

        return diagnostics

    def _lookup(self, ref_id: str, targets: frozenset[FeatureType]) -> Feature | None:
        for target_type in sorted(targets, key=lambda ft: ft.value):
            target = self._archive.get(target_type, ref_id)
            if target is not None:
                return target
        return None

    def _unresolved(
        self,
        feature: Feature,
        name: str,
        index: int | None,
        ref_id: str,
        targets: frozenset[FeatureType],
    ) -> Diagnostic:
        expected = _type_names(targets)
        found = sorted({f.feature_type.value for f in self._archive.by_id.get(ref_id, ())})
        if found:
            return Diagnostic.create(
                DiagnosticCode.REFERENCE_TYPE_MISMATCH,
                feature.feature_type,
                feature.id,
                f"Reference {ref_id!r} resolves to {', '.join(found)}, expected {expected}",
                field=name,
                index=index,
            )
        return Diagnostic.create(
            DiagnosticCode.DANGLING_REFERENCE,
            feature.feature_type,
            feature.id,
            f"Reference {ref_id!r} not found; expected a {expected} feature",
            field=name,
            index=index,
        )


def _occurrences(
    value: object, spec: ReferenceSpec
) -> list[tuple[int | None, str, FeatureType | None]]:
    """Return ``(index, id, declared_type)`` for each well-formed reference in *value*."""
    if spec.polymorphic:
        ref = FeatureReference.from_value(value)
        return [] if ref is None else [(None, ref.id, ref.feature_type)]
    if spec.cardinality is Cardinality.MANY:
        if not isinstance(value, list):
            return []
        return [(i, v, None) for i, v in enumerate(value) if isinstance(v, str)]
    if isinstance(value, str):
        return [(None, value, None)]
    return []


def _type_mismatch(
    feature: Feature,
    name: str,
    index: int | None,
    ref_id: str,
    declared_type: FeatureType,
    spec: ReferenceSpec,
) -> Diagnostic:
    return Diagnostic.create(
        DiagnosticCode.REFERENCE_TYPE_MISMATCH,
        feature.feature_type,
        feature.id,
        f"Reference {ref_id!r} declares feature_type {declared_type.value!r}, "
        f"expected {_type_names(spec.targets)}",
        field=name,
        index=index,
    )


def _type_names(targets: frozenset[FeatureType]) -> str:
    return " or ".join(sorted(t.value for t in targets))
