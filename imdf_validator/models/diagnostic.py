"""Diagnostic records produced by the loader, resolver, and validator.

A ``Diagnostic`` is one reported anomaly: where it is (feature type,
feature id, property, array index), how bad it is (severity), and what
it is (code plus human-readable message).  Diagnostics are plain values;
ordering is defined by ``Diagnostic.sort_key`` so that reports over the
same archive are always byte-identical.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Severity(str, enum.Enum):
    """Diagnostic severity.  Only ``ERROR`` fails an archive."""

    ERROR = "error"
    WARNING = "warning"


class DiagnosticCode(str, enum.Enum):
    """Machine-readable diagnostic codes."""

    # Loader
    MALFORMED_COLLECTION = "MalformedCollection"
    MALFORMED_FEATURE = "MalformedFeature"
    TYPE_MISMATCH = "TypeMismatch"
    DUPLICATE_ID = "DuplicateId"
    # Geometry
    GEOMETRY_KIND_MISMATCH = "GeometryKindMismatch"
    MALFORMED_GEOMETRY = "MalformedGeometry"
    INVALID_GEOMETRY = "InvalidGeometry"
    DISPLAY_POINT_OUT_OF_BOUNDS = "DisplayPointOutOfBounds"
    # Properties
    MISSING_REQUIRED_PROPERTY = "MissingRequiredProperty"
    INVALID_PROPERTY_TYPE = "InvalidPropertyType"
    INVALID_PROPERTY_VALUE = "InvalidPropertyValue"
    INVALID_CATEGORY_VALUE = "InvalidCategoryValue"
    UNKNOWN_PROPERTY = "UnknownProperty"
    MALFORMED_LABELS = "MalformedLabels"
    # References
    DANGLING_REFERENCE = "DanglingReference"
    REFERENCE_TYPE_MISMATCH = "ReferenceTypeMismatch"


#: Codes that never flip the verdict.
WARNING_CODES: frozenset[DiagnosticCode] = frozenset(
    {
        DiagnosticCode.INVALID_GEOMETRY,
        DiagnosticCode.DISPLAY_POINT_OUT_OF_BOUNDS,
        DiagnosticCode.UNKNOWN_PROPERTY,
    }
)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One validation anomaly.

    Attributes:
        severity: ``error`` or ``warning``.
        feature_type: Collection the anomaly belongs to.
        feature_id: Offending feature id (empty for collection-level issues).
        code: Diagnostic code.
        message: Human-readable explanation.
        field: Property name, when the anomaly is property-scoped.
        index: Array element index, for element-wise reference checks.
    """

    severity: Severity
    feature_type: str
    feature_id: str
    code: DiagnosticCode
    message: str
    field: str | None = None
    index: int | None = None

    @classmethod
    def create(
        cls,
        code: DiagnosticCode,
        feature_type: str,
        feature_id: str,
        message: str,
        *,
        field: str | None = None,
        index: int | None = None,
    ) -> Diagnostic:
        """Build a diagnostic whose severity is implied by *code*."""
        severity = Severity.WARNING if code in WARNING_CODES else Severity.ERROR
        return cls(
            severity=severity,
            feature_type=str(feature_type),
            feature_id=feature_id,
            code=code,
            message=message,
            field=field,
            index=index,
        )

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def sort_key(self) -> tuple[str, str, str, int, str, str]:
        """Feature type, feature id, field, array index, then code and message."""
        return (
            self.feature_type,
            self.feature_id,
            self.field or "",
            -1 if self.index is None else self.index,
            self.code.value,
            self.message,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to the stable diagnostic payload."""
        return {
            "severity": self.severity.value,
            "feature_type": self.feature_type,
            "feature_id": self.feature_id,
            "field": self.field,
            "index": self.index,
            "code": self.code.value,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Diagnostic:
        """Deserialise from a diagnostic payload.

        Raises:
            ValueError: If severity or code is not a known value.
        """
        raw_index = data.get("index")
        raw_field = data.get("field")
        return cls(
            severity=Severity(str(data.get("severity", ""))),
            feature_type=str(data.get("feature_type", "")),
            feature_id=str(data.get("feature_id", "")),
            code=DiagnosticCode(str(data.get("code", ""))),
            message=str(data.get("message", "")),
            field=None if raw_field is None else str(raw_field),
            index=None if raw_index is None else int(raw_index),  # type: ignore[arg-type]
        )

    def to_text(self) -> str:
        """Render as a single human-readable line."""
        location = f"{self.feature_type}/{self.feature_id or '-'}"
        if self.field:
            location += f".{self.field}"
            if self.index is not None:
                location += f"[{self.index}]"
        return f"{self.severity.value.upper():<7} {self.code.value:<24} {location}: {self.message}"


def sort_diagnostics(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    """Return *diagnostics* in deterministic report order."""
    return sorted(diagnostics, key=lambda d: d.sort_key)
