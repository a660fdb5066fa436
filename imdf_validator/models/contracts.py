"""Canonical payload contracts for the validator's JSON boundaries.

Every dict the package emits (serialised features, diagnostics, report
documents) is defined here as a ``TypedDict``.  This module is the
single source of truth for key names; drift-detection tests compare the
models' ``to_dict()`` output against these declarations.

Design notes:
- ``TypedDict`` keeps the contracts free of runtime conversion.
- The report document uses the functional ``TypedDict`` form because its
  schema key (``$schema``) is not a valid identifier.
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Feature (archive loader output)
# ---------------------------------------------------------------------------


class FeaturePayload(TypedDict):
    """Serialised ``Feature`` (a GeoJSON feature with ``feature_type``)."""

    type: str
    id: str
    feature_type: str
    geometry: dict[str, Any] | None
    properties: dict[str, Any]


class FeatureReferencePayload(TypedDict):
    """Serialised ``FeatureReference``."""

    id: str
    feature_type: str


# ---------------------------------------------------------------------------
# Diagnostics and report
# ---------------------------------------------------------------------------


class DiagnosticPayload(TypedDict):
    """Serialised ``Diagnostic``."""

    severity: str
    feature_type: str
    feature_id: str
    field: str | None
    index: int | None
    code: str
    message: str


class ReportSummaryPayload(TypedDict):
    """Serialised ``ReportSummary``."""

    feature_count: int
    error_count: int
    warning_count: int
    by_code: dict[str, int]


ReportPayload = TypedDict(
    "ReportPayload",
    {
        "$schema": str,
        "archive": str,
        "passed": bool,
        "summary": ReportSummaryPayload,
        "diagnostics": list[DiagnosticPayload],
    },
)
"""Serialised ``ValidationReportRecord`` (``ValidationReport.to_dict()``)."""


# ---------------------------------------------------------------------------
# Error payload
# ---------------------------------------------------------------------------


class ErrorPayload(TypedDict):
    """Output of ``ImdfError.to_error_dict()``."""

    category: str
    code: str
    stage: str
    message: str
