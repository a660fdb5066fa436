"""Contract drift detection tests.

These tests verify that serialised model keys match the canonical payload
contracts defined in ``imdf_validator.models.contracts``.  If a key is
added/removed from a model's ``to_dict()`` without updating the contract
TypedDict, these tests will fail, preventing silent key drift between
the validator and the tooling that reads its reports.
"""

from __future__ import annotations

from typing import get_type_hints

from imdf_validator.core.constants import FeatureType
from imdf_validator.models.contracts import (
    DiagnosticPayload,
    FeaturePayload,
    FeatureReferencePayload,
    ReportPayload,
    ReportSummaryPayload,
)
from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode
from imdf_validator.models.feature import Feature, FeatureReference
from imdf_validator.models.report import ValidationReport


def _contract_keys(td: type) -> set[str]:
    """Extract the declared field names from a TypedDict class."""
    return set(get_type_hints(td).keys())


def _report() -> ValidationReport:
    diagnostic = Diagnostic.create(
        DiagnosticCode.DANGLING_REFERENCE, FeatureType.UNIT, "U1", "missing", field="level_id"
    )
    return ValidationReport(diagnostics=(diagnostic,), feature_count=1, archive_name="x")


# ---------------------------------------------------------------------------
# Feature ↔ FeaturePayload
# ---------------------------------------------------------------------------


class TestFeatureContract:
    """Feature.to_dict() keys must match FeaturePayload contract."""

    def test_keys_match(self) -> None:
        feature = Feature(id="U1", feature_type=FeatureType.UNIT)
        actual = set(feature.to_dict().keys())
        expected = _contract_keys(FeaturePayload)
        assert actual == expected, f"Drift detected: {actual.symmetric_difference(expected)}"

    def test_reference_keys_match(self) -> None:
        ref = FeatureReference(id="U1", feature_type=FeatureType.UNIT)
        assert set(ref.to_dict()) == _contract_keys(FeatureReferencePayload)


# ---------------------------------------------------------------------------
# Diagnostic ↔ DiagnosticPayload
# ---------------------------------------------------------------------------


class TestDiagnosticContract:
    """Diagnostic.to_dict() keys must match DiagnosticPayload contract."""

    def test_keys_match(self) -> None:
        diagnostic = Diagnostic.create(DiagnosticCode.DUPLICATE_ID, "unit", "U1", "dup")
        actual = set(diagnostic.to_dict().keys())
        expected = _contract_keys(DiagnosticPayload)
        assert actual == expected, f"Drift detected: {actual.symmetric_difference(expected)}"


# ---------------------------------------------------------------------------
# ValidationReport ↔ ReportPayload
# ---------------------------------------------------------------------------


class TestReportContract:
    """ValidationReport.to_dict() keys must match ReportPayload contract."""

    def test_top_level_keys_match(self) -> None:
        actual = set(_report().to_dict().keys())
        expected = set(ReportPayload.__annotations__)
        assert actual == expected, f"Drift detected: {actual.symmetric_difference(expected)}"

    def test_summary_keys_match(self) -> None:
        summary = _report().to_dict()["summary"]
        assert isinstance(summary, dict)
        assert set(summary) == _contract_keys(ReportSummaryPayload)

    def test_diagnostic_keys_match(self) -> None:
        diagnostics = _report().to_dict()["diagnostics"]
        assert isinstance(diagnostics, list)
        assert set(diagnostics[0]) == _contract_keys(DiagnosticPayload)
