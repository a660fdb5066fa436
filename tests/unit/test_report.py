"""Tests for ValidationReport and its pydantic JSON record."""

from __future__ import annotations

import json

from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode, Severity, sort_diagnostics
from imdf_validator.models.report import (
    SCHEMA_VERSION,
    ValidationReport,
    ValidationReportRecord,
)


def _dangling() -> Diagnostic:
    return Diagnostic.create(
        DiagnosticCode.DANGLING_REFERENCE,
        "unit",
        "U1",
        "Reference 'L9' not found; expected a level feature",
        field="level_id",
    )


def _warning() -> Diagnostic:
    return Diagnostic.create(
        DiagnosticCode.UNKNOWN_PROPERTY, "unit", "U1", "Property 'colour' is not declared", field="colour"
    )


class TestDiagnostic:
    """Diagnostic severity, ordering, and rendering."""

    def test_severity_from_code(self) -> None:
        assert _dangling().severity is Severity.ERROR
        assert _warning().severity is Severity.WARNING

    def test_sort_order(self) -> None:
        a = Diagnostic.create(DiagnosticCode.DUPLICATE_ID, "level", "L1", "dup")
        b = Diagnostic.create(DiagnosticCode.DANGLING_REFERENCE, "unit", "U1", "x", field="level_id")
        c = Diagnostic.create(DiagnosticCode.DANGLING_REFERENCE, "unit", "U1", "x", field="a", index=2)
        d = Diagnostic.create(DiagnosticCode.DANGLING_REFERENCE, "unit", "U1", "x", field="a", index=0)
        e = Diagnostic.create(DiagnosticCode.MISSING_REQUIRED_PROPERTY, "unit", "U1", "x")
        assert sort_diagnostics([b, c, a, e, d]) == [a, e, d, c, b]

    def test_to_text(self) -> None:
        line = _dangling().to_text()
        assert line.startswith("ERROR   DanglingReference")
        assert "unit/U1.level_id:" in line

    def test_to_text_with_index(self) -> None:
        diagnostic = Diagnostic.create(
            DiagnosticCode.DANGLING_REFERENCE, "footprint", "F1", "x", field="building_ids", index=1
        )
        assert "footprint/F1.building_ids[1]: x" in diagnostic.to_text()

    def test_dict_round_trip(self) -> None:
        diagnostic = _dangling()
        assert Diagnostic.from_dict(diagnostic.to_dict()) == diagnostic


class TestValidationReport:
    """Verdict and accessors."""

    def test_empty_report_passes(self) -> None:
        report = ValidationReport()
        assert report.passed
        assert report.errors == []

    def test_warnings_do_not_fail(self) -> None:
        report = ValidationReport(diagnostics=(_warning(),))
        assert report.passed
        assert report.warnings == [_warning()]

    def test_error_fails(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(), _warning()))
        assert not report.passed
        assert report.errors == [_dangling()]

    def test_by_code_and_feature(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(), _warning()))
        assert report.by_code(DiagnosticCode.DANGLING_REFERENCE) == [_dangling()]
        assert len(report.for_feature("unit", "U1")) == 2
        assert report.for_feature("level", "U1") == []

    def test_code_counts_sorted(self) -> None:
        report = ValidationReport(diagnostics=(_warning(), _dangling(), _dangling()))
        assert list(report.code_counts().items()) == [
            ("DanglingReference", 2),
            ("UnknownProperty", 1),
        ]

    def test_to_text_verdict_line(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(),), feature_count=2, archive_name="mini")
        lines = report.to_text().splitlines()
        assert len(lines) == 2
        assert lines[-1] == "FAIL mini: 2 feature(s), 1 error(s), 0 warning(s)"

    def test_to_text_pass(self) -> None:
        assert ValidationReport(feature_count=3).to_text() == "PASS: 3 feature(s), 0 error(s), 0 warning(s)"


class TestReportRecord:
    """JSON document produced through pydantic."""

    def test_to_dict_layout(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(),), feature_count=2, archive_name="mini")
        data = report.to_dict()
        assert data["$schema"] == SCHEMA_VERSION
        assert data["archive"] == "mini"
        assert data["passed"] is False
        assert data["summary"] == {
            "feature_count": 2,
            "error_count": 1,
            "warning_count": 0,
            "by_code": {"DanglingReference": 1},
        }
        assert data["diagnostics"] == [_dangling().to_dict()]

    def test_json_parses(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(),), feature_count=2)
        parsed = json.loads(report.to_json())
        assert parsed["diagnostics"][0]["code"] == "DanglingReference"
        assert parsed["diagnostics"][0]["severity"] == "error"

    def test_json_is_stable(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(), _warning()), feature_count=2)
        assert report.to_json() == report.to_json()

    def test_record_from_json(self) -> None:
        report = ValidationReport(diagnostics=(_dangling(), _warning()), feature_count=2, archive_name="x")
        record = ValidationReportRecord.model_validate_json(report.to_json())
        assert record.schema_version == SCHEMA_VERSION
        assert record.to_report() == report
