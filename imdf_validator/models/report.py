"""Validation report: the output contract of a validation run.

``ValidationReport`` is the in-memory result (ordered diagnostics plus
verdict).  ``ValidationReportRecord`` is its pydantic JSON document,
written for tooling.  Both are deterministic: the same archive always
produces the same diagnostics in the same order and byte-identical JSON.

JSON document layout::

    {
      "$schema": "imdf-validation-report-v1",
      "archive": "venue.imdf",
      "passed": false,
      "summary": {"feature_count": 12, "error_count": 1, "warning_count": 0,
                  "by_code": {"DanglingReference": 1}},
      "diagnostics": [{"severity": "error", "feature_type": "unit", ...}]
    }
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode, Severity

# Schema version for forward compatibility
SCHEMA_VERSION = "imdf-validation-report-v1"


@dataclass(frozen=True)
class ValidationReport:
    """Ordered diagnostics and overall verdict for one archive.

    Attributes:
        diagnostics: Diagnostics in deterministic report order.
        feature_count: Number of features that entered validation.
        archive_name: Optional label for the validated archive.
    """

    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)
    feature_count: int = 0
    archive_name: str = ""

    @property
    def passed(self) -> bool:
        """``True`` iff no error-severity diagnostic exists."""
        return not any(d.is_error for d in self.diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        """Return diagnostics with *code*, in report order."""
        return [d for d in self.diagnostics if d.code is code]

    def for_feature(self, feature_type: str, feature_id: str) -> list[Diagnostic]:
        """Return diagnostics attached to one feature, in report order."""
        return [
            d
            for d in self.diagnostics
            if d.feature_type == str(feature_type) and d.feature_id == feature_id
        ]

    def code_counts(self) -> dict[str, int]:
        """Diagnostic count per code, keys sorted."""
        counts = Counter(d.code.value for d in self.diagnostics)
        return {code: counts[code] for code in sorted(counts)}

    def to_record(self) -> ValidationReportRecord:
        return ValidationReportRecord.from_report(self)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict with the ``$schema`` alias."""
        return self.to_record().to_dict()

    def to_json(self, *, indent: int = 2) -> str:
        return self.to_record().to_json(indent=indent)

    def to_text(self) -> str:
        """Render one line per diagnostic followed by a verdict line."""
        lines = [d.to_text() for d in self.diagnostics]
        verdict = "PASS" if self.passed else "FAIL"
        name = f" {self.archive_name}" if self.archive_name else ""
        lines.append(
            f"{verdict}{name}: {self.feature_count} feature(s), "
            f"{len(self.errors)} error(s), {len(self.warnings)} warning(s)"
        )
        return "\n".join(lines)


class DiagnosticRecord(BaseModel):
    """JSON form of a single ``Diagnostic``."""

    severity: Severity
    feature_type: str
    feature_id: str
    field: str | None = None
    index: int | None = None
    code: DiagnosticCode
    message: str


class ReportSummary(BaseModel):
    """Counts over the report's diagnostics.

    Attributes:
        feature_count: Features that entered validation.
        error_count: Error-severity diagnostics.
        warning_count: Warning-severity diagnostics.
        by_code: Diagnostic count per code (keys sorted).
    """

    feature_count: int = 0
    error_count: int = 0
    warning_count: int = 0
    by_code: dict[str, int] = Field(default_factory=dict)


class ValidationReportRecord(BaseModel):
    """Top-level JSON report document.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        archive: Label of the validated archive.
        passed: Overall verdict.
        summary: Diagnostic counts.
        diagnostics: Diagnostics in report order.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    archive: str = ""
    passed: bool = True
    summary: ReportSummary = Field(default_factory=ReportSummary)
    diagnostics: list[DiagnosticRecord] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_report(cls, report: ValidationReport) -> ValidationReportRecord:
        """Construct the JSON document from a ``ValidationReport``."""
        return cls(
            archive=report.archive_name,
            passed=report.passed,
            summary=ReportSummary(
                feature_count=report.feature_count,
                error_count=len(report.errors),
                warning_count=len(report.warnings),
                by_code=report.code_counts(),
            ),
            diagnostics=[DiagnosticRecord(**d.to_dict()) for d in report.diagnostics],
        )

    def to_report(self) -> ValidationReport:
        """Rebuild the in-memory report from a parsed JSON document."""
        return ValidationReport(
            diagnostics=tuple(
                Diagnostic.from_dict(d.model_dump(mode="json")) for d in self.diagnostics
            ),
            feature_count=self.summary.feature_count,
            archive_name=self.archive,
        )

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string using the ``$schema`` alias."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, mode="json")  # type: ignore[return-value]
