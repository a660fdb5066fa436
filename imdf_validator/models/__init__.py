"""Data models and schemas.

Defines the data structures used throughout the validator:
- Feature: One loaded IMDF feature (immutable)
- FeatureReference: Polymorphic ``{id, feature_type}`` reference
- Archive: Read-only index over all loaded features
- Diagnostic: One reported anomaly with severity and location
- ValidationReport: Ordered diagnostics plus verdict
"""

from imdf_validator.models.archive import Archive
from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode, Severity
from imdf_validator.models.feature import Feature, FeatureReference
from imdf_validator.models.report import ValidationReport, ValidationReportRecord

__all__ = [
    "Archive",
    "Diagnostic",
    "DiagnosticCode",
    "Feature",
    "FeatureReference",
    "Severity",
    "ValidationReport",
    "ValidationReportRecord",
]
