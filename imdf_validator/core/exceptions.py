"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the validator.  Data
problems inside an archive are never raised: they are accumulated as
``Diagnostic`` records.  Exceptions are reserved for conditions under
which no trustworthy report can be produced at all.

Taxonomy categories
-------------------
- ``ConfigurationError`` : the validator's own configuration is
  inconsistent (unknown feature type, undefined category kind, bad
  settings).  Always aborts the run.
- ``ArchiveError``       : the input archive cannot be read or parsed
  as JSON, so there is nothing to validate.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and tooling.
"""

from __future__ import annotations


class ImdfError(Exception):
    """Base exception for all validator-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"schema"``, ``"vocabulary"``, ``"reader"``).
        code: Machine-readable error code (e.g. ``"UNKNOWN_FEATURE_TYPE"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ConfigurationError):
            return "configuration"
        if isinstance(self, ArchiveError):
            return "archive"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ConfigurationError(ImdfError):
    """The validator's schema, vocabulary or settings are inconsistent. Fatal."""

    default_code = "CONFIGURATION_INVALID"


class ArchiveError(ImdfError):
    """The input archive cannot be read at all. Fatal for the run."""

    default_stage = "reader"
    default_code = "ARCHIVE_INVALID"


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class UnknownFeatureTypeError(ConfigurationError):
    """A feature type name is absent from the schema table.

    Attributes:
        feature_type: The offending feature type name.
    """

    default_stage = "schema"
    default_code = "UNKNOWN_FEATURE_TYPE"

    def __init__(self, feature_type: object) -> None:
        self.feature_type = feature_type
        super().__init__(f"Unknown IMDF feature type: {feature_type!r}")


class UnknownCategoryKindError(ConfigurationError):
    """The vocabulary registry was queried for an undefined category kind.

    Attributes:
        kind: The offending category kind.
    """

    default_stage = "vocabulary"
    default_code = "UNKNOWN_CATEGORY_KIND"

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Vocabulary registry has no category kind {kind!r}")


class ArchiveReadError(ArchiveError):
    """Raised when an archive path is missing, unreadable, or not JSON.

    Attributes:
        path: Filesystem path (or archive member) that failed.
    """

    default_code = "ARCHIVE_READ_FAILED"

    def __init__(self, path: object, message: str) -> None:
        self.path = str(path)
        super().__init__(f"Cannot read IMDF archive {self.path}: {message}")
