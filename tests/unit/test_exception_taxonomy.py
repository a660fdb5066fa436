"""Tests for the unified exception taxonomy.

Validates:
- ImdfError hierarchy and structured attributes
- Category classification (configuration, archive, internal)
- ``to_error_dict()`` produces stable payload keys
- Concrete errors carry their offending value
"""

from __future__ import annotations

from typing import ClassVar, get_type_hints

import pytest

from imdf_validator.core.config import ConfigValidationError
from imdf_validator.core.exceptions import (
    ArchiveError,
    ArchiveReadError,
    ConfigurationError,
    ImdfError,
    UnknownCategoryKindError,
    UnknownFeatureTypeError,
)
from imdf_validator.models.contracts import ErrorPayload


class TestImdfErrorBase:
    """ImdfError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ImdfError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert str(err) == "boom"

    def test_custom_attributes(self) -> None:
        err = ImdfError("fail", stage="reader", code="READ_FAILED")
        assert err.stage == "reader"
        assert err.code == "READ_FAILED"

    def test_base_category_is_internal(self) -> None:
        assert ImdfError("x").category == "internal"

    def test_error_dict_keys_match_contract(self) -> None:
        payload = ImdfError("x", stage="s", code="C").to_error_dict()
        assert set(payload) == set(get_type_hints(ErrorPayload))

    def test_error_dict_values(self) -> None:
        payload = ConfigurationError("bad settings", stage="config").to_error_dict()
        assert payload == {
            "category": "configuration",
            "code": "CONFIGURATION_INVALID",
            "stage": "config",
            "message": "bad settings",
        }


class TestTaxonomyClassification:
    """Each concrete error lands in the right category."""

    CONFIGURATION_ERRORS: ClassVar[list[ImdfError]] = [
        UnknownFeatureTypeError("parking_lot"),
        UnknownCategoryKindError("colour"),
        ConfigValidationError("IMDF_MAX_WORKERS", 0, "must be >= 1"),
    ]

    ARCHIVE_ERRORS: ClassVar[list[ImdfError]] = [
        ArchiveReadError("/tmp/missing", "no such file or directory"),
    ]

    @pytest.mark.parametrize("err", CONFIGURATION_ERRORS, ids=lambda e: type(e).__name__)
    def test_configuration_errors(self, err: ImdfError) -> None:
        assert isinstance(err, ConfigurationError)
        assert err.category == "configuration"
        assert err.code

    @pytest.mark.parametrize("err", ARCHIVE_ERRORS, ids=lambda e: type(e).__name__)
    def test_archive_errors(self, err: ImdfError) -> None:
        assert isinstance(err, ArchiveError)
        assert err.category == "archive"
        assert err.stage == "reader"


class TestConcreteErrors:
    """Concrete errors expose the value that caused them."""

    def test_unknown_feature_type(self) -> None:
        err = UnknownFeatureTypeError("parking_lot")
        assert err.feature_type == "parking_lot"
        assert err.stage == "schema"
        assert err.code == "UNKNOWN_FEATURE_TYPE"
        assert "'parking_lot'" in err.message

    def test_unknown_category_kind(self) -> None:
        err = UnknownCategoryKindError("colour")
        assert err.kind == "colour"
        assert err.stage == "vocabulary"
        assert err.code == "UNKNOWN_CATEGORY_KIND"

    def test_archive_read_error_path(self) -> None:
        err = ArchiveReadError("/data/venue.zip", "not a zip archive")
        assert err.path == "/data/venue.zip"
        assert err.code == "ARCHIVE_READ_FAILED"
        assert err.message == "Cannot read IMDF archive /data/venue.zip: not a zip archive"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("IMDF_MAX_WORKERS", 0, "must be >= 1")
        assert err.key == "IMDF_MAX_WORKERS"
        assert err.value == 0
        assert err.message == "Invalid configuration IMDF_MAX_WORKERS=0: must be >= 1"
