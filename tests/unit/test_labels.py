"""Tests for label well-formedness."""

from __future__ import annotations

from typing import Any

import pytest

from imdf_validator.core.constants import FeatureType
from imdf_validator.models.diagnostic import DiagnosticCode
from imdf_validator.models.feature import Feature
from imdf_validator.schema.tables import schema_for
from imdf_validator.validation.labels import check_labels, is_language_tag, label_problems


def _labels_of(feature_type: str, **properties: Any) -> list[tuple[DiagnosticCode, str | None]]:
    feature = Feature(id="F1", feature_type=FeatureType(feature_type), properties=properties)
    return [(d.code, d.field) for d in check_labels(feature, schema_for(feature_type))]


class TestLanguageTags:
    """BCP 47 tag syntax."""

    @pytest.mark.parametrize(
        "tag",
        ["en", "fr", "en-US", "zh-Hant", "zh-Hant-TW", "es-419", "sr-Latn-RS", "de-CH-1901", "x-private"],
    )
    def test_well_formed(self, tag: str) -> None:
        assert is_language_tag(tag)

    @pytest.mark.parametrize("tag", ["", "e", "english_US", "en-", "en US", "123", "en-US-"])
    def test_malformed(self, tag: str) -> None:
        assert not is_language_tag(tag)

    def test_non_string(self) -> None:
        assert not is_language_tag(None)


class TestLabelProblems:
    """label_problems() lists every defect."""

    def test_valid(self) -> None:
        assert label_problems({"en": "Lobby", "fr": "Hall"}) == []

    def test_not_an_object(self) -> None:
        assert len(label_problems("Lobby")) == 1

    def test_empty_object(self) -> None:
        assert label_problems({}) == ["labels must contain at least one entry"]

    def test_each_bad_entry_reported(self) -> None:
        problems = label_problems({"en_GB": "Lobby", "fr": "", "de": 3})
        assert len(problems) == 3


class TestCheckLabels:
    """check_labels() runs over every Labels property of a feature."""

    def test_valid_labels(self) -> None:
        assert _labels_of("level", name={"en": "Ground"}, short_name={"en": "G"}) == []

    def test_null_labels_skipped(self) -> None:
        assert _labels_of("unit", name=None, alt_name=None) == []

    def test_plain_string_name(self) -> None:
        assert _labels_of("unit", name="Store 1") == [(DiagnosticCode.MALFORMED_LABELS, "name")]

    def test_multiple_fields(self) -> None:
        assert _labels_of("kiosk", name={}, alt_name={"en_US": "Help"}) == [
            (DiagnosticCode.MALFORMED_LABELS, "alt_name"),
            (DiagnosticCode.MALFORMED_LABELS, "name"),
        ]

    def test_non_labels_properties_ignored(self) -> None:
        assert _labels_of("unit", category={"en": "room"}) == []
