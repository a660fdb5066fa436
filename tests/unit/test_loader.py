"""Tests for the archive loader.

Covers:
- Indexing valid collections
- MalformedCollection / MalformedFeature / TypeMismatch / DuplicateId
- Unknown collection keys are fatal
- Loading continues past bad features
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from imdf_validator.archive.loader import load_archive, load_archive_path
from imdf_validator.core.constants import FeatureType
from imdf_validator.core.exceptions import ArchiveReadError, UnknownFeatureTypeError
from imdf_validator.models.diagnostic import DiagnosticCode, Severity


class TestLoadValid:
    """Well-formed collections are indexed without diagnostics."""

    def test_minimal_archive(self, minimal_collections: dict[str, Any]) -> None:
        result = load_archive(minimal_collections, name="mini")
        assert result.diagnostics == ()
        assert result.name == "mini"
        assert len(result.archive) == 2
        assert result.archive.get(FeatureType.UNIT, "U1") is not None
        assert result.archive.get(FeatureType.LEVEL, "L1") is not None

    def test_sample_archive_path(self, sample_archive_dir: Path) -> None:
        result = load_archive_path(sample_archive_dir)
        assert result.diagnostics == ()
        assert result.name == "sample_archive"
        assert len(result.archive.feature_types) == 16

    def test_source_index_recorded(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        result = load_archive(
            {"unit": make_collection(make_feature("unit", "U1"), make_feature("unit", "U2"))}
        )
        assert [f.source_index for f in result.archive.features_of(FeatureType.UNIT)] == [0, 1]

    def test_collection_order_irrelevant(self, minimal_collections: dict[str, Any]) -> None:
        reordered = dict(reversed(list(minimal_collections.items())))
        assert load_archive(reordered) == load_archive(minimal_collections)

    def test_logs_summary(
        self, minimal_collections: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="imdf_validator.archive.loader"):
            load_archive(minimal_collections, name="mini")
        assert "Archive loaded | name=mini | collections=2 | features=2" in caplog.text


class TestLoaderDiagnostics:
    """Bad collections and features become diagnostics, not exceptions."""

    def test_unknown_collection_key_fatal(self) -> None:
        with pytest.raises(UnknownFeatureTypeError, match="parking_lot"):
            load_archive({"parking_lot": {"type": "FeatureCollection", "features": []}})

    @pytest.mark.parametrize(
        "collection",
        [
            [],
            {"type": "Feature"},
            {"type": "FeatureCollection"},
            {"type": "FeatureCollection", "features": {}},
        ],
    )
    def test_malformed_collection(self, collection: object) -> None:
        result = load_archive({"unit": collection})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.MALFORMED_COLLECTION]
        assert result.diagnostics[0].feature_type == "unit"
        assert result.diagnostics[0].severity is Severity.ERROR
        assert len(result.archive) == 0

    def test_non_object_feature(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        result = load_archive({"unit": make_collection("oops", make_feature("unit", "U1"))})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.MALFORMED_FEATURE]
        assert "position 0" in result.diagnostics[0].message
        assert len(result.archive) == 1

    @pytest.mark.parametrize("raw_id", [None, "", 42])
    def test_missing_or_non_string_id(
        self,
        raw_id: object,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        feature = make_feature("unit", "U1")
        feature["id"] = raw_id
        result = load_archive({"unit": make_collection(feature)})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.MALFORMED_FEATURE]

    def test_type_mismatch_excluded(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        result = load_archive({"unit": make_collection(make_feature("level", "L1"))})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.TYPE_MISMATCH]
        diagnostic = result.diagnostics[0]
        assert diagnostic.feature_type == "unit"
        assert diagnostic.feature_id == "L1"
        assert len(result.archive) == 0

    def test_missing_feature_type_is_mismatch(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        feature = make_feature("unit", "U1")
        del feature["feature_type"]
        result = load_archive({"unit": make_collection(feature)})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.TYPE_MISMATCH]

    def test_malformed_properties(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        feature = make_feature("unit", "U1")
        feature["properties"] = ["category", "room"]
        result = load_archive({"unit": make_collection(feature)})
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.MALFORMED_FEATURE]
        assert result.diagnostics[0].feature_id == "U1"

    def test_duplicate_id_first_wins(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        first = make_feature("unit", "U1", {"category": "room"})
        second = make_feature("unit", "U1", {"category": "walkway"})
        result = load_archive({"unit": make_collection(first, second)})

        assert [d.code for d in result.diagnostics] == [DiagnosticCode.DUPLICATE_ID]
        assert "position 1" in result.diagnostics[0].message
        kept = result.archive.get(FeatureType.UNIT, "U1")
        assert kept is not None
        assert kept.get("category") == "room"
        assert len(result.archive.features_of(FeatureType.UNIT)) == 1

    def test_same_id_across_types_allowed(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        result = load_archive(
            {
                "unit": make_collection(make_feature("unit", "X")),
                "level": make_collection(make_feature("level", "X")),
            }
        )
        assert result.diagnostics == ()
        assert len(result.archive.by_id["X"]) == 2

    def test_bad_feature_does_not_halt(
        self,
        make_feature: Callable[..., dict[str, Any]],
        make_collection: Callable[..., dict[str, Any]],
    ) -> None:
        result = load_archive(
            {
                "unit": make_collection(
                    make_feature("unit", "U1"),
                    None,
                    make_feature("level", "L9"),
                    make_feature("unit", "U2"),
                ),
                "level": "not a collection",
            }
        )
        codes = sorted(d.code.value for d in result.diagnostics)
        assert codes == ["MalformedCollection", "MalformedFeature", "TypeMismatch"]
        assert {f.id for f in result.archive.features()} == {"U1", "U2"}


class TestLoadArchivePath:
    """load_archive_path() combines reading and loading."""

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ArchiveReadError):
            load_archive_path(tmp_path / "absent")
