"""Tests for reading archives from directories and zip files."""

from __future__ import annotations

import json
import logging
import zipfile
from pathlib import Path

import pytest

from imdf_validator.archive.reader import collection_name, read_archive
from imdf_validator.core.exceptions import ArchiveReadError

EMPTY_COLLECTION = {"type": "FeatureCollection", "features": []}


def _write_zip(path: Path, members: dict[str, str]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in members.items():
            zf.writestr(name, content)
    return path


class TestCollectionName:
    """Member names map to feature types."""

    @pytest.mark.parametrize(
        ("member", "expected"),
        [
            ("unit.geojson", "unit"),
            ("venue/level.geojson", "level"),
            ("manifest.json", None),
            ("unit.json", None),
            ("parking.geojson", None),
            ("Unit.geojson", None),
        ],
    )
    def test_names(self, member: str, expected: str | None) -> None:
        assert collection_name(member) == expected


class TestReadDirectory:
    """Reading an unpacked archive directory."""

    def test_sample_archive(self, sample_archive_dir: Path) -> None:
        collections = read_archive(sample_archive_dir)
        assert len(collections) == 16
        assert list(collections) == sorted(collections)
        assert "manifest" not in collections

    def test_skips_and_logs_other_members(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / "unit.geojson").write_text(json.dumps(EMPTY_COLLECTION), encoding="utf-8")
        (tmp_path / "manifest.json").write_text("{}", encoding="utf-8")
        (tmp_path / "notes").mkdir()
        with caplog.at_level(logging.WARNING, logger="imdf_validator.archive.reader"):
            collections = read_archive(tmp_path)
        assert collections == {"unit": EMPTY_COLLECTION}
        assert "member=manifest.json" in caplog.text

    def test_accepts_utf8_bom(self, tmp_path: Path) -> None:
        (tmp_path / "unit.geojson").write_bytes(
            b"\xef\xbb\xbf" + json.dumps(EMPTY_COLLECTION).encode("utf-8")
        )
        assert read_archive(tmp_path) == {"unit": EMPTY_COLLECTION}

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "unit.geojson").write_text("{not json", encoding="utf-8")
        with pytest.raises(ArchiveReadError, match="invalid JSON"):
            read_archive(tmp_path)

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ArchiveReadError, match="no such file or directory") as exc_info:
            read_archive(tmp_path / "absent")
        assert exc_info.value.path.endswith("absent")

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert read_archive(tmp_path) == {}


class TestReadZip:
    """Reading a zipped archive."""

    def test_reads_members(self, tmp_path: Path) -> None:
        path = _write_zip(
            tmp_path / "venue.imdf.zip",
            {
                "unit.geojson": json.dumps(EMPTY_COLLECTION),
                "level.geojson": json.dumps(EMPTY_COLLECTION),
                "manifest.json": "{}",
            },
        )
        collections = read_archive(path)
        assert list(collections) == ["level", "unit"]

    def test_nested_members(self, tmp_path: Path) -> None:
        path = _write_zip(
            tmp_path / "venue.zip",
            {"venue/unit.geojson": json.dumps(EMPTY_COLLECTION)},
        )
        assert read_archive(path) == {"unit": EMPTY_COLLECTION}

    def test_duplicate_collection_raises(self, tmp_path: Path) -> None:
        path = _write_zip(
            tmp_path / "venue.zip",
            {
                "a/unit.geojson": json.dumps(EMPTY_COLLECTION),
                "b/unit.geojson": json.dumps(EMPTY_COLLECTION),
            },
        )
        with pytest.raises(ArchiveReadError, match="more than one member"):
            read_archive(path)

    def test_not_a_zip_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "venue.zip"
        path.write_text("plain text", encoding="utf-8")
        with pytest.raises(ArchiveReadError, match="not a zip archive"):
            read_archive(path)

    def test_invalid_json_member_raises(self, tmp_path: Path) -> None:
        path = _write_zip(tmp_path / "venue.zip", {"unit.geojson": "[1, 2"})
        with pytest.raises(ArchiveReadError) as exc_info:
            read_archive(path)
        assert "unit.geojson" in exc_info.value.path
