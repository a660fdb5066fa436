"""Shared pytest fixtures for the IMDF validator test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
SAMPLE_ARCHIVE_DIR = DATA_DIR / "sample_archive"

LEVEL_ID = "L1"
UNIT_ID = "U1"

# Unit square ~90 m on a side around (-122.0, 37.0)
SQUARE = [[[-122.0005, 36.9995], [-121.9995, 36.9995], [-121.9995, 37.0005], [-122.0005, 37.0005], [-122.0005, 36.9995]]]


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def sample_archive_dir() -> Path:
    """Path to a complete, valid archive covering all 16 feature types."""
    return SAMPLE_ARCHIVE_DIR


@pytest.fixture()
def sample_collections(sample_archive_dir: Path) -> dict[str, object]:
    """The sample archive's collections, keyed by feature type name."""
    return {
        path.name.removesuffix(".geojson"): json.loads(path.read_text(encoding="utf-8"))
        for path in sorted(sample_archive_dir.glob("*.geojson"))
    }


# ---------------------------------------------------------------------------
# GeoJSON builders
# ---------------------------------------------------------------------------


@pytest.fixture()
def polygon() -> dict[str, Any]:
    """A valid GeoJSON Polygon around (-122.0, 37.0)."""
    return {"type": "Polygon", "coordinates": SQUARE}


@pytest.fixture()
def make_feature() -> Callable[..., dict[str, Any]]:
    """Factory for raw GeoJSON feature objects.

    Geometry defaults to the shared square polygon; pass ``geometry=None``
    for null geometry.
    """

    def _make(
        feature_type: str,
        feature_id: str,
        properties: dict[str, Any] | None = None,
        geometry: dict[str, Any] | None | str = "default",
    ) -> dict[str, Any]:
        return {
            "type": "Feature",
            "id": feature_id,
            "feature_type": feature_type,
            "geometry": {"type": "Polygon", "coordinates": SQUARE} if geometry == "default" else geometry,
            "properties": dict(properties or {}),
        }

    return _make


@pytest.fixture()
def make_collection() -> Callable[..., dict[str, Any]]:
    """Factory for GeoJSON FeatureCollection objects."""

    def _make(*features: dict[str, Any]) -> dict[str, Any]:
        return {"type": "FeatureCollection", "features": list(features)}

    return _make


@pytest.fixture()
def level_properties() -> dict[str, Any]:
    """Complete, valid properties for a level feature."""
    return {
        "category": "unspecified",
        "outdoor": False,
        "ordinal": 0,
        "name": {"en": "Ground Floor"},
        "short_name": {"en": "G"},
    }


@pytest.fixture()
def unit_properties() -> dict[str, Any]:
    """Complete, valid properties for a unit on level ``L1``."""
    return {"category": "room", "level_id": LEVEL_ID}


@pytest.fixture()
def minimal_collections(
    make_feature: Callable[..., dict[str, Any]],
    make_collection: Callable[..., dict[str, Any]],
    level_properties: dict[str, Any],
    unit_properties: dict[str, Any],
) -> dict[str, Any]:
    """Level ``L1`` plus unit ``U1`` referencing it: the smallest passing archive."""
    return {
        "level": make_collection(make_feature("level", LEVEL_ID, level_properties)),
        "unit": make_collection(make_feature("unit", UNIT_ID, unit_properties)),
    }
