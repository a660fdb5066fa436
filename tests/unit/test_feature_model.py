"""Tests for the Feature, FeatureReference, and Archive models."""

from __future__ import annotations

import pytest

from imdf_validator.core.constants import FeatureType
from imdf_validator.models.archive import Archive
from imdf_validator.models.feature import Feature, FeatureReference, declared_feature_type


class TestFeatureFromDict:
    """Feature.from_dict() reads GeoJSON feature objects."""

    def test_top_level_feature_type(self) -> None:
        feature = Feature.from_dict(
            {"id": "U1", "feature_type": "unit", "geometry": None, "properties": {"a": 1}},
            source_index=3,
        )
        assert feature.id == "U1"
        assert feature.feature_type is FeatureType.UNIT
        assert feature.properties == {"a": 1}
        assert feature.source_index == 3

    def test_feature_type_from_properties(self) -> None:
        feature = Feature.from_dict({"id": "L1", "properties": {"feature_type": "level"}})
        assert feature.feature_type is FeatureType.LEVEL

    def test_null_properties_become_empty(self) -> None:
        feature = Feature.from_dict({"id": "A1", "feature_type": "address", "properties": None})
        assert feature.properties == {}

    def test_non_string_id_rejected(self) -> None:
        with pytest.raises(TypeError, match="id must be a string"):
            Feature.from_dict({"id": 7, "feature_type": "unit"})

    def test_non_object_properties_rejected(self) -> None:
        with pytest.raises(TypeError, match="properties must be an object"):
            Feature.from_dict({"id": "U1", "feature_type": "unit", "properties": []})

    def test_non_object_geometry_rejected(self) -> None:
        with pytest.raises(TypeError, match="geometry"):
            Feature.from_dict({"id": "U1", "feature_type": "unit", "geometry": "POINT(0 0)"})

    def test_unknown_feature_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="not an IMDF feature type"):
            Feature.from_dict({"id": "X1", "feature_type": "parking_lot"})


class TestFeatureAccessors:
    """Property access helpers and serialisation."""

    def test_key_is_type_and_id(self) -> None:
        feature = Feature(id="U1", feature_type=FeatureType.UNIT)
        assert feature.key == (FeatureType.UNIT, "U1")

    def test_has_property_distinguishes_null_from_absent(self) -> None:
        feature = Feature(id="U1", feature_type=FeatureType.UNIT, properties={"name": None})
        assert feature.has_property("name")
        assert not feature.has_property("alt_name")
        assert feature.get("name") is None
        assert feature.get("alt_name", "fallback") == "fallback"

    def test_to_dict(self) -> None:
        feature = Feature(
            id="U1",
            feature_type=FeatureType.UNIT,
            geometry={"type": "Point", "coordinates": [0, 0]},
            properties={"category": "room"},
        )
        assert feature.to_dict() == {
            "type": "Feature",
            "id": "U1",
            "feature_type": "unit",
            "geometry": {"type": "Point", "coordinates": [0, 0]},
            "properties": {"category": "room"},
        }

    def test_is_immutable(self) -> None:
        feature = Feature(id="U1", feature_type=FeatureType.UNIT)
        with pytest.raises(AttributeError):
            feature.id = "U2"  # type: ignore[misc]

    def test_declared_feature_type_prefers_top_level(self) -> None:
        data = {"feature_type": "unit", "properties": {"feature_type": "level"}}
        assert declared_feature_type(data) == "unit"

    def test_declared_feature_type_missing(self) -> None:
        assert declared_feature_type({"properties": None}) is None


class TestFeatureReference:
    """FeatureReference.from_value() parses relationship endpoints."""

    def test_valid_reference(self) -> None:
        ref = FeatureReference.from_value({"id": "U1", "feature_type": "unit"})
        assert ref == FeatureReference(id="U1", feature_type=FeatureType.UNIT)
        assert ref.to_dict() == {"id": "U1", "feature_type": "unit"}

    @pytest.mark.parametrize(
        "value",
        [
            "U1",
            None,
            {"id": "U1"},
            {"id": 1, "feature_type": "unit"},
            {"id": "U1", "feature_type": "parking_lot"},
        ],
    )
    def test_malformed_values(self, value: object) -> None:
        assert FeatureReference.from_value(value) is None


class TestArchiveIndex:
    """Archive.from_features() builds the three read-only indexes."""

    def test_indexes(self) -> None:
        unit = Feature(id="X", feature_type=FeatureType.UNIT)
        level = Feature(id="X", feature_type=FeatureType.LEVEL)
        other = Feature(id="U2", feature_type=FeatureType.UNIT)
        archive = Archive.from_features([unit, level, other])

        assert len(archive) == 3
        assert archive.get(FeatureType.UNIT, "X") is unit
        assert archive.get(FeatureType.LEVEL, "X") is level
        assert archive.get(FeatureType.VENUE, "X") is None
        assert archive.features_of(FeatureType.UNIT) == (unit, other)
        assert archive.by_id["X"] == (unit, level)
        assert archive.feature_types == [FeatureType.LEVEL, FeatureType.UNIT]

    def test_features_iterate_in_type_order(self) -> None:
        venue = Feature(id="V1", feature_type=FeatureType.VENUE)
        address = Feature(id="A1", feature_type=FeatureType.ADDRESS)
        archive = Archive.from_features([venue, address])
        assert [f.id for f in archive.features()] == ["A1", "V1"]

    def test_indexes_are_read_only(self) -> None:
        archive = Archive.from_features([Feature(id="U1", feature_type=FeatureType.UNIT)])
        with pytest.raises(TypeError):
            archive.by_key[(FeatureType.UNIT, "U2")] = None  # type: ignore[index]

    def test_empty_archive(self) -> None:
        archive = Archive()
        assert len(archive) == 0
        assert list(archive.features()) == []
        assert archive.features_of(FeatureType.UNIT) == ()
