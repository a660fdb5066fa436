"""In-memory index over the features of one IMDF archive.

Built once by the archive loader and read-only thereafter, so that
feature-type collections can be validated concurrently against it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from imdf_validator.core.constants import FeatureType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from imdf_validator.models.feature import Feature


@dataclass(frozen=True)
class Archive:
    """Indexed IMDF archive.

    Attributes:
        by_type: Feature type → features in collection order.
        by_key: ``(feature_type, id)`` → feature (first occurrence).
        by_id: id → every feature carrying that id, across types.
    """

    by_type: Mapping[FeatureType, tuple[Feature, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    by_key: Mapping[tuple[FeatureType, str], Feature] = field(
        default_factory=lambda: MappingProxyType({})
    )
    by_id: Mapping[str, tuple[Feature, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_features(cls, features: Iterable[Feature]) -> Archive:
        """Index *features*, which must already be free of duplicate keys."""
        by_type: dict[FeatureType, list[Feature]] = {}
        by_key: dict[tuple[FeatureType, str], Feature] = {}
        by_id: dict[str, list[Feature]] = {}
        for feature in features:
            by_type.setdefault(feature.feature_type, []).append(feature)
            by_key.setdefault(feature.key, feature)
            by_id.setdefault(feature.id, []).append(feature)
        return cls(
            by_type=MappingProxyType({ft: tuple(fs) for ft, fs in by_type.items()}),
            by_key=MappingProxyType(by_key),
            by_id=MappingProxyType({fid: tuple(fs) for fid, fs in by_id.items()}),
        )

    def get(self, feature_type: FeatureType, feature_id: str) -> Feature | None:
        """Return the feature with this ``(type, id)`` pair, if loaded."""
        return self.by_key.get((feature_type, feature_id))

    def features_of(self, feature_type: FeatureType) -> tuple[Feature, ...]:
        return self.by_type.get(feature_type, ())

    def features(self) -> Iterator[Feature]:
        """Iterate every feature, ordered by feature type name then collection order."""
        for feature_type in sorted(self.by_type, key=lambda ft: ft.value):
            yield from self.by_type[feature_type]

    @property
    def feature_types(self) -> list[FeatureType]:
        """Loaded feature types, sorted by name."""
        return sorted(self.by_type, key=lambda ft: ft.value)

    def __len__(self) -> int:
        return len(self.by_key)
