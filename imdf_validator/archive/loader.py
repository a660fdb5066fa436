"""Archive loader: raw feature collections → indexed ``Archive``.

Ingestion is partial-failure tolerant: a bad collection or feature is
recorded as a diagnostic and skipped, and loading continues with the
rest of the archive.  The only exception raised is for a collection
keyed by a name that is not an IMDF feature type, which indicates the
caller's wiring is wrong rather than the archive's content.

Per collection:
- not a GeoJSON FeatureCollection   → ``MalformedCollection``
- feature not an object / no id     → ``MalformedFeature``
- declared type ≠ collection type   → ``TypeMismatch`` (excluded)
- ``(type, id)`` seen before        → ``DuplicateId`` (first occurrence wins)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from imdf_validator.archive.reader import read_archive
from imdf_validator.core.constants import GEOJSON_FEATURE_COLLECTION, FeatureType
from imdf_validator.core.exceptions import UnknownFeatureTypeError
from imdf_validator.models.archive import Archive
from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode, sort_diagnostics
from imdf_validator.models.feature import Feature, declared_feature_type

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("imdf_validator.archive.loader")


@dataclass(frozen=True)
class LoadResult:
    """Output of ``load_archive``.

    Attributes:
        archive: Indexed features that passed ingestion.
        diagnostics: Loader diagnostics in report order.
        name: Optional archive label carried into the report.
    """

    archive: Archive
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)
    name: str = ""


def load_archive(collections: Mapping[str, object], *, name: str = "") -> LoadResult:
    """Load raw GeoJSON collections keyed by feature type name.

    Args:
        collections: Feature type name → GeoJSON FeatureCollection object.
            Order of collections is irrelevant.
        name: Optional label for the archive.

    Returns:
        ``LoadResult`` with the indexed archive and loader diagnostics.

    Raises:
        UnknownFeatureTypeError: If a collection key is not an IMDF
            feature type.
    """
    resolved: list[tuple[FeatureType, object]] = []
    for key, collection in collections.items():
        feature_type = FeatureType.parse(key)
        if feature_type is None:
            raise UnknownFeatureTypeError(key)
        resolved.append((feature_type, collection))
    resolved.sort(key=lambda item: item[0].value)

    diagnostics: list[Diagnostic] = []
    accepted: list[Feature] = []
    seen: set[tuple[FeatureType, str]] = set()

    for feature_type, collection in resolved:
        features = _collection_features(feature_type, collection, diagnostics)
        if features is None:
            continue
        loaded = 0
        for index, raw in enumerate(features):
            feature = _load_feature(feature_type, index, raw, diagnostics)
            if feature is None:
                continue
            if feature.key in seen:
                diagnostics.append(
                    Diagnostic.create(
                        DiagnosticCode.DUPLICATE_ID,
                        feature_type,
                        feature.id,
                        f"Duplicate {feature_type.value} id at position {index}; "
                        "the first occurrence is kept",
                    )
                )
                continue
            seen.add(feature.key)
            accepted.append(feature)
            loaded += 1
        logger.debug(
            "Collection loaded | type=%s | features=%d | accepted=%d",
            feature_type.value,
            len(features),
            loaded,
        )

    archive = Archive.from_features(accepted)
    logger.info(
        "Archive loaded | name=%s | collections=%d | features=%d | diagnostics=%d",
        name or "-",
        len(resolved),
        len(archive),
        len(diagnostics),
    )
    return LoadResult(
        archive=archive,
        diagnostics=tuple(sort_diagnostics(diagnostics)),
        name=name,
    )


def load_archive_path(path: Path | str) -> LoadResult:
    """Read an archive directory or ``.zip`` and load it.

    Raises:
        ArchiveReadError: If the archive cannot be read or holds invalid JSON.
    """
    path = Path(path)
    return load_archive(read_archive(path), name=path.name)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _collection_features(
    feature_type: FeatureType,
    collection: object,
    diagnostics: list[Diagnostic],
) -> list[object] | None:
    """Return the raw features of *collection*, or ``None`` if it is malformed."""
    if not isinstance(collection, dict) or collection.get("type") != GEOJSON_FEATURE_COLLECTION:
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MALFORMED_COLLECTION,
                feature_type,
                "",
                f"The {feature_type.value} collection is not a GeoJSON FeatureCollection",
            )
        )
        return None

    features = collection.get("features")
    if not isinstance(features, list):
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MALFORMED_COLLECTION,
                feature_type,
                "",
                f"The {feature_type.value} collection has no 'features' array",
            )
        )
        return None
    return features


def _load_feature(
    feature_type: FeatureType,
    index: int,
    raw: object,
    diagnostics: list[Diagnostic],
) -> Feature | None:
    """Build one ``Feature``, recording a diagnostic and returning ``None`` on failure."""
    if not isinstance(raw, dict):
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MALFORMED_FEATURE,
                feature_type,
                "",
                f"Feature at position {index} is not a JSON object",
            )
        )
        return None

    raw_id = raw.get("id")
    feature_id = raw_id if isinstance(raw_id, str) else ""
    if not feature_id:
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MALFORMED_FEATURE,
                feature_type,
                "",
                f"Feature at position {index} has no string id (got {raw_id!r})",
            )
        )
        return None

    declared = declared_feature_type(raw)
    if declared != feature_type.value:
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.TYPE_MISMATCH,
                feature_type,
                feature_id,
                f"Feature declares feature_type {declared!r} inside the "
                f"{feature_type.value!r} collection",
            )
        )
        return None

    try:
        return Feature.from_dict(raw, source_index=index)
    except (TypeError, ValueError) as exc:
        diagnostics.append(
            Diagnostic.create(
                DiagnosticCode.MALFORMED_FEATURE,
                feature_type,
                feature_id,
                str(exc),
            )
        )
        return None
