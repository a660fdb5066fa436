"""Validator: runs every stage over a loaded archive and builds the report.

Per feature, stages run in a fixed order and none short-circuits another:

1. geometry kind (plus buildability and validity)
2. required property presence
3. property types, categories, and unknown keys
4. references (``ReferenceResolver``)
5. label well-formedness
6. display-point containment

Feature-type collections are independent once the archive index exists,
so they are validated concurrently in a thread pool bounded by
``ValidatorConfig.max_workers``.  With ``max_workers=1`` everything runs
in the calling thread.  Per-type results are merged with the loader
diagnostics and sorted, so the report does not depend on scheduling.

Malformed input never raises; only configuration problems
(``ConfigurationError`` and subclasses) abort a run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from imdf_validator.archive.loader import LoadResult
from imdf_validator.core.config import ValidatorConfig
from imdf_validator.models.diagnostic import sort_diagnostics
from imdf_validator.models.report import ValidationReport
from imdf_validator.schema.tables import schema_for
from imdf_validator.schema.vocabulary import VocabularyRegistry
from imdf_validator.validation.geometry import check_display_point, check_geometry
from imdf_validator.validation.labels import check_labels
from imdf_validator.validation.properties import check_properties, check_required
from imdf_validator.validation.resolver import ReferenceResolver

if TYPE_CHECKING:
    from imdf_validator.core.constants import FeatureType
    from imdf_validator.models.archive import Archive
    from imdf_validator.models.diagnostic import Diagnostic
    from imdf_validator.models.feature import Feature

logger = logging.getLogger("imdf_validator.validation.validator")


class Validator:
    """Validate loaded IMDF archives against the schema table.

    Args:
        config: Validator configuration; defaults to ``ValidatorConfig()``.
        registry: Vocabulary registry; defaults to the YAML feed named by
            ``config.vocabulary_file``, else the built-in tables.

    Raises:
        ConfigurationError: If the vocabulary file cannot be loaded.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        registry: VocabularyRegistry | None = None,
    ) -> None:
        self.config = config or ValidatorConfig()
        if registry is None:
            if self.config.vocabulary_file:
                registry = VocabularyRegistry.from_file(self.config.vocabulary_file)
            else:
                registry = VocabularyRegistry.default()
        self.registry = registry

    def validate(self, source: Archive | LoadResult, *, name: str = "") -> ValidationReport:
        """Validate an archive (or a loader result) and return its report.

        Args:
            source: An indexed ``Archive``, or the ``LoadResult`` it came
                from, whose loader diagnostics are merged into the report.
            name: Archive label; defaults to ``LoadResult.name``.
        """
        if isinstance(source, LoadResult):
            archive = source.archive
            diagnostics: list[Diagnostic] = list(source.diagnostics)
            name = name or source.name
        else:
            archive = source
            diagnostics = []

        resolver = ReferenceResolver(archive)
        feature_types = archive.feature_types

        if self.config.max_workers == 1 or len(feature_types) <= 1:
            for feature_type in feature_types:
                diagnostics.extend(self._validate_type(archive, resolver, feature_type))
        else:
            workers = min(self.config.max_workers, len(feature_types))
            with ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix="imdf-validate"
            ) as executor:
                futures = [
                    executor.submit(self._validate_type, archive, resolver, feature_type)
                    for feature_type in feature_types
                ]
                for future in futures:
                    diagnostics.extend(future.result())

        report = ValidationReport(
            diagnostics=tuple(sort_diagnostics(diagnostics)),
            feature_count=len(archive),
            archive_name=name,
        )
        logger.info(
            "Validation complete | archive=%s | features=%d | errors=%d | warnings=%d | passed=%s",
            name or "-",
            report.feature_count,
            len(report.errors),
            len(report.warnings),
            report.passed,
        )
        return report

    def validate_feature(self, feature: Feature, resolver: ReferenceResolver) -> list[Diagnostic]:
        """Run every stage over one feature, in order."""
        schema = schema_for(feature.feature_type)

        diagnostics, built = check_geometry(
            feature, schema, check_validity=self.config.check_geometry_validity
        )
        diagnostics.extend(check_required(feature, schema))
        diagnostics.extend(
            check_properties(
                feature,
                schema,
                self.registry,
                warn_unknown=self.config.warn_unknown_properties,
            )
        )
        reference_diagnostics = resolver.check_feature(feature)
        diagnostics.extend(reference_diagnostics)
        diagnostics.extend(check_labels(feature, schema))
        diagnostics.extend(
            check_display_point(
                feature,
                schema,
                built,
                tolerance_m=self.config.display_point_tolerance_m,
            )
        )
        return diagnostics

    def _validate_type(
        self,
        archive: Archive,
        resolver: ReferenceResolver,
        feature_type: FeatureType,
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        features = archive.features_of(feature_type)
        for feature in features:
            diagnostics.extend(self.validate_feature(feature, resolver))
        logger.debug(
            "Collection validated | type=%s | features=%d | diagnostics=%d",
            feature_type.value,
            len(features),
            len(diagnostics),
        )
        return diagnostics


def validate_archive(
    source: Archive | LoadResult,
    *,
    config: ValidatorConfig | None = None,
    registry: VocabularyRegistry | None = None,
    name: str = "",
) -> ValidationReport:
    """Validate *source* with a one-off ``Validator``.

    See ``Validator.validate``.
    """
    return Validator(config=config, registry=registry).validate(source, name=name)
