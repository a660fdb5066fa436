"""Label checks: well-formedness of ``Labels`` properties.

A Labels value maps IETF BCP 47 language tags to display strings.  A
non-null Labels value must be an object with at least one entry, every
key a well-formed language tag and every value a non-empty string.
Each violation is one ``MalformedLabels`` error on the property.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from imdf_validator.models.diagnostic import Diagnostic, DiagnosticCode
from imdf_validator.schema.tables import PropertyKind

if TYPE_CHECKING:
    from imdf_validator.models.feature import Feature
    from imdf_validator.schema.tables import FeatureSchema

# RFC 5646 language tag (langtag or private use); grandfathered tags are not accepted
LANGUAGE_TAG_RE = re.compile(
    r"""
    (?:
        (?:[A-Za-z]{2,3}(?:-[A-Za-z]{3}){0,3}|[A-Za-z]{4,8})   # language
        (?:-[A-Za-z]{4})?                                    # script
        (?:-(?:[A-Za-z]{2}|[0-9]{3}))?                       # region
        (?:-(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}))*       # variants
        (?:-[0-9A-WY-Za-wy-z](?:-[A-Za-z0-9]{2,8})+)*        # extensions
        (?:-[Xx](?:-[A-Za-z0-9]{1,8})+)?                     # private use
    |
        [Xx](?:-[A-Za-z0-9]{1,8})+
    )
    """,
    re.VERBOSE,
)


def is_language_tag(tag: object) -> bool:
    """Whether *tag* is a well-formed BCP 47 language tag."""
    return isinstance(tag, str) and LANGUAGE_TAG_RE.fullmatch(tag) is not None


def check_labels(feature: Feature, schema: FeatureSchema) -> list[Diagnostic]:
    """Check every present, non-null Labels property of *feature*."""
    diagnostics: list[Diagnostic] = []
    for name in sorted(schema.properties):
        if schema.properties[name].kind is not PropertyKind.LABELS:
            continue
        value = feature.get(name)
        if value is None:
            continue
        for problem in label_problems(value):
            diagnostics.append(
                Diagnostic.create(
                    DiagnosticCode.MALFORMED_LABELS,
                    feature.feature_type,
                    feature.id,
                    f"{name}: {problem}",
                    field=name,
                )
            )
    return diagnostics


def label_problems(value: object) -> list[str]:
    """Return every reason *value* is not a well-formed Labels object."""
    if not isinstance(value, dict):
        return [f"labels must be an object of language tag to string, got {type(value).__name__}"]
    if not value:
        return ["labels must contain at least one entry"]

    problems: list[str] = []
    for tag in sorted(value, key=str):
        text = value[tag]
        if not is_language_tag(tag):
            problems.append(f"{tag!r} is not a BCP 47 language tag")
        if not isinstance(text, str):
            problems.append(f"label for {tag!r} must be a string, got {type(text).__name__}")
        elif not text.strip():
            problems.append(f"label for {tag!r} is empty")
    return problems
