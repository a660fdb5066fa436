"""Static schema knowledge: the feature schema table and vocabulary registry.

Both are immutable after import; the validator only queries them.
"""

from imdf_validator.schema.tables import (
    SCHEMA_TABLE,
    Cardinality,
    FeatureSchema,
    PropertyKind,
    PropertySpec,
    ReferenceSpec,
    schema_for,
)
from imdf_validator.schema.vocabulary import CategoryKind, VocabularyRegistry

__all__ = [
    "SCHEMA_TABLE",
    "Cardinality",
    "CategoryKind",
    "FeatureSchema",
    "PropertyKind",
    "PropertySpec",
    "ReferenceSpec",
    "VocabularyRegistry",
    "schema_for",
]
