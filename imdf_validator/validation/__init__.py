"""Archive validation: reference resolution and the staged validator.

The stages are split into focused modules:
- **geometry**: geometry kind, shapely build/validity, display-point containment
- **properties**: required presence, value types, category tokens, unknown keys
- **labels**: BCP 47 language-tagged label maps
- **resolver**: identifier references against the archive index
- **validator**: runs the stages per feature and builds the report
"""

from __future__ import annotations

from imdf_validator.validation.resolver import (
    ReferenceResolver,
    ResolutionResult,
    ResolvedReference,
)
from imdf_validator.validation.validator import Validator, validate_archive

__all__ = [
    "ReferenceResolver",
    "ResolutionResult",
    "ResolvedReference",
    "Validator",
    "validate_archive",
]
