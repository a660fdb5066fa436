"""Vocabulary registry: the closed token sets of IMDF category fields.

The registry answers one question, ``is_valid(kind, token)``, and is
immutable for its lifetime.  The built-in tables come from
``imdf_validator.schema._categories``; an external YAML feed may replace
individual tables (see ``VocabularyRegistry.from_file``).

YAML feed layout::

    unit:
      - room
      - walkway
    occupant:          # integer-coded tables use a mapping
      restaurant: 819
      bank: 90

Querying a kind the registry does not hold is a configuration error and
raises ``UnknownCategoryKindError``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import yaml

from imdf_validator.core.exceptions import ConfigurationError, UnknownCategoryKindError
from imdf_validator.schema import _categories

if TYPE_CHECKING:
    from collections.abc import Collection

logger = logging.getLogger("imdf_validator.schema.vocabulary")


class CategoryKind(str, enum.Enum):
    """Controlled vocabularies known to the validator."""

    ACCESS_CONTROL = "access_control"
    ACCESSIBILITY = "accessibility"
    AMENITY = "amenity"
    BUILDING = "building"
    DOOR = "door"
    DOOR_TYPE = "door_type"
    DOOR_MATERIAL = "door_material"
    FIXTURE = "fixture"
    FOOTPRINT = "footprint"
    GEOFENCE = "geofence"
    LEVEL = "level"
    OCCUPANT = "occupant"
    OPENING = "opening"
    RELATIONSHIP = "relationship"
    RELATIONSHIP_DIRECTION = "relationship_direction"
    RESTRICTION = "restriction"
    SECTION = "section"
    UNIT = "unit"
    VENUE = "venue"


_BUILTIN_TABLES: Mapping[CategoryKind, Collection[str] | Mapping[str, int]] = MappingProxyType(
    {
        CategoryKind.ACCESS_CONTROL: _categories.ACCESS_CONTROL_CATEGORY,
        CategoryKind.ACCESSIBILITY: _categories.ACCESSIBILITY_CATEGORY,
        CategoryKind.AMENITY: _categories.AMENITY_CATEGORY,
        CategoryKind.BUILDING: _categories.BUILDING_CATEGORY,
        CategoryKind.DOOR: _categories.DOOR_CATEGORY,
        CategoryKind.DOOR_TYPE: _categories.DOOR_TYPE,
        CategoryKind.DOOR_MATERIAL: _categories.DOOR_MATERIAL,
        CategoryKind.FIXTURE: _categories.FIXTURE_CATEGORY,
        CategoryKind.FOOTPRINT: _categories.FOOTPRINT_CATEGORY,
        CategoryKind.GEOFENCE: _categories.GEOFENCE_CATEGORY,
        CategoryKind.LEVEL: _categories.LEVEL_CATEGORY,
        CategoryKind.OCCUPANT: _categories.OCCUPANT_CATEGORY,
        CategoryKind.OPENING: _categories.OPENING_CATEGORY,
        CategoryKind.RELATIONSHIP: _categories.RELATIONSHIP_CATEGORY,
        CategoryKind.RELATIONSHIP_DIRECTION: _categories.RELATIONSHIP_DIRECTION,
        CategoryKind.RESTRICTION: _categories.RESTRICTION_CATEGORY,
        CategoryKind.SECTION: _categories.SECTION_CATEGORY,
        CategoryKind.UNIT: _categories.UNIT_CATEGORY,
        CategoryKind.VENUE: _categories.VENUE_CATEGORY,
    }
)


class _Table:
    """One immutable token set, optionally integer-coded."""

    __slots__ = ("codes", "tokens")

    def __init__(self, source: Collection[str] | Mapping[str, int]) -> None:
        self.tokens: frozenset[str] = frozenset(source)
        if isinstance(source, Mapping):
            self.codes: frozenset[int] = frozenset(source.values())
        else:
            self.codes = frozenset()

    def __contains__(self, token: object) -> bool:
        if isinstance(token, bool):
            return False
        if isinstance(token, str):
            return token in self.tokens
        if isinstance(token, int):
            return token in self.codes
        return False


class VocabularyRegistry:
    """Immutable lookup of valid tokens per ``CategoryKind``."""

    _default: VocabularyRegistry | None = None

    def __init__(self, tables: Mapping[CategoryKind, Collection[str] | Mapping[str, int]]) -> None:
        self._tables: Mapping[CategoryKind, _Table] = MappingProxyType(
            {CategoryKind(kind): _Table(source) for kind, source in tables.items()}
        )

    # -- queries ------------------------------------------------------------

    def is_valid(self, kind: CategoryKind, token: object) -> bool:
        """Whether *token* belongs to the vocabulary of *kind*.

        Integer-coded vocabularies (occupant) accept either the token
        string or its integer code.  Booleans never match.

        Raises:
            UnknownCategoryKindError: If *kind* is not held by this registry.
        """
        return token in self._table(kind)

    def tokens(self, kind: CategoryKind) -> frozenset[str]:
        """Return the string tokens of *kind*."""
        return self._table(kind).tokens

    @property
    def kinds(self) -> frozenset[CategoryKind]:
        return frozenset(self._tables)

    def _table(self, kind: object) -> _Table:
        table = self._tables.get(kind)  # type: ignore[call-overload]
        if table is None:
            raise UnknownCategoryKindError(kind)
        return table

    # -- construction -------------------------------------------------------

    @classmethod
    def default(cls) -> VocabularyRegistry:
        """Return the shared registry over the built-in tables."""
        if cls._default is None:
            cls._default = cls(_BUILTIN_TABLES)
        return cls._default

    @classmethod
    def from_file(cls, path: Path | str) -> VocabularyRegistry:
        """Build a registry from a YAML feed layered over the built-in tables.

        Kinds listed in the file replace the built-in table for that kind;
        all other kinds keep their built-in tokens.

        Raises:
            ConfigurationError: If the file cannot be read or parsed, names
                an unknown category kind, or holds a malformed table.
        """
        path = Path(path)
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            msg = f"Cannot load vocabulary file {path}: {exc}"
            raise ConfigurationError(msg, stage="vocabulary", code="VOCABULARY_LOAD_FAILED") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            msg = f"Vocabulary file {path} must contain a mapping of category kind to tokens"
            raise ConfigurationError(msg, stage="vocabulary", code="VOCABULARY_MALFORMED")

        tables: dict[CategoryKind, Collection[str] | Mapping[str, int]] = dict(_BUILTIN_TABLES)
        for name, entries in raw.items():
            try:
                kind = CategoryKind(name)
            except ValueError:
                raise UnknownCategoryKindError(name) from None
            tables[kind] = _parse_table(kind, entries, path)

        logger.info(
            "Vocabulary loaded | file=%s | overridden=%s",
            path,
            ",".join(sorted(str(k) for k in raw)) or "-",
        )
        return cls(tables)


def _parse_table(
    kind: CategoryKind, entries: object, path: Path
) -> Collection[str] | Mapping[str, int]:
    if isinstance(entries, list) and all(isinstance(e, str) for e in entries):
        return frozenset(entries)
    if isinstance(entries, dict) and all(
        isinstance(k, str) and isinstance(v, int) and not isinstance(v, bool)
        for k, v in entries.items()
    ):
        return MappingProxyType(dict(entries))
    msg = (
        f"Vocabulary {kind.value!r} in {path} must be a list of strings "
        "or a mapping of string to integer code"
    )
    raise ConfigurationError(msg, stage="vocabulary", code="VOCABULARY_MALFORMED")
