"""Validator configuration loaded from environment variables.

All configuration values have defaults suitable for validating
production archives.  Environment variables are the override mechanism
for tooling that embeds the validator.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range or cannot be parsed.  Bad configuration is caught
    before any archive is touched.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from imdf_validator.core.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ConfigurationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable validator configuration.

    Loaded once per process and threaded through ``Validator``.

    Attributes:
        max_workers: Upper bound on feature-type collections validated
            concurrently.  ``1`` validates sequentially in the caller's thread.
        display_point_tolerance_m: Geodesic distance in metres a display
            point may lie outside its feature geometry before a
            ``DisplayPointOutOfBounds`` warning is emitted.
        check_geometry_validity: Emit ``InvalidGeometry`` warnings for
            geometries shapely reports as invalid (e.g. self-intersecting).
        warn_unknown_properties: Emit ``UnknownProperty`` warnings for
            property keys the schema table does not declare.
        vocabulary_file: Optional YAML file overriding built-in category
            tables (empty string uses the built-in tables only).
    """

    max_workers: int = 4
    display_point_tolerance_m: float = 0.5
    check_geometry_validity: bool = True
    warn_unknown_properties: bool = True
    vocabulary_file: str = ""

    @classmethod
    def from_env(cls) -> ValidatorConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or cannot
                be parsed (e.g. ``IMDF_MAX_WORKERS=abc``).
        """
        config = cls(
            max_workers=_int_env("IMDF_MAX_WORKERS", 4),
            display_point_tolerance_m=_float_env("IMDF_DISPLAY_POINT_TOLERANCE_M", 0.5),
            check_geometry_validity=_bool_env("IMDF_CHECK_GEOMETRY_VALIDITY", True),
            warn_unknown_properties=_bool_env("IMDF_WARN_UNKNOWN_PROPERTIES", True),
            vocabulary_file=os.getenv("IMDF_VOCABULARY_FILE", ""),
        )
        _validate(config)
        return config


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be an integer") from exc


def _float_env(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be a number") from exc


def _bool_env(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false)")


def _validate(config: ValidatorConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.max_workers < 1:
        raise ConfigValidationError(
            "IMDF_MAX_WORKERS",
            config.max_workers,
            "must be >= 1",
        )

    if config.display_point_tolerance_m < 0:
        raise ConfigValidationError(
            "IMDF_DISPLAY_POINT_TOLERANCE_M",
            config.display_point_tolerance_m,
            "must be >= 0 (metres)",
        )

    if config.vocabulary_file and not Path(config.vocabulary_file).is_file():
        raise ConfigValidationError(
            "IMDF_VOCABULARY_FILE",
            config.vocabulary_file,
            "must point to an existing YAML file",
        )
