"""Typed parsing and validation for match config files.

Example file:

    schema_version = 1

    [matching]
    jobscope_fuzzy_threshold = 0.3
    urgent_days = 45
    near_days = 75
    max_workers = 4
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class MatchConfigFile:
    """Validated match config values loaded from a TOML file."""

    jobscope_fuzzy_threshold: float | None = None
    preference_fuzzy_threshold: float | None = None
    urgent_days: int | None = None
    near_days: int | None = None
    max_workers: int | None = None
    top_n: int | None = None
    candidate_cache_ttl_seconds: int | None = None


class _MatchingSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    jobscope_fuzzy_threshold: float | None = None
    preference_fuzzy_threshold: float | None = None
    urgent_days: int | None = None
    near_days: int | None = None
    max_workers: int | None = None
    top_n: int | None = None
    candidate_cache_ttl_seconds: int | None = None

    @field_validator("jobscope_fuzzy_threshold", "preference_fuzzy_threshold")
    @classmethod
    def _validate_threshold(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value < 0.0 or value > 1.0:
            raise ValueError
        return value

    @field_validator(
        "urgent_days", "near_days", "max_workers", "top_n", "candidate_cache_ttl_seconds"
    )
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_day_bands(self) -> _MatchingSectionModel:
        if (
            self.urgent_days is not None
            and self.near_days is not None
            and self.near_days <= self.urgent_days
        ):
            raise ValueError
        return self


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    matching: _MatchingSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_match_config_file(*, path: Path, fs: FileSystem) -> MatchConfigFile:
    """Load and validate a match TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.matching
    return MatchConfigFile(
        jobscope_fuzzy_threshold=section.jobscope_fuzzy_threshold,
        preference_fuzzy_threshold=section.preference_fuzzy_threshold,
        urgent_days=section.urgent_days,
        near_days=section.near_days,
        max_workers=section.max_workers,
        top_n=section.top_n,
        candidate_cache_ttl_seconds=section.candidate_cache_ttl_seconds,
    )
