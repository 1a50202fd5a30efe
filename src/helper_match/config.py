"""Centralised, injectable configuration for the helper match engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import MatchConfigFile

DEFAULT_JOBSCOPE_FUZZY_THRESHOLD = 0.3
DEFAULT_PREFERENCE_FUZZY_THRESHOLD = 0.4
DEFAULT_URGENT_DAYS = 45
DEFAULT_NEAR_DAYS = 75


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class ThresholdEnvVarError(ValueError):
    """Raised when an environment variable must be a fraction between 0 and 1."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a number between 0 and 1.")


@dataclass(frozen=True)
class MatchConfig:
    """Immutable configuration object for scoring and ranking.

    Load from environment with `MatchConfig.from_env()` or construct directly for testing.
    """

    # Fuzzy matching (dissimilarity thresholds, 0 = exact)
    jobscope_fuzzy_threshold: float = DEFAULT_JOBSCOPE_FUZZY_THRESHOLD
    preference_fuzzy_threshold: float = DEFAULT_PREFERENCE_FUZZY_THRESHOLD

    # Passport-readiness day boundaries
    urgent_days: int = DEFAULT_URGENT_DAYS
    near_days: int = DEFAULT_NEAR_DAYS

    # Ranking
    max_workers: int = 1
    top_n: int | None = None

    # Candidate pool cache
    candidate_cache_ttl_seconds: int = 300

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            MatchConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            jobscope_fuzzy_threshold=_parse_threshold(
                os.getenv("MATCH_JOBSCOPE_FUZZY_THRESHOLD", ""),
                default=DEFAULT_JOBSCOPE_FUZZY_THRESHOLD,
                env_name="MATCH_JOBSCOPE_FUZZY_THRESHOLD",
            ),
            preference_fuzzy_threshold=_parse_threshold(
                os.getenv("MATCH_PREFERENCE_FUZZY_THRESHOLD", ""),
                default=DEFAULT_PREFERENCE_FUZZY_THRESHOLD,
                env_name="MATCH_PREFERENCE_FUZZY_THRESHOLD",
            ),
            urgent_days=_parse_optional_positive_int(
                os.getenv("MATCH_URGENT_DAYS", ""), env_name="MATCH_URGENT_DAYS"
            )
            or DEFAULT_URGENT_DAYS,
            near_days=_parse_optional_positive_int(
                os.getenv("MATCH_NEAR_DAYS", ""), env_name="MATCH_NEAR_DAYS"
            )
            or DEFAULT_NEAR_DAYS,
            max_workers=_parse_optional_positive_int(
                os.getenv("MATCH_MAX_WORKERS", ""), env_name="MATCH_MAX_WORKERS"
            )
            or 1,
            top_n=_parse_optional_positive_int(
                os.getenv("MATCH_TOP_N", ""), env_name="MATCH_TOP_N"
            ),
            candidate_cache_ttl_seconds=_parse_optional_positive_int(
                os.getenv("MATCH_CANDIDATE_CACHE_TTL_SECONDS", ""),
                env_name="MATCH_CANDIDATE_CACHE_TTL_SECONDS",
            )
            or 300,
        )

    def with_overrides(
        self,
        *,
        max_workers: int | None = None,
        top_n: int | None = None,
        jobscope_fuzzy_threshold: float | None = None,
        preference_fuzzy_threshold: float | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            max_workers=self.max_workers if max_workers is None else max_workers,
            top_n=self.top_n if top_n is None else top_n,
            jobscope_fuzzy_threshold=self.jobscope_fuzzy_threshold
            if jobscope_fuzzy_threshold is None
            else jobscope_fuzzy_threshold,
            preference_fuzzy_threshold=self.preference_fuzzy_threshold
            if preference_fuzzy_threshold is None
            else preference_fuzzy_threshold,
        )

    def with_file_overrides(self, file_config: MatchConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            jobscope_fuzzy_threshold=self.jobscope_fuzzy_threshold
            if file_config.jobscope_fuzzy_threshold is None
            else file_config.jobscope_fuzzy_threshold,
            preference_fuzzy_threshold=self.preference_fuzzy_threshold
            if file_config.preference_fuzzy_threshold is None
            else file_config.preference_fuzzy_threshold,
            urgent_days=self.urgent_days
            if file_config.urgent_days is None
            else file_config.urgent_days,
            near_days=self.near_days if file_config.near_days is None else file_config.near_days,
            max_workers=self.max_workers
            if file_config.max_workers is None
            else file_config.max_workers,
            top_n=self.top_n if file_config.top_n is None else file_config.top_n,
            candidate_cache_ttl_seconds=self.candidate_cache_ttl_seconds
            if file_config.candidate_cache_ttl_seconds is None
            else file_config.candidate_cache_ttl_seconds,
        )


def _parse_optional_positive_int(value: str, *, env_name: str) -> int | None:
    """Parse an optional positive integer from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_threshold(value: str, *, default: float, env_name: str) -> float:
    """Parse an optional 0..1 threshold from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = float(text)
    except ValueError as exc:
        raise ThresholdEnvVarError(env_name) from exc
    if parsed < 0.0 or parsed > 1.0:
        raise ThresholdEnvVarError(env_name)
    return parsed
