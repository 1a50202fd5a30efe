"""Custom exceptions for the helper match engine.

The scoring engine itself degrades bad data instead of raising. These exceptions cover
the boundaries around it: configuration files, requirement files and candidate sources.
"""

from __future__ import annotations


class MatchEngineError(Exception):
    """Base exception for all helper match errors."""

    pass


class ConfigFileNotFoundError(MatchEngineError):
    """Raised when a match config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(MatchEngineError):
    """Raised when a match config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(MatchEngineError):
    """Raised when a match config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} failed validation: {detail}")


class RequirementFileError(MatchEngineError):
    """Raised when a requirement file does not contain a JSON object."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Requirement file {path} must contain a JSON object keyed by column header."
        )


class CandidateSourceError(MatchEngineError):
    """Raised when the candidate source cannot supply usable rows.

    A missing file or a sheet without any identifying column is fatal for the batch;
    individual bad values inside rows are not.
    """

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"Candidate source {source}: {detail}")


class MatchConfigMissingError(MatchEngineError):
    """Raised when a batch run is invoked without its injected config or filesystem."""

    def __init__(self) -> None:
        super().__init__(
            "MatchConfig and FileSystem are required. Load the config once at the entry "
            "point with MatchConfig.from_env() and pass both through."
        )
