"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import MatchConfig
from .infrastructure import LocalFileSystem


def build_cli_dependencies(*, config: MatchConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Match configuration. Unused today; every command reads local files only.
    """
    _ = config
    return CliDependencies(fs=LocalFileSystem())


app = create_app(build_cli_dependencies)
