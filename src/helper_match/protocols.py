"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that the application layer depends on,
enabling isolated unit testing with in-memory implementations. The scoring engine in
``helper_match.domain`` depends on none of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import pandas as pd


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading requirement/candidate data and writing reports."""

    def read_csv(self, path: Path) -> pd.DataFrame:
        """Read CSV file into DataFrame (all columns as strings)."""
        ...

    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        """Write DataFrame to CSV file."""
        ...

    def read_json(self, path: Path) -> dict[str, object]:
        """Read a JSON file that must contain an object."""
        ...

    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        """Write JSON file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def write_text(self, content: str, path: Path) -> None:
        """Write text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory."""
        ...


@runtime_checkable
class CandidateSource(Protocol):
    """A row-returning data source for candidate records (e.g. an exported helper sheet)."""

    @property
    def label(self) -> str:
        """Human-readable name of the source, used in logs and errors."""
        ...

    def load_rows(self) -> list[dict[str, object]]:
        """Return every candidate row keyed by column header."""
        ...
