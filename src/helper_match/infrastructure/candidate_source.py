"""CSV-backed candidate source (an exported helper sheet)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import override

from ..exceptions import CandidateSourceError
from ..protocols import CandidateSource, FileSystem
from ..schemas import CANDIDATE_IDENTITY_COLUMNS


@dataclass(frozen=True)
class CsvCandidateSource(CandidateSource):
    """Reads candidate rows from a CSV whose headers follow the helper sheet."""

    path: Path
    fs: FileSystem

    @property
    @override
    def label(self) -> str:
        return str(self.path)

    @override
    def load_rows(self) -> list[dict[str, object]]:
        if not self.fs.exists(self.path):
            raise CandidateSourceError(self.label, "file not found")
        df = self.fs.read_csv(self.path)
        columns = [str(column).strip() for column in df.columns]
        if not CANDIDATE_IDENTITY_COLUMNS & set(columns):
            raise CandidateSourceError(
                self.label,
                f"expected at least one of {sorted(CANDIDATE_IDENTITY_COLUMNS)} columns",
            )
        df.columns = columns
        return [
            {str(key): value for key, value in record.items()}
            for record in df.to_dict(orient="records")
        ]
