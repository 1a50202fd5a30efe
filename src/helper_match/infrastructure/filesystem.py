"""Filesystem implementation for infrastructure.

Usage example:
    from pathlib import Path

    import pandas as pd

    from helper_match.infrastructure.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    fs.write_csv(pd.DataFrame({"code": ["H001"]}), Path("out/match_summary.csv"))
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import override

import pandas as pd

from ..protocols import FileSystem
from .validation import validate_json_as


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def read_csv(self, path: Path) -> pd.DataFrame:
        return pd.read_csv(path, dtype=str).fillna("")

    @override
    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)

    @override
    def read_json(self, path: Path) -> dict[str, object]:
        payload = path.read_text(encoding="utf-8")
        return validate_json_as(dict[str, object], payload)

    @override
    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(dict(data), ensure_ascii=False, indent=2), encoding="utf-8")

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def write_text(self, content: str, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()

    @override
    def mkdir(self, path: Path, parents: bool = True) -> None:
        path.mkdir(parents=parents, exist_ok=True)
