"""Tests for CLI wiring and overrides."""

import re
from pathlib import Path

import pandas as pd
import typer
from typer.testing import CliRunner

from helper_match import cli
from helper_match.cli import CliDependencies
from helper_match.config import MatchConfig
from helper_match.exceptions import RequirementFileError
from tests.fakes import InMemoryFileSystem
from tests.support.rows import candidate_row, requirement_row

runner = CliRunner()
_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

REQUIREMENT_PATH = "data/requirement.json"
CANDIDATES_PATH = "data/helpers.csv"


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE_RE.sub("", text)


def _seeded_fs() -> InMemoryFileSystem:
    fs = InMemoryFileSystem()
    fs.write_json(requirement_row(), Path(REQUIREMENT_PATH))
    fs.write_csv(
        pd.DataFrame(
            [
                candidate_row(Code="H001", Nationality="Filipino"),
                candidate_row(Code="H002", Name="Siti"),
            ]
        ),
        Path(CANDIDATES_PATH),
    )
    return fs


def _build_app(fs: InMemoryFileSystem) -> typer.Typer:
    def build_with_shared_deps(*, config: MatchConfig) -> CliDependencies:
        _ = config
        return CliDependencies(fs=fs)

    return cli.create_app(build_with_shared_deps)


def _rank_args(*extra: str) -> list[str]:
    return [
        "rank",
        "--requirement",
        REQUIREMENT_PATH,
        "--candidates",
        CANDIDATES_PATH,
        "--output-dir",
        "out",
        "--as-of",
        "2026-10-19",
        *extra,
    ]


class TestRankCommand:
    def test_rank_writes_outputs_and_prints_the_ranking(self) -> None:
        fs = _seeded_fs()

        result = runner.invoke(_build_app(fs), _rank_args())

        output = _strip_ansi(result.output)
        assert result.exit_code == 0, output
        assert "Ranked 2 candidates" in output
        assert output.index("H002 Siti") < output.index("H001 Ani")
        assert fs.exists(Path("out/match_report.json"))
        assert fs.exists(Path("out/match_summary.csv"))

    def test_top_option_truncates(self) -> None:
        result = runner.invoke(_build_app(_seeded_fs()), _rank_args("--top", "1"))

        assert result.exit_code == 0, result.output
        assert "Ranked 1 candidates" in _strip_ansi(result.output)

    def test_config_file_values_apply(self) -> None:
        fs = _seeded_fs()
        fs.write_text("schema_version = 1\n\n[matching]\ntop_n = 1\n", Path("match.toml"))

        result = runner.invoke(_build_app(fs), _rank_args("--config", "match.toml"))

        assert result.exit_code == 0, result.output
        assert "Ranked 1 candidates" in _strip_ansi(result.output)

    def test_missing_requirement_file_fails(self) -> None:
        fs = InMemoryFileSystem()

        result = runner.invoke(_build_app(fs), _rank_args())

        assert result.exit_code != 0
        assert isinstance(result.exception, RequirementFileError)

    def test_workers_must_be_positive(self) -> None:
        result = runner.invoke(_build_app(_seeded_fs()), _rank_args("--workers", "0"))

        assert result.exit_code == 2


def test_facts_command_prints_facts_and_tags() -> None:
    result = runner.invoke(
        _build_app(InMemoryFileSystem()), ["facts", "2 adults, 1 kid 6yo\ncooking, ironing"]
    )

    output = _strip_ansi(result.output)
    assert result.exit_code == 0, output
    assert "adults: 2" in output
    assert "kids: 1" in output
    assert "Tags: cooking, laundry" in output


def test_timing_command_prints_band_and_date() -> None:
    result = runner.invoke(
        _build_app(InMemoryFileSystem()), ["timing", "mid Dec", "--as-of", "2026-10-19"]
    )

    output = _strip_ansi(result.output)
    assert result.exit_code == 0, output
    assert "Band: near" in output
    assert "Date: 2026-12-15" in output
    assert "Days until: 57" in output


def test_timing_command_reports_unresolved_dates() -> None:
    result = runner.invoke(_build_app(InMemoryFileSystem()), ["timing", "anytime"])

    output = _strip_ansi(result.output)
    assert "Band: open" in output
    assert "Date: unresolved" in output


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(
        _build_app(InMemoryFileSystem()), ["--log-level", "chatty", "timing", "ASAP"]
    )

    assert result.exit_code == 2
