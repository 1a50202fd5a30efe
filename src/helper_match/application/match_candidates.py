"""Batch match: rank a candidate sheet against one requirement file and write reports.

Usage example:
    >>> from helper_match.application.match_candidates import run_match
    >>> from helper_match.config import MatchConfig
    >>> config = MatchConfig.from_env()
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> run_match(
    ...     requirement_path="data/requirement.json",
    ...     candidates_path="data/helpers.csv",
    ...     out_dir="data/matches",
    ...     config=config,
    ...     fs=fs,
    ... )
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pandas as pd

from ..config import MatchConfig
from ..domain.criteria import CriterionStatus
from ..domain.keyword_tables import TABLES_VERSION
from ..domain.ranking import rank_candidates
from ..domain.scoring import MatchReport, today_utc
from ..exceptions import MatchConfigMissingError, RequirementFileError
from ..infrastructure.candidate_source import CsvCandidateSource
from ..infrastructure.validation import IncomingDataError
from ..observability import get_logger
from ..protocols import FileSystem
from ..schemas import MATCH_SUMMARY_COLUMNS, validate_columns
from ..types import MatchSummaryRow
from .adapters import requirement_from_row
from .candidate_pool import CandidatePoolCache

REPORT_FILENAME = "match_report.json"
SUMMARY_FILENAME = "match_summary.csv"

logger = get_logger("helper_match.match_candidates")


def _summary_rows(reports: list[MatchReport]) -> list[MatchSummaryRow]:
    return [
        {
            "rank": rank,
            "code": report.candidate.code,
            "name": report.candidate.name,
            "total_score": report.total_score,
            "max_score": report.max_score,
            "matched": report.count(CriterionStatus.MATCH),
            "partial": report.count(CriterionStatus.PARTIAL),
            "mismatched": report.count(CriterionStatus.MISMATCH),
        }
        for rank, report in enumerate(reports, start=1)
    ]


def run_match(
    requirement_path: str | Path,
    candidates_path: str | Path,
    out_dir: str | Path,
    config: MatchConfig | None = None,
    fs: FileSystem | None = None,
    today: date | None = None,
    pool_cache: CandidatePoolCache | None = None,
) -> dict[str, Path]:
    """Rank candidates for one requirement and write the report and summary.

    Args:
        requirement_path: JSON object keyed by requirement column header.
        candidates_path: Helper sheet CSV (ignored when ``pool_cache`` is given).
        out_dir: Directory for output files.
        config: Match configuration (required; load at entry point).
        fs: Filesystem (required; injected by the composition root).
        today: Reference date for start-date text (UTC today when omitted).
        pool_cache: Optional caller-owned candidate pool cache to reuse across runs.

    Returns:
        Dict with paths to the report and summary files.

    Raises:
        RequirementFileError: If the requirement file is missing or not a JSON object.
        CandidateSourceError: If the candidate sheet is missing or unusable.
    """
    if config is None or fs is None:
        raise MatchConfigMissingError()

    requirement_path = Path(requirement_path)
    out_dir = Path(out_dir)
    fs.mkdir(out_dir, parents=True)

    if not fs.exists(requirement_path):
        raise RequirementFileError(str(requirement_path))
    try:
        requirement = requirement_from_row(fs.read_json(requirement_path))
    except IncomingDataError as exc:
        raise RequirementFileError(str(requirement_path)) from exc

    cache = pool_cache or CandidatePoolCache(
        CsvCandidateSource(Path(candidates_path), fs),
        ttl_seconds=config.candidate_cache_ttl_seconds,
    )
    candidates = cache.get()
    logger.info(
        "Matching %s candidates for %s", len(candidates), requirement.customer_name or "requirement"
    )

    reference_date = today or today_utc()
    reports = rank_candidates(candidates, requirement, config=config, today=reference_date)

    report_path = out_dir / REPORT_FILENAME
    fs.write_json(
        {
            "tables_version": TABLES_VERSION,
            "customer": requirement.customer_name,
            "reference_date": reference_date.isoformat(),
            "reports": [report.to_dict() for report in reports],
        },
        report_path,
    )
    logger.info("Report: %s", report_path)

    summary = pd.DataFrame(_summary_rows(reports), columns=list(MATCH_SUMMARY_COLUMNS))
    validate_columns(list(summary.columns), frozenset(MATCH_SUMMARY_COLUMNS), "Match summary")
    summary_path = out_dir / SUMMARY_FILENAME
    fs.write_csv(summary, summary_path)
    logger.info("Summary: %s (%s candidates)", summary_path, len(summary))

    return {"report": report_path, "summary": summary_path}
