"""CLI for the helper match engine.

Commands:
- rank: Rank a helper sheet against one employer requirement and write reports
- facts: Show household facts and jobscope tags extracted from jobscope text
- timing: Show how start-date text resolves and which passport urgency band applies
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from .application.match_candidates import run_match
from .config import MatchConfig
from .config_file import load_match_config_file
from .domain.preferences import assess_timing
from .domain.scoring import today_utc
from .domain.text_facts import extract_facts, extract_tags, split_jobscope_text
from .observability import set_package_log_level
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: MatchConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: MatchConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: MatchConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the helper-match entry point.")


DEFAULT_OUTPUT_DIR = Path("data/matches")
_DATE_FORMATS = ["%Y-%m-%d"]


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _reference_date(value: datetime | None) -> date:
    return value.date() if value is not None else today_utc()


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Helper match engine: rank domestic helpers against employer requirements",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        log_level: Annotated[
            str | None,
            typer.Option(
                "--log-level",
                help="Log level for helper_match loggers (e.g. DEBUG to see every criterion)",
            ),
        ] = None,
    ) -> None:
        """Initialise CLI context."""
        if log_level:
            try:
                set_package_log_level(log_level)
            except ValueError as exc:
                raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        ctx.obj = CliContext(config=MatchConfig.from_env(), deps_builder=deps_builder)

    @app.command()
    def rank(
        ctx: typer.Context,
        requirement_path: Annotated[
            Path,
            typer.Option(
                "--requirement",
                "-r",
                help="JSON object keyed by requirement column header",
            ),
        ],
        candidates_path: Annotated[
            Path,
            typer.Option(
                "--candidates",
                "-c",
                help="Helper sheet exported as CSV",
            ),
        ],
        out_dir: Annotated[
            Path,
            typer.Option(
                "--output-dir",
                "-o",
                help="Directory for match_report.json and match_summary.csv",
            ),
        ] = DEFAULT_OUTPUT_DIR,
        top: Annotated[
            int | None,
            typer.Option("--top", "-n", min=1, help="Keep only the top N candidates"),
        ] = None,
        workers: Annotated[
            int | None,
            typer.Option("--workers", "-w", min=1, help="Scoring threads (default: 1)"),
        ] = None,
        config_path: Annotated[
            Path | None,
            typer.Option("--config", help="TOML config file with a [matching] section"),
        ] = None,
        as_of: Annotated[
            datetime | None,
            typer.Option(
                "--as-of",
                formats=_DATE_FORMATS,
                help="Reference date for start-date text (default: today, UTC)",
            ),
        ] = None,
    ) -> None:
        """Rank candidates against one requirement and write report files."""
        state = _get_context(ctx)
        deps = state.build_dependencies()
        config = state.config
        if config_path is not None:
            config = config.with_file_overrides(
                load_match_config_file(path=config_path, fs=deps.fs)
            )
        if top is not None or workers is not None:
            config = config.with_overrides(max_workers=workers, top_n=top)

        outs = run_match(
            requirement_path=requirement_path,
            candidates_path=candidates_path,
            out_dir=out_dir,
            config=config,
            fs=deps.fs,
            today=_reference_date(as_of),
        )
        summary = deps.fs.read_csv(outs["summary"])
        rprint(f"[green]✓ Ranked {len(summary)} candidates[/green]")
        for row in summary.to_dict(orient="records"):
            rprint(
                f"  {row['rank']}. {row['code']} {row['name']}: "
                f"{row['total_score']}/{row['max_score']}"
            )
        for k, v in outs.items():
            rprint(f"  {k}: {v}")

    @app.command()
    def facts(
        text: Annotated[str, typer.Argument(help="Jobscope text (newlines or bullets)")],
    ) -> None:
        """Show household facts and canonical tags extracted from jobscope text."""
        extracted = extract_facts(split_jobscope_text(text))
        rprint("[green]✓ Facts:[/green]")
        for k, v in extracted.to_dict().items():
            rprint(f"  {k}: {v}")
        rprint(f"[green]✓ Tags:[/green] {', '.join(sorted(extract_tags(text))) or 'none'}")

    @app.command()
    def timing(
        ctx: typer.Context,
        text: Annotated[str, typer.Argument(help='Start-date text, e.g. "end Dec" or "ASAP"')],
        as_of: Annotated[
            datetime | None,
            typer.Option(
                "--as-of",
                formats=_DATE_FORMATS,
                help="Reference date (default: today, UTC)",
            ),
        ] = None,
    ) -> None:
        """Show the resolved start date and the passport urgency band for timing text."""
        config = _get_context(ctx).config
        assessment = assess_timing(
            text,
            _reference_date(as_of),
            urgent_days=config.urgent_days,
            near_days=config.near_days,
        )
        rprint(f"[green]✓ Band:[/green] {assessment.band.value}")
        resolved = assessment.target_date.isoformat() if assessment.target_date else "unresolved"
        rprint(f"  Date: {resolved}")
        if assessment.days_until is not None:
            rprint(f"  Days until: {assessment.days_until}")

    _ = (main, rank, facts, timing)

    return app
