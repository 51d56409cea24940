"""CLI commands for generating milestone reports."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ReportConfig
from ..exceptions import ReportError
from ..report.aggregate import milestone_titles
from ..report.pipeline import collect_issues, generate_report
from ..report.render import OutputStyle
from .options import (
    BADGES_OPTION,
    FORMAT_OPTION,
    FROM_FILE_OPTION,
    MILESTONES_OPTION,
    REPO_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
    WRITE_ISSUES_OPTION,
)

# Progress and errors go to stderr so stdout carries only the report
console = Console(stderr=True)
output = Console()
app = typer.Typer(
    help="Generate milestone progress reports",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@app.command()
def report(
    milestones: str = MILESTONES_OPTION,
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    write_issues: Path | None = WRITE_ISSUES_OPTION,
    from_file: Path | None = FROM_FILE_OPTION,
    output_format: OutputStyle = FORMAT_OPTION,
    badges: bool = BADGES_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a milestone/component progress report.

    Issues are grouped by milestone and by their 'component: ' label. Labels
    'type: ' and 'estimate: 3d' / 'estimate: 2w' add a type tag and a day
    estimate to each issue.

    Examples:
        gh-milestones report --repo myorg/myrepo --milestones "v1.0,v1.1"
        gh-milestones report --repo myorg/myrepo --milestones v1.0 \\
            --write-issues issues.json
        gh-milestones report --from-file issues.json --milestones v1.0 \\
            --format markdown
    """
    _configure_logging(verbose)

    try:
        config = ReportConfig.from_options(
            repo=repo,
            milestones=milestones,
            token=token,
            write_issues=write_issues,
            from_file=from_file,
            style=output_format,
            badges=badges,
        )
        if config.fetches_from_github:
            console.print(f"🔎 Fetching issues from {config.owner}/{config.repo}...")
        text = generate_report(config)
    except ReportError as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)

    if config.write_issues is not None:
        console.print(f"💾 Saved issues to {config.write_issues}")

    typer.echo(text, nl=False)


@app.command()
def milestones(
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    from_file: Path | None = FROM_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the milestone titles present in the issue data."""
    _configure_logging(verbose)

    try:
        config = ReportConfig.from_options(repo=repo, token=token, from_file=from_file)
        issues = collect_issues(config)
    except ReportError as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)

    counts = milestone_titles(issues)
    if not counts:
        console.print("No milestones found.")
        return

    table = Table(title="Milestones")
    table.add_column("Milestone", style="cyan")
    table.add_column("Closed", justify="right", style="green")
    table.add_column("Total", justify="right", style="green")
    table.add_column("Remaining", justify="right", style="yellow")

    for title, stats in counts.items():
        table.add_row(title, str(stats.closed), str(stats.total), f"{stats.days}d")

    output.print(table)


if __name__ == "__main__":
    app()
