"""Standardized CLI option definitions shared by the report commands."""

import typer

from ..report.render import OutputStyle

REPO_OPTION = typer.Option(
    None, "--repo", "-r", help="GitHub repository as owner/name"
)

MILESTONES_OPTION = typer.Option(
    ...,
    "--milestones",
    "-m",
    help="Comma-separated milestone titles, in report order",
)

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

WRITE_ISSUES_OPTION = typer.Option(
    None,
    "--write-issues",
    "-w",
    help="Save the fetched issues to this JSON file",
    dir_okay=False,
)

FROM_FILE_OPTION = typer.Option(
    None,
    "--from-file",
    "-f",
    help="Read issues from a JSON file written by --write-issues instead of GitHub",
    dir_okay=False,
)

FORMAT_OPTION = typer.Option(
    OutputStyle.TABLE, "--format", help="Output format: table (HTML) or markdown"
)

BADGES_OPTION = typer.Option(
    True,
    "--badges/--no-badges",
    help="Show counters as shields.io badges instead of plain text",
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log progress details to stderr"
)
