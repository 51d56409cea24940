"""Run configuration for milestone reports."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import InputError
from .report.render import OutputStyle


def parse_repo(repo: str) -> tuple[str, str]:
    """Split an 'owner/name' repository string.

    Raises:
        InputError: If either part is missing
    """
    owner, sep, name = repo.strip().partition("/")
    if not sep or not owner or not name:
        raise InputError(f"Repository must be given as owner/name, got '{repo}'")
    return owner, name


def parse_milestones(milestones: str) -> list[str]:
    """Split a comma separated milestone list, keeping the given order."""
    return [name.strip() for name in milestones.split(",") if name.strip()]


@dataclass
class ReportConfig:
    """Configuration for one report run, built once from CLI options."""

    milestones: list[str] = field(default_factory=list)
    owner: str | None = None
    repo: str | None = None
    token: str | None = None
    write_issues: Path | None = None
    from_file: Path | None = None
    style: OutputStyle = OutputStyle.TABLE
    badges: bool = True

    @classmethod
    def from_options(
        cls,
        repo: str | None,
        milestones: str = "",
        token: str | None = None,
        write_issues: Path | None = None,
        from_file: Path | None = None,
        style: OutputStyle = OutputStyle.TABLE,
        badges: bool = True,
    ) -> "ReportConfig":
        """Build configuration from raw option values.

        The token falls back to the GITHUB_TOKEN environment variable. A
        repository is only required when issues are fetched from GitHub.

        Raises:
            InputError: If the options are inconsistent or malformed
        """
        owner = name = None
        if repo:
            owner, name = parse_repo(repo)

        config = cls(
            milestones=parse_milestones(milestones),
            owner=owner,
            repo=name,
            token=token or os.getenv("GITHUB_TOKEN"),
            write_issues=write_issues,
            from_file=from_file,
            style=style,
            badges=badges,
        )
        config.validate()
        return config

    @property
    def fetches_from_github(self) -> bool:
        return self.from_file is None

    def validate(self) -> None:
        """Check that a data source is fully specified.

        Raises:
            InputError: Listing every problem found
        """
        errors: list[str] = []

        if self.fetches_from_github:
            if not self.owner or not self.repo:
                errors.append("--repo is required unless --from-file is given")
            if not self.token:
                errors.append(
                    "GitHub token is required. Pass --token or set GITHUB_TOKEN"
                )

        if errors:
            raise InputError("; ".join(errors))
