"""Load issues and produce the rendered report for a run."""

import logging

from ..config import ReportConfig
from ..exceptions import InputError
from ..github_client.client import GitHubClient
from ..github_client.models import GitHubIssue
from ..storage.cache import IssueCache
from .aggregate import aggregate
from .render import render

logger = logging.getLogger(__name__)


def collect_issues(config: ReportConfig) -> list[GitHubIssue]:
    """Read the issue set from the cache file or from GitHub.

    The two sources are exclusive: when a cache file is configured GitHub
    is never contacted.
    """
    if config.from_file is not None:
        logger.info("Reading issues from %s", config.from_file)
        return IssueCache(config.from_file).load()

    assert config.owner is not None and config.repo is not None  # validated
    client = GitHubClient(token=config.token)
    return client.fetch_all_issues(config.owner, config.repo)


def generate_report(config: ReportConfig) -> str:
    """Run the whole pipeline and return the report text.

    The issue cache, when requested, is written before the report is
    returned, so a failed write means no report is produced.

    Raises:
        ReportError: On any input, transport or cache failure
    """
    if not config.milestones:
        raise InputError("At least one milestone name is required")

    issues = collect_issues(config)
    report = render(aggregate(issues, config.milestones), config.style, config.badges)

    if config.write_issues is not None:
        IssueCache(config.write_issues).save(issues)

    return report
