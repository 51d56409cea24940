"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from gh_milestones.github_client.models import (
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubUser,
)

IssueFactory = Callable[..., GitHubIssue]


@pytest.fixture
def make_issue() -> IssueFactory:
    """Build GitHubIssue objects with terse keyword arguments.

    ``milestone`` is a title, ``labels`` a list of label names, ``assignee``
    a login and ``closed`` marks the issue resolved.
    """

    def factory(
        number: int,
        milestone: str | None = "v1.0",
        labels: list[str] | None = None,
        assignee: str | None = None,
        closed: bool = False,
        title: str | None = None,
        **extra: Any,
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title or f"Issue {number}",
            html_url=f"https://github.com/testorg/testrepo/issues/{number}",
            state="closed" if closed else "open",
            labels=[GitHubLabel(name=name, color="ededed") for name in labels or []],
            milestone=GitHubMilestone(title=milestone, number=1)
            if milestone
            else None,
            assignee=GitHubUser(
                login=assignee,
                id=1000 + number,
                html_url=f"https://github.com/{assignee}",
                avatar_url=f"https://avatars.githubusercontent.com/u/{1000 + number}",
            )
            if assignee
            else None,
            closed_at=datetime(2024, 3, 1, 12, 0, tzinfo=UTC) if closed else None,
            created_at=datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
            updated_at=datetime(2024, 3, 1, 12, 0, tzinfo=UTC),
            **extra,
        )

    return factory


@pytest.fixture
def sample_issues(make_issue: IssueFactory) -> list[GitHubIssue]:
    """Three v1.0 issues across two components."""
    return [
        make_issue(1, labels=["component: api", "type: bug", "estimate: 3d"]),
        make_issue(2, labels=["component: api"], assignee="alice", closed=True),
        make_issue(3, labels=["component: ui", "estimate: 1w"], assignee="bob"),
    ]
