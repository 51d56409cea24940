"""GitHub API client using PyGitHub."""

import logging
import os

import requests
from github import Github
from github.GithubException import GithubException, UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.Milestone import Milestone
from github.NamedUser import NamedUser
from github.Repository import Repository

from ..exceptions import TransportError
from .models import GitHubIssue, GitHubLabel, GitHubMilestone, GitHubUser

logger = logging.getLogger(__name__)

# Largest page size the issues endpoint accepts
PER_PAGE = 100


class GitHubClient:
    """GitHub API client with token authentication."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token, per_page=PER_PAGE)

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(
            login=github_user.login,
            id=github_user.id,
            html_url=github_user.html_url,
            avatar_url=github_user.avatar_url,
        )

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_milestone(self, github_milestone: Milestone) -> GitHubMilestone:
        """Convert PyGitHub milestone to our model."""
        return GitHubMilestone(
            title=github_milestone.title,
            number=github_milestone.number,
            state=github_milestone.state,
            html_url=github_milestone.html_url,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        milestone = None
        if github_issue.milestone is not None:
            milestone = self._convert_milestone(github_issue.milestone)

        assignee = None
        if github_issue.assignee is not None:
            assignee = self._convert_user(github_issue.assignee)

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            html_url=github_issue.html_url,
            state=github_issue.state,
            labels=[self._convert_label(label) for label in github_issue.labels],
            milestone=milestone,
            assignee=assignee,
            closed_at=github_issue.closed_at,
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException as e:
            raise TransportError(f"Repository {org}/{repo} not found") from e
        except (GithubException, requests.RequestException) as e:
            raise TransportError(f"Could not load repository {org}/{repo}: {e}") from e

    def fetch_all_issues(self, org: str, repo: str) -> list[GitHubIssue]:
        """Fetch every issue of a repository, open and closed.

        Pages are requested in order until GitHub reports no further page and
        are concatenated as received. A failure on any page aborts the whole
        fetch; no partial result is returned.

        Args:
            org: Repository owner
            repo: Repository name

        Returns:
            List of GitHubIssue objects in API order

        Raises:
            TransportError: If any request to GitHub fails
        """
        repository = self.get_repository(org, repo)

        issues: list[GitHubIssue] = []
        try:
            for github_issue in repository.get_issues(state="all"):
                issues.append(self._convert_issue(github_issue))
                if len(issues) % PER_PAGE == 0:
                    logger.debug("Fetched %d issues from %s/%s", len(issues), org, repo)
        except (GithubException, requests.RequestException) as e:
            raise TransportError(f"Failed to fetch issues for {org}/{repo}: {e}") from e

        logger.info("Fetched %d issues from %s/%s", len(issues), org, repo)
        return issues
