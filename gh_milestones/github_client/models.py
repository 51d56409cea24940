"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures, so a
raw issue object returned by the API validates without translation. Fields
the report does not use are ignored.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")
    html_url: str | None = Field(None, description="Profile page URL (string)")
    avatar_url: str | None = Field(None, description="Avatar image URL (string)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str | None = Field(
        None, description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubMilestone(BaseModel):
    """GitHub milestone model.

    Maps to GitHub REST API Milestone object.
    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    title: str = Field(..., description="Title of the milestone (string)")
    number: int | None = Field(
        None, description="Milestone number within the repository (integer)"
    )
    state: str | None = Field(None, description="State: 'open' or 'closed' (string)")
    html_url: str | None = Field(None, description="Milestone page URL (string)")


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    html_url: str | None = Field(None, description="Issue page URL (string)")
    state: str = Field("open", description="Current state: 'open', 'closed' (string)")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    milestone: GitHubMilestone | None = Field(
        None, description="Milestone the issue is scheduled for, None if unscheduled"
    )
    assignee: GitHubUser | None = Field(None, description="Assigned user, if any")
    closed_at: datetime | None = Field(
        None, description="Timestamp the issue was closed (ISO 8601)"
    )
    created_at: datetime | None = Field(
        None, description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime | None = Field(
        None, description="Timestamp of last issue update (ISO 8601)"
    )

    @property
    def is_closed(self) -> bool:
        """Whether the issue has been resolved."""
        return self.closed_at is not None

    @property
    def is_assigned(self) -> bool:
        return self.assignee is not None

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]
