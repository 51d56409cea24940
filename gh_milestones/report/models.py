"""Pydantic models for the aggregated milestone report."""

from pydantic import BaseModel, Field

from ..github_client.models import GitHubIssue


class IssueStats(BaseModel):
    """Progress counters for a milestone or component."""

    closed: int = Field(0, description="Number of resolved issues")
    total: int = Field(0, description="Number of issues counted")
    days: int = Field(0, description="Estimated days remaining on open issues")

    @property
    def open(self) -> int:
        return self.total - self.closed

    def add(self, closed: bool, days: int) -> None:
        """Count one issue; estimates only accumulate while it is open."""
        self.total += 1
        if closed:
            self.closed += 1
        else:
            self.days += days


class ReportIssue(BaseModel):
    """An issue placed in a component, with fields derived from its labels."""

    issue: GitHubIssue = Field(..., description="Issue as fetched from GitHub")
    type: str | None = Field(None, description="Value of the 'type: ' label")
    days: int = Field(0, description="Effort estimate in days from 'estimate: '")

    def sort_key(self) -> tuple[bool, bool, int]:
        """Open before closed, unassigned before assigned, then by number."""
        return (self.issue.is_closed, self.issue.is_assigned, self.issue.number)


class ComponentReport(BaseModel):
    """Issues of one milestone sharing a 'component: ' label."""

    name: str = Field(..., description="Component name taken from the label")
    stats: IssueStats = Field(default_factory=IssueStats)
    issues: list[ReportIssue] = Field(default_factory=list)


class MilestoneReport(BaseModel):
    """All scheduled work for one milestone."""

    title: str = Field(..., description="Milestone title, the grouping key")
    html_url: str | None = Field(None, description="Milestone page URL")
    stats: IssueStats = Field(default_factory=IssueStats)
    components: list[ComponentReport] = Field(default_factory=list)
