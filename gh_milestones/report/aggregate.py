"""Group issues by milestone and component label."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..github_client.models import GitHubIssue
from .models import ComponentReport, IssueStats, MilestoneReport, ReportIssue

logger = logging.getLogger(__name__)

COMPONENT_PREFIX = "component: "
TYPE_PREFIX = "type: "
ESTIMATE_PREFIX = "estimate: "

# Days per estimate unit
ESTIMATE_UNITS = {"d": 1, "w": 5}

_ESTIMATE_RE = re.compile(r"\+?([0-9]+)([dw])")


@dataclass
class LabelInfo:
    """Values extracted from an issue's labels."""

    component: str | None = None
    type: str | None = None
    days: int = 0


def parse_estimate(text: str) -> int:
    """Convert an estimate such as '3d' or '2w' into days.

    Anything that is not a whole number (optionally signed with "+") followed
    by "d" or "w" counts as 0.
    """
    match = _ESTIMATE_RE.fullmatch(text.strip())
    if match is None:
        return 0
    return int(match.group(1)) * ESTIMATE_UNITS[match.group(2)]


def classify_labels(names: Iterable[str]) -> LabelInfo:
    """Extract component, type and estimate from label names.

    When a prefix occurs on several labels the last one wins. Label order is
    whatever GitHub returns, so which one that is should not be relied upon.
    """
    info = LabelInfo()
    for name in names:
        if name.startswith(COMPONENT_PREFIX):
            info.component = name[len(COMPONENT_PREFIX) :]
        elif name.startswith(TYPE_PREFIX):
            info.type = name[len(TYPE_PREFIX) :]
        elif name.startswith(ESTIMATE_PREFIX):
            info.days = parse_estimate(name[len(ESTIMATE_PREFIX) :])
    return info


def aggregate(
    issues: Iterable[GitHubIssue], milestone_names: Iterable[str]
) -> list[MilestoneReport]:
    """Build the ordered milestone report for the requested milestones.

    Issues without a milestone are skipped. Issues without a component label
    still count toward their milestone's totals but are not listed under any
    component. Only open issues contribute to the remaining-days counters.

    Args:
        issues: Flat issue list as fetched or loaded from cache
        milestone_names: Milestone titles to report, in output order. Titles
            that do not occur in the data are dropped.

    Returns:
        MilestoneReport objects in the requested order, with components
        sorted by name and issues sorted open/unassigned first.
    """
    milestones: dict[str, MilestoneReport] = {}
    components: dict[tuple[str, str], ComponentReport] = {}

    for issue in issues:
        if issue.milestone is None:
            continue

        title = issue.milestone.title
        milestone = milestones.get(title)
        if milestone is None:
            milestone = MilestoneReport(title=title, html_url=issue.milestone.html_url)
            milestones[title] = milestone

        info = classify_labels(issue.label_names)
        milestone.stats.add(issue.is_closed, info.days)

        if not info.component:
            continue

        component = components.get((title, info.component))
        if component is None:
            component = ComponentReport(name=info.component)
            components[(title, info.component)] = component
            milestone.components.append(component)

        component.issues.append(
            ReportIssue(issue=issue, type=info.type, days=info.days)
        )
        component.stats.add(issue.is_closed, info.days)

    for milestone in milestones.values():
        for component in milestone.components:
            component.issues.sort(key=ReportIssue.sort_key)
        milestone.components.sort(key=lambda c: c.name)

    logger.debug(
        "Aggregated %d milestones with %d components", len(milestones), len(components)
    )

    return [milestones[name] for name in milestone_names if name in milestones]


def milestone_titles(issues: Iterable[GitHubIssue]) -> dict[str, IssueStats]:
    """Count issues per milestone title, in order of first appearance."""
    counts: dict[str, IssueStats] = {}
    for issue in issues:
        if issue.milestone is None:
            continue
        stats = counts.setdefault(issue.milestone.title, IssueStats())
        stats.add(issue.is_closed, classify_labels(issue.label_names).days)
    return counts
