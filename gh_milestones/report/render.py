"""Render an aggregated milestone report as HTML or Markdown."""

from enum import Enum
from html import escape
from urllib.parse import quote_plus

from .models import ComponentReport, IssueStats, MilestoneReport, ReportIssue

BADGE_URL = "https://img.shields.io/badge/{label}-{value}-{color}.svg?style=flat-square"
CLOSED_MARK = "☑️"


class OutputStyle(str, Enum):
    """Supported report layouts."""

    TABLE = "table"
    MARKDOWN = "markdown"


def badge_url(label: str, value: str, color: str) -> str:
    """Build a shields.io static badge URL."""
    return BADGE_URL.format(label=label, value=quote_plus(value), color=color)


def completed_badge(stats: IssueStats) -> str:
    return badge_url("completed", f"{stats.closed}/{stats.total}", "blue")


def days_badge(stats: IssueStats) -> str:
    return badge_url("remaining", f"{stats.days}d", "green")


def stats_text(stats: IssueStats) -> str:
    """Plain text counters used when badges are disabled."""
    return f"{stats.closed}/{stats.total} closed, {stats.days}d remaining"


def render(
    milestones: list[MilestoneReport],
    style: OutputStyle = OutputStyle.TABLE,
    badges: bool = True,
) -> str:
    """Render milestones in the given style.

    Args:
        milestones: Aggregated milestones in output order
        style: Output layout
        badges: Show counters as shields.io badge images instead of text

    Returns:
        Report text ending with a newline
    """
    if style == OutputStyle.MARKDOWN:
        return _render_markdown(milestones, badges)
    return _render_table(milestones, badges)


# HTML table


def _html_counters(stats: IssueStats, badges: bool) -> str:
    if not badges:
        return f" <small>{escape(stats_text(stats))}</small>"
    return (
        f' <img hspace="5" align="right" src="{escape(days_badge(stats))}" />'
        f' <img hspace="5" align="right" src="{escape(completed_badge(stats))}" />'
    )


def _html_heading_row(tag: str, text: str, stats: IssueStats, badges: bool) -> list[str]:
    return [
        "\t\t<tr>",
        '\t\t\t<td colspan="6">',
        f"\t\t\t\t<{tag}>{escape(text)}{_html_counters(stats, badges)}</{tag}>",
        "\t\t\t</td>",
        "\t\t</tr>",
    ]


def _html_issue_row(item: ReportIssue) -> list[str]:
    issue = item.issue

    number = f"#{issue.number}"
    if issue.html_url:
        number = f'<a href="{escape(issue.html_url)}">{number}</a>'

    kind = f"<kbd>{escape(item.type)}</kbd>" if item.type else ""
    days = f"{item.days}d" if item.days else ""

    avatar = ""
    if issue.assignee is not None and issue.assignee.avatar_url:
        avatar = (
            '<img valign="middle" height="30" width="30" '
            f'src="{escape(issue.assignee.avatar_url)}" />'
        )
        if issue.assignee.html_url:
            avatar = f'<a href="{escape(issue.assignee.html_url)}">{avatar}</a>'

    closed = CLOSED_MARK if issue.is_closed else ""

    return [
        "\t\t<tr>",
        f"\t\t\t<td>{number}</td>",
        f"\t\t\t<td>{kind}</td>",
        f"\t\t\t<td>{days}</td>",
        f"\t\t\t<td>{escape(issue.title)}</td>",
        f'\t\t\t<td width="60">{avatar}</td>',
        f"\t\t\t<td>{closed}</td>",
        "\t\t</tr>",
    ]


def _render_table(milestones: list[MilestoneReport], badges: bool) -> str:
    lines = ["<table>", "\t<thead>", "\t</thead>", "\t<tbody>"]
    for milestone in milestones:
        lines += _html_heading_row("h3", milestone.title, milestone.stats, badges)
        for component in milestone.components:
            lines += _html_heading_row("h6", component.name, component.stats, badges)
            for item in component.issues:
                lines += _html_issue_row(item)
    lines += ["\t</tbody>", "</table>"]
    return "\n".join(lines) + "\n"


# Markdown list

_MARKDOWN_SPECIAL = "\\`*_[]<>"


def _escape_markdown(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIAL else ch for ch in text)


def _markdown_counters(stats: IssueStats, badges: bool) -> str:
    if not badges:
        return f" ({stats_text(stats)})"
    return f" ![remaining]({days_badge(stats)}) ![completed]({completed_badge(stats)})"


def _markdown_issue(item: ReportIssue) -> str:
    issue = item.issue

    parts = [f"[#{issue.number}]({issue.html_url})" if issue.html_url else f"#{issue.number}"]
    if item.type:
        parts.append(f"`{item.type}`")
    if item.days:
        parts.append(f"{item.days}d")
    parts.append(_escape_markdown(issue.title))
    if issue.assignee is not None and issue.assignee.avatar_url:
        avatar = (
            f'<img src="{escape(issue.assignee.avatar_url)}" height="20" width="20" '
            f'alt="@{escape(issue.assignee.login)}" />'
        )
        if issue.assignee.html_url:
            avatar = f"[{avatar}]({issue.assignee.html_url})"
        parts.append(avatar)
    if issue.is_closed:
        parts.append(CLOSED_MARK)

    return "- " + " ".join(parts)


def _markdown_component(component: ComponentReport, badges: bool) -> list[str]:
    name = _escape_markdown(component.name)
    lines = [f"#### {name}{_markdown_counters(component.stats, badges)}", ""]
    lines += [_markdown_issue(item) for item in component.issues]
    lines.append("")
    return lines


def _render_markdown(milestones: list[MilestoneReport], badges: bool) -> str:
    lines: list[str] = []
    for milestone in milestones:
        title = _escape_markdown(milestone.title)
        lines += [f"### {title}{_markdown_counters(milestone.stats, badges)}", ""]
        for component in milestone.components:
            lines += _markdown_component(component, badges)
    return "\n".join(lines).rstrip("\n") + "\n" if lines else ""
