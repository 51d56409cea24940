"""Tests for report rendering."""

from typing import Any

from gh_milestones.github_client.models import GitHubIssue
from gh_milestones.report.aggregate import aggregate
from gh_milestones.report.models import IssueStats
from gh_milestones.report.render import (
    CLOSED_MARK,
    OutputStyle,
    badge_url,
    completed_badge,
    days_badge,
    render,
)


class TestBadges:
    """Test shields.io badge URLs."""

    def test_completed_badge_escapes_slash(self) -> None:
        url = completed_badge(IssueStats(closed=1, total=2))
        assert url == (
            "https://img.shields.io/badge/completed-1%2F2-blue.svg?style=flat-square"
        )

    def test_days_badge(self) -> None:
        url = days_badge(IssueStats(days=13))
        assert url == (
            "https://img.shields.io/badge/remaining-13d-green.svg?style=flat-square"
        )

    def test_badge_url_query_escapes_spaces(self) -> None:
        assert "-a+b-" in badge_url("x", "a b", "red")


class TestTableRender:
    """Test the HTML table layout."""

    def test_structure_and_order(self, sample_issues: list[GitHubIssue]) -> None:
        html = render(aggregate(sample_issues, ["v1.0"]), OutputStyle.TABLE)

        assert html.startswith("<table>")
        assert html.rstrip().endswith("</table>")
        assert "<h3>v1.0 " in html
        assert html.index("<h6>api ") < html.index("<h6>ui ")
        assert html.index(">#1</a>") < html.index(">#2</a>") < html.index(">#3</a>")

    def test_issue_row_contents(self, sample_issues: list[GitHubIssue]) -> None:
        html = render(aggregate(sample_issues, ["v1.0"]))

        assert '<a href="https://github.com/testorg/testrepo/issues/1">#1</a>' in html
        assert "<td><kbd>bug</kbd></td>" in html
        assert "<td>3d</td>" in html
        assert "<td>5d</td>" in html
        assert "<td>Issue 1</td>" in html
        assert '<a href="https://github.com/alice"><img valign="middle"' in html
        assert html.count(f"<td>{CLOSED_MARK}</td>") == 1

    def test_missing_optional_fields_render_empty(self, make_issue: Any) -> None:
        issue = make_issue(4, labels=["component: api"])

        html = render(aggregate([issue], ["v1.0"]))

        assert html.count("<td></td>") == 3  # type, days, closed
        assert '<td width="60"></td>' in html
        assert "None" not in html

    def test_badges(self, sample_issues: list[GitHubIssue]) -> None:
        html = render(aggregate(sample_issues, ["v1.0"]))

        assert completed_badge(IssueStats(closed=1, total=3)) in html
        assert "remaining-8d-green" in html
        assert "completed-1%2F2-blue" in html

    def test_without_badges(self, sample_issues: list[GitHubIssue]) -> None:
        html = render(aggregate(sample_issues, ["v1.0"]), badges=False)

        assert "img.shields.io" not in html
        assert "<h3>v1.0 <small>1/3 closed, 8d remaining</small></h3>" in html
        assert "<h6>api <small>1/2 closed, 3d remaining</small></h6>" in html

    def test_title_is_escaped(self, make_issue: Any) -> None:
        issue = make_issue(1, labels=["component: api"], title="<script> & co")

        html = render(aggregate([issue], ["v1.0"]))

        assert "<td>&lt;script&gt; &amp; co</td>" in html

    def test_empty_report_has_no_headings(self) -> None:
        html = render([])

        assert "<h3>" not in html
        assert "<tr>" not in html


class TestMarkdownRender:
    """Test the Markdown list layout."""

    def test_structure(self, sample_issues: list[GitHubIssue]) -> None:
        text = render(aggregate(sample_issues, ["v1.0"]), OutputStyle.MARKDOWN)
        lines = text.splitlines()

        assert lines[0].startswith("### v1.0 ![remaining](")
        assert "#### api ![remaining](" in text
        assert text.index("#### api") < text.index("#### ui")
        assert (
            "- [#1](https://github.com/testorg/testrepo/issues/1) `bug` 3d Issue 1"
            in lines
        )

    def test_assignee_and_closed_marker(self, sample_issues: list[GitHubIssue]) -> None:
        text = render(aggregate(sample_issues, ["v1.0"]), OutputStyle.MARKDOWN)

        closed_line = next(line for line in text.splitlines() if "[#2]" in line)
        assert closed_line.endswith(CLOSED_MARK)
        assert 'alt="@alice"' in closed_line
        assert "](https://github.com/alice)" in closed_line

    def test_without_badges(self, sample_issues: list[GitHubIssue]) -> None:
        text = render(
            aggregate(sample_issues, ["v1.0"]), OutputStyle.MARKDOWN, badges=False
        )

        assert "### v1.0 (1/3 closed, 8d remaining)" in text
        assert "#### ui (0/1 closed, 5d remaining)" in text

    def test_plain_issue_line(self, make_issue: Any) -> None:
        issue = make_issue(7, labels=["component: api"], title="Fix *all* [things]")

        text = render(aggregate([issue], ["v1.0"]), OutputStyle.MARKDOWN)

        expected = (
            "- [#7](https://github.com/testorg/testrepo/issues/7) "
            "Fix \\*all\\* \\[things\\]"
        )
        assert expected in text.splitlines()

    def test_empty_report(self) -> None:
        assert render([], OutputStyle.MARKDOWN) == ""

    def test_headings_are_escaped(self, make_issue: Any) -> None:
        issue = make_issue(1, milestone="v1_*beta*", labels=["component: [core]_x"])

        text = render(
            aggregate([issue], ["v1_*beta*"]), OutputStyle.MARKDOWN, badges=False
        )
        lines = text.splitlines()

        assert lines[0] == "### v1\\_\\*beta\\* (0/1 closed, 0d remaining)"
        assert "#### \\[core\\]\\_x (0/1 closed, 0d remaining)" in lines
