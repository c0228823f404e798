"""Tests for formatter module."""

from rich.table import Table

from jira_resume.formatter import (
    NO_WORKLOGS,
    collect_entries,
    format_worklogs,
    render_html,
    render_table,
)
from jira_resume.models import Issue

from conftest import make_adf, make_issue, make_worklog


def build_issues():
    return [
        Issue.from_search(make_issue("PROJ-1", "Login page", [
            make_worklog(1, "2024-01-02T09:00:00.000+0000", 3600, "Older"),
            make_worklog(2, "2024-01-20T09:00:00.000+0000", 3600, "Outside"),
        ])),
        Issue.from_search(make_issue("PROJ-2", "Docs", [
            make_worklog(3, "2024-01-05T09:00:00.000+0000", 5400, make_adf("Newest")),
        ])),
    ]


class TestCollectEntries:
    def test_filters_and_sorts_newest_first(self, first_week):
        entries = collect_entries(build_issues(), first_week)

        assert [e.comment for e in entries] == ["Newest", "Older"]
        assert entries[0].issue_key == "PROJ-2"
        assert entries[0].time_spent == "1h 30m"

    def test_refilters_degraded_issues(self, first_week):
        """Unfiltered worklogs from a failed fetch are still limited to the range."""
        degraded = build_issues()[0]
        degraded.fetch_error = "boom"

        entries = collect_entries([degraded], first_week)

        assert [e.comment for e in entries] == ["Older"]


class TestRenderHtml:
    def test_empty(self):
        assert render_html([]) == NO_WORKLOGS

    def test_item_markup(self, first_week):
        html = render_html(collect_entries(build_issues(), first_week))

        assert html.count('<div class="worklog-item">') == 2
        assert "<h3>PROJ-2 [1h 30m]</h3>" in html
        assert "<p>Newest</p>" in html
        assert html.index("PROJ-2") < html.index("PROJ-1")

    def test_escapes_text(self, first_week):
        issues = [Issue.from_search(make_issue("PROJ-1", "S", [
            make_worklog(1, "2024-01-02T09:00:00.000+0000", 60, "<script>alert(1)</script>"),
        ]))]

        html = format_worklogs(issues, first_week)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestRenderTable:
    def test_rows(self, first_week):
        table = render_table(collect_entries(build_issues(), first_week))

        assert isinstance(table, Table)
        assert table.row_count == 2


def test_format_worklogs_no_entries(first_week):
    assert format_worklogs([], first_week) == NO_WORKLOGS
