"""
worklog 顯示格式
"""

import html

from rich.table import Table

from .models import DateRange, Issue, WorklogEntry

NO_WORKLOGS = "No worklogs found"


def collect_entries(issues: list[Issue], date_range: DateRange) -> list[WorklogEntry]:
    """展開所有 worklog，再次依日期範圍過濾，按開始時間由新到舊排序"""
    entries = [
        WorklogEntry.from_worklog(issue, log)
        for issue in issues
        for log in issue.worklogs
        if date_range.contains(log.started)
    ]
    entries.sort(key=lambda e: e.started, reverse=True)
    return entries


def render_html(entries: list[WorklogEntry]) -> str:
    if not entries:
        return NO_WORKLOGS
    return "".join(
        '<div class="worklog-item">'
        f"<h3>{html.escape(e.issue_key)} [{e.time_spent}]</h3>"
        f"<p>{html.escape(e.comment)}</p>"
        "</div>"
        for e in entries
    )


def render_table(entries: list[WorklogEntry]) -> Table:
    """CLI 用表格"""
    table = Table(title="Worklogs")
    table.add_column("Started", style="dim")
    table.add_column("Issue", style="cyan")
    table.add_column("Time", justify="right", style="green")
    table.add_column("Comment")

    for e in entries:
        table.add_row(e.started.strftime("%Y-%m-%d %H:%M"), e.issue_key, e.time_spent, e.comment)

    return table


def format_worklogs(issues: list[Issue], date_range: DateRange) -> str:
    return render_html(collect_entries(issues, date_range))
