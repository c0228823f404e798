"""Tests for prompt module."""

import json
import pytest

from jira_resume.models import Issue, ReportLanguage, ReportLength, ReportStyle
from jira_resume.prompt import (
    LANGUAGE_PROMPTS,
    LENGTH_GUIDES,
    STYLE_GUIDES,
    build_prompt,
    summarize_issues,
)

from conftest import make_adf, make_issue, make_worklog


@pytest.fixture
def issues():
    return [
        Issue.from_search(make_issue("PROJ-1", "Login page", [
            make_worklog(10, "2024-01-03T10:00:00.000+0000", 3725, make_adf("Implemented login form")),
        ])),
        Issue.from_search(make_issue("PROJ-2", "Docs", [
            make_worklog(11, "2024-01-04T23:30:00.000-0500", 1800, None),
        ])),
    ]


class TestSummarizeIssues:
    def test_structure(self, issues):
        summary = summarize_issues(issues)

        assert summary[0] == {
            "key": "PROJ-1",
            "summary": "Login page",
            "worklogs": [{"timeSpent": "1h 2m", "comment": "Implemented login form", "started": "2024-01-03"}],
        }

    def test_started_is_utc_date(self, issues):
        """23:30 at UTC-5 is the next day in UTC."""
        assert summarize_issues(issues)[1]["worklogs"][0]["started"] == "2024-01-05"

    def test_missing_comment(self, issues):
        assert summarize_issues(issues)[1]["worklogs"][0]["comment"] == "No comment"


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_contains_issue_data(self, issues):
        prompt = build_prompt(issues)

        assert "PROJ-1" in prompt
        assert "Implemented login form" in prompt
        assert json.dumps(summarize_issues(issues), indent=2) in prompt

    @pytest.mark.parametrize("length", list(ReportLength))
    def test_length_guides(self, issues, length):
        prompt = build_prompt(issues, length=length)
        guide = LENGTH_GUIDES[length]

        assert f"Format: {guide.format}" in prompt
        assert f"Maximum Length: {guide.max_length}" in prompt
        for item in guide.structure:
            assert f"* {item}" in prompt

    def test_max_words(self, issues):
        assert "150 words" in build_prompt(issues, length=ReportLength.SMALL)
        assert "300 words" in build_prompt(issues, length=ReportLength.MEDIUM)
        assert "500 words" in build_prompt(issues, length=ReportLength.LONG)

    @pytest.mark.parametrize("style", list(ReportStyle))
    def test_style(self, issues, style):
        assert f"Writing Style: {STYLE_GUIDES[style]}" in build_prompt(issues, style=style)

    def test_language_english(self, issues):
        assert "Language: Write the response in English." in build_prompt(issues)

    def test_language_indonesian(self, issues):
        prompt = build_prompt(issues, language=ReportLanguage.INDONESIAN)
        assert LANGUAGE_PROMPTS[ReportLanguage.INDONESIAN] in prompt
        assert "Bahasa Indonesia" in prompt

    def test_accepts_plain_strings(self, issues):
        assert build_prompt(issues, "small", "casual", "id") == build_prompt(
            issues, ReportLength.SMALL, ReportStyle.CASUAL, ReportLanguage.INDONESIAN
        )

    def test_output_sections(self, issues):
        prompt = build_prompt(issues)

        for section in ("OVERVIEW:", "TASKS AND DETAILS:", "CHALLENGES:", "NEXT STEPS:"):
            assert section in prompt
        assert "Use asterisks (*) for bullet points." in prompt

    def test_deterministic(self, issues):
        assert build_prompt(issues) == build_prompt(issues)

    def test_empty_issues(self):
        assert "Work Activities to Report:\n[]" in build_prompt([])
