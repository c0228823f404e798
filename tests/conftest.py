"""Pytest configuration and fixtures."""

import pytest
from datetime import date
from unittest.mock import MagicMock

from jira_resume.models import Account, DateRange
from jira_resume.storage import CredentialStore, MemoryStore


def make_worklog(worklog_id, started, seconds=3600, comment=None):
    """Build a Jira worklog JSON object."""
    return {
        "id": str(worklog_id),
        "started": started,
        "timeSpentSeconds": seconds,
        "comment": comment,
    }


def make_adf(*paragraphs):
    """Build an Atlassian Document Format comment with one text run per paragraph."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": text}]}
            for text in paragraphs
        ],
    }


def make_issue(key, summary, worklogs=None):
    """Build a Jira search result issue."""
    return {
        "key": key,
        "fields": {
            "summary": summary,
            "worklog": {"worklogs": worklogs or []},
        },
    }


@pytest.fixture
def temp_config_dir(tmp_path, monkeypatch):
    """Point config and storage files to a temporary directory."""
    config_dir = tmp_path / ".jira-resume"
    config_dir.mkdir()
    monkeypatch.setattr("jira_resume.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("jira_resume.config.CONFIG_FILE", config_dir / "config.json")
    monkeypatch.setenv("JIRA_RESUME_STORAGE_FILE", str(config_dir / "storage.json"))
    return config_dir


@pytest.fixture
def sample_account():
    """Sample Jira account."""
    return Account(
        id="1704067200000",
        name="Work",
        email="dev@example.com",
        token="api-token-123",
        jira_url="https://example.atlassian.net",
    )


@pytest.fixture
def first_week():
    """2024-01-01 ~ 2024-01-07"""
    return DateRange(date(2024, 1, 1), date(2024, 1, 7))


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def credentials(memory_store, sample_account):
    """Credential store with one account and an API key."""
    store = CredentialStore(memory_store)
    store.add_account(sample_account)
    store.set_api_key("sk-or-test")
    return store


@pytest.fixture
def proj1_search_response():
    """Search result: PROJ-1 with one worklog in range and one outside."""
    return [make_issue("PROJ-1", "Login page")]


@pytest.fixture
def proj1_worklogs():
    return [
        make_worklog(10, "2024-01-03T10:00:00.000+0000", 3725, make_adf("Implemented login form")),
        make_worklog(11, "2023-12-20T10:00:00.000+0000", 1800, "Old work"),
    ]


@pytest.fixture
def mock_jira_client(proj1_search_response, proj1_worklogs):
    """Mock JiraClient returning the PROJ-1 scenario."""
    client = MagicMock()
    client.search_issues.return_value = proj1_search_response
    client.get_issue_worklogs.return_value = proj1_worklogs
    return client


@pytest.fixture
def mock_generator():
    """Mock ReportGenerator."""
    generator = MagicMock()
    generator.generate.return_value = "OVERVIEW:\n* Implemented login form"
    return generator
