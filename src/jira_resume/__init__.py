"""Jira Resume - Summarize Jira worklogs into a status report."""

__version__ = "1.0.0"

from .config import Config
from .errors import ConfigurationError, NetworkError, PartialFetchError
from .models import Account, DateRange, ReportRequest, WorklogEntry
from .storage import CredentialStore, JsonFileStore, MemoryStore
from .jira_api import WorklogFetcher
from .prompt import build_prompt
from .llm import ReportGenerator
from .formatter import format_worklogs
from .report import ReportService

__all__ = [
    "Config",
    "ConfigurationError",
    "NetworkError",
    "PartialFetchError",
    "Account",
    "DateRange",
    "ReportRequest",
    "WorklogEntry",
    "CredentialStore",
    "JsonFileStore",
    "MemoryStore",
    "WorklogFetcher",
    "build_prompt",
    "ReportGenerator",
    "format_worklogs",
    "ReportService",
]
