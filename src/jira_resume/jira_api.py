"""
Jira REST API 整合模組

- Jira Cloud Basic Auth (email:token)
- 以 JQL 搜尋有 worklog 的 issue，再平行取得每個 issue 的完整 worklog
"""

import base64
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .config import Config
from .errors import NetworkError, PartialFetchError
from .models import Account, DateRange, Issue, Worklog

logger = logging.getLogger(__name__)

# 網路請求預設 timeout（秒）
DEFAULT_TIMEOUT = 30
MAX_RESULTS = 100


class JiraClient:
    """Jira REST API v3 客戶端"""

    def __init__(self, base_url: str, email: str, token: str, timeout: float = DEFAULT_TIMEOUT):
        """
        初始化 Jira 客戶端

        Args:
            base_url: Jira URL (e.g., https://example.atlassian.net)
            email: 帳號 Email
            token: API Token
            timeout: 請求 timeout（秒）
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        auth_string = base64.b64encode(f"{email}:{token}".encode()).decode()
        self.session.headers.update({
            "Authorization": f"Basic {auth_string}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Atlassian-Token": "no-check",
        })

    @classmethod
    def for_account(cls, account: Account, timeout: float = DEFAULT_TIMEOUT) -> "JiraClient":
        return cls(account.jira_url, account.email, account.token, timeout=timeout)

    def search_issues(self, jql: str, fields: str = "summary,worklog",
                      max_results: int = MAX_RESULTS) -> list[dict]:
        """以 JQL 搜尋 issue"""
        params = {
            "jql": jql,
            "fields": fields,
            "maxResults": max_results,
        }
        try:
            resp = self.session.get(
                f"{self.base_url}/rest/api/3/search",
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch worklogs: {e}")

        if not resp.ok:
            raise NetworkError(
                f"Failed to fetch worklogs ({resp.status_code}): {_error_message(resp)}",
                resp.status_code,
            )

        # SSO / 登入頁會回傳 200 的 HTML
        try:
            data = resp.json()
        except ValueError as e:
            raise NetworkError(f"Failed to fetch worklogs: {e}", resp.status_code)
        if not isinstance(data, dict):
            raise NetworkError("Failed to fetch worklogs: unexpected response body", resp.status_code)
        return data.get("issues") or []

    def get_issue_worklogs(self, issue_key: str) -> list[dict]:
        """取得 issue 的完整 worklog 列表"""
        resp = self.session.get(
            f"{self.base_url}/rest/api/3/issue/{issue_key}/worklog",
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json().get("worklogs") or []


def _error_message(resp: requests.Response) -> str:
    """從 Jira 錯誤回應取出訊息"""
    try:
        data = resp.json()
    except ValueError:
        return resp.reason or "Unknown error"
    if isinstance(data, dict):
        messages = data.get("errorMessages") or []
        return data.get("message") or "; ".join(messages) or resp.reason or "Unknown error"
    return resp.reason or "Unknown error"


def build_jql(date_range: DateRange) -> str:
    """建立查詢當前使用者在日期範圍內有 worklog 的 JQL"""
    return (
        f'worklogAuthor = currentUser() '
        f'AND worklogDate >= "{date_range.start.isoformat()}" '
        f'AND worklogDate <= "{date_range.end.isoformat()}" '
        f'ORDER BY updated DESC'
    )


def filter_worklogs(worklogs: list[Worklog], date_range: DateRange) -> list[Worklog]:
    """只保留開始時間在範圍內的 worklog"""
    return [w for w in worklogs if date_range.contains(w.started)]


def filter_issues(issues: list[Issue], date_range: DateRange) -> list[Issue]:
    """
    依日期範圍過濾每個 issue 的 worklog，並移除過濾後沒有 worklog 的 issue

    取得 worklog 失敗的 issue 保持原樣
    """
    result = []
    for issue in issues:
        if issue.degraded:
            result.append(issue)
            continue
        worklogs = filter_worklogs(issue.worklogs, date_range)
        if worklogs:
            result.append(Issue(key=issue.key, summary=issue.summary, worklogs=worklogs))
    return result


@dataclass
class FetchOutcome:
    """單一 issue 的 worklog 取得結果"""
    issue: Issue
    worklogs: Optional[list[Worklog]] = None
    error: Optional[PartialFetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_issue(self) -> Issue:
        if self.ok:
            return Issue(key=self.issue.key, summary=self.issue.summary, worklogs=self.worklogs)
        return Issue(
            key=self.issue.key,
            summary=self.issue.summary,
            worklogs=self.issue.worklogs,
            fetch_error=self.error.message,
        )


class WorklogFetcher:
    """取得日期範圍內的 Jira worklog"""

    def __init__(
        self,
        client_factory: Optional[Callable[[Account], JiraClient]] = None,
        max_workers: int = 8,
        max_results: int = MAX_RESULTS,
    ):
        self.client_factory = client_factory or JiraClient.for_account
        self.max_workers = max_workers
        self.max_results = max_results

    @classmethod
    def from_config(cls, config: Config) -> "WorklogFetcher":
        return cls(
            client_factory=lambda account: JiraClient.for_account(account, timeout=config.request_timeout),
            max_workers=config.max_workers,
            max_results=config.max_results,
        )

    def fetch(self, date_range: DateRange, account: Account) -> list[Issue]:
        """
        取得帳號在日期範圍內的 worklog

        Args:
            date_range: 日期範圍
            account: Jira 帳號

        Returns:
            有 worklog 的 issue 列表（依 search 結果排序）

        Raises:
            NetworkError: search 請求失敗
        """
        client = self.client_factory(account)
        jql = build_jql(date_range)
        logger.info(f"Searching issues on {account.jira_url} ({date_range})")

        raw_issues = client.search_issues(jql, max_results=self.max_results)
        if not raw_issues:
            logger.info("No issues found")
            return []

        issues = [Issue.from_search(data) for data in raw_issues]
        outcomes = self._fetch_all(client, issues)

        failed = [o for o in outcomes if not o.ok]
        if failed:
            logger.warning(f"{len(failed)}/{len(outcomes)} worklog requests failed")

        result = filter_issues([o.to_issue() for o in outcomes], date_range)
        logger.info(f"Fetched worklogs for {len(result)} of {len(issues)} issues")
        return result

    def _fetch_all(self, client: JiraClient, issues: list[Issue]) -> list[FetchOutcome]:
        """平行取得所有 issue 的 worklog，等待全部完成"""
        outcomes: list[Optional[FetchOutcome]] = [None] * len(issues)
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {pool.submit(self._fetch_one, client, issue): i for i, issue in enumerate(issues)}
            for future, idx in futures.items():
                outcomes[idx] = future.result()
        return outcomes

    @staticmethod
    def _fetch_one(client: JiraClient, issue: Issue) -> FetchOutcome:
        try:
            raw = client.get_issue_worklogs(issue.key)
            worklogs = [Worklog.from_jira(w) for w in raw]
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            error = PartialFetchError(issue.key, str(e), status)
            logger.warning(error.message)
            return FetchOutcome(issue=issue, error=error)
        except Exception as e:
            error = PartialFetchError(issue.key, str(e) or type(e).__name__)
            logger.warning(error.message)
            return FetchOutcome(issue=issue, error=error)
        return FetchOutcome(issue=issue, worklogs=worklogs)
