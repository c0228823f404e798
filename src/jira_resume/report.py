"""
報告生成流程

選擇帳號與日期範圍 → 取得 Jira worklog → 構建 prompt → OpenRouter 生成 → 格式化原始資料
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import Config
from .errors import ConfigurationError, NotConfigured
from .formatter import collect_entries, render_html
from .jira_api import WorklogFetcher
from .llm import ERROR_PREFIX, ReportGenerator, generate_resume_text
from .models import Account, Issue, ReportRequest, WorklogEntry
from .prompt import build_prompt
from .storage import CredentialStore

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    """報告生成結果"""
    resume: str
    issues: list[Issue] = field(default_factory=list)
    entries: list[WorklogEntry] = field(default_factory=list)
    raw_html: str = ""

    @property
    def failed(self) -> bool:
        return self.resume.startswith(ERROR_PREFIX)


class ReportService:
    """整合 worklog 取得與報告生成"""

    def __init__(
        self,
        credentials: CredentialStore,
        fetcher: Optional[WorklogFetcher] = None,
        generator: Optional[ReportGenerator] = None,
    ):
        self.credentials = credentials
        self.fetcher = fetcher or WorklogFetcher()
        self.generator = generator or ReportGenerator()

    @classmethod
    def from_config(cls, config: Config, credentials: Optional[CredentialStore] = None) -> "ReportService":
        return cls(
            credentials=credentials or CredentialStore(config.create_store()),
            fetcher=WorklogFetcher.from_config(config),
            generator=ReportGenerator(config),
        )

    def resolve_account(self, account_id: Optional[str] = None) -> Account:
        """取得指定帳號，未指定時使用上次選擇的帳號"""
        account_id = account_id or self.credentials.get_last_selected_account_id()
        if not account_id:
            raise ConfigurationError("Please select an account")
        return self.credentials.get_account(account_id)

    def generate(self, request: ReportRequest) -> ReportResult:
        """
        生成報告

        Raises:
            ConfigurationError: 帳號設定不完整
            NetworkError: Jira search 請求失敗
        """
        self.credentials.set_last_selected_account_id(request.account.id)

        issues = self.fetcher.fetch(request.date_range, request.account)
        prompt = build_prompt(issues, request.length, request.style, request.language)

        try:
            api_key = self.credentials.get_api_key()
        except NotConfigured as e:
            logger.warning(str(e))
            api_key = ""

        resume = generate_resume_text(prompt, api_key, self.generator)
        entries = collect_entries(issues, request.date_range)

        return ReportResult(
            resume=resume,
            issues=issues,
            entries=entries,
            raw_html=render_html(entries),
        )
