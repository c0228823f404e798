"""
錯誤類型定義

- ConfigurationError: 未選擇帳號、未設定 API Key、日期範圍錯誤
- NetworkError: Jira 或 OpenRouter 呼叫失敗
- PartialFetchError: 單一 issue 的 worklog 取得失敗（局部恢復，不會中斷整批）
"""

from typing import Optional


class JiraResumeError(Exception):
    """所有錯誤的基底類別"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(JiraResumeError):
    """配置不完整"""


class NotConfigured(ConfigurationError):
    """儲存區中找不到必要設定"""


class ApiKeyMissing(ConfigurationError):
    """呼叫 OpenRouter 前未提供 API Key"""


class AccountNotFound(ConfigurationError):
    """指定的帳號不存在"""


class InvalidDateRange(ConfigurationError):
    """結束日期早於開始日期"""


class NetworkError(JiraResumeError):
    """遠端 API 呼叫失敗"""


class GenerationFailed(NetworkError):
    """OpenRouter 回傳非成功狀態"""


class PartialFetchError(NetworkError):
    """單一 issue 的 worklog 取得失敗"""

    def __init__(self, issue_key: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch worklog for issue {issue_key}: {message}", status_code)
        self.issue_key = issue_key
