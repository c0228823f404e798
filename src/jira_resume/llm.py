"""
LLM 服務 - 透過 OpenRouter (OpenAI 相容 API) 生成報告
"""

import logging
from typing import Optional

import openai
from openai import OpenAI

from .config import Config
from .errors import ApiKeyMissing, ConfigurationError, GenerationFailed, JiraResumeError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a professional resume writer helping to summarize work activities."
ERROR_PREFIX = "Error generating resume: "


class ReportGenerator:
    """OpenRouter 報告生成"""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _client(self, api_key: str) -> OpenAI:
        return OpenAI(
            base_url=self.config.llm_base_url,
            api_key=api_key,
            timeout=self.config.request_timeout,
            max_retries=0,
            default_headers={
                "HTTP-Referer": self.config.http_referer,
                "X-Title": self.config.app_title,
            },
        )

    def generate(self, prompt: str, api_key: str) -> str:
        """
        呼叫 OpenRouter 生成報告

        Args:
            prompt: 報告 prompt
            api_key: OpenRouter API Key

        Returns:
            第一個 choice 的內容（已去除前後空白）

        Raises:
            ApiKeyMissing: 未提供 API Key（不會發出任何請求）
            GenerationFailed: API 回傳非成功狀態或連線失敗
        """
        if not api_key:
            raise ApiKeyMissing("Please set your OpenRouter API key with `jira-resume settings set-key`")

        client = self._client(api_key)
        try:
            response = client.chat.completions.create(
                model=self.config.llm_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APIStatusError as e:
            raise GenerationFailed(
                f"Failed to generate resume with AI ({e.status_code})", e.status_code
            )
        except openai.APIError as e:
            raise GenerationFailed(f"Failed to generate resume with AI: {e}")

        if not response.choices:
            raise GenerationFailed("Failed to generate resume with AI: empty response")
        return (response.choices[0].message.content or "").strip()


def generate_resume_text(prompt: str, api_key: str, generator: ReportGenerator) -> str:
    """生成報告，失敗時回傳錯誤訊息文字而非拋出例外"""
    try:
        return generator.generate(prompt, api_key)
    except ConfigurationError as e:
        logger.warning(f"Resume generation skipped: {e}")
        return f"{ERROR_PREFIX}{e.message}"
    except JiraResumeError as e:
        logger.exception(f"Resume generation error: {e}")
        return f"{ERROR_PREFIX}{e.message}"
