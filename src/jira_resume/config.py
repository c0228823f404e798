"""
配置管理模組

優先順序：環境變數 (JIRA_RESUME_*) > config.json > 預設值
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".jira-resume"
CONFIG_FILE = CONFIG_DIR / "config.json"
STORAGE_FILE = CONFIG_DIR / "storage.json"

ENV_PREFIX = "JIRA_RESUME_"


@dataclass
class Config:
    """應用程式配置"""
    storage_file: str = str(STORAGE_FILE)   # 帳號與 API Key 儲存檔
    # OpenRouter 配置
    llm_model: str = "meta-llama/llama-3.2-3b-instruct:free"
    llm_base_url: str = "https://openrouter.ai/api/v1"
    app_title: str = "Jira Worklog Resume Generator"
    http_referer: str = "https://github.com/jira-resume/jira-resume"
    # Jira 查詢配置
    max_results: int = 100                  # search API 最多回傳 issue 數
    max_workers: int = 8                    # 平行取得 worklog 的執行緒數
    request_timeout: float = 30             # 網路請求 timeout（秒）
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Config":
        """載入配置"""
        data = {}
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = {k: v for k, v in json.load(f).items() if k in cls.__dataclass_fields__}
            except (OSError, json.JSONDecodeError, AttributeError) as e:
                logger.warning(f"Ignoring invalid config file {CONFIG_FILE}: {e}")
                data = {}

        load_dotenv()
        for fld in fields(cls):
            value = os.environ.get(ENV_PREFIX + fld.name.upper())
            if value is None:
                continue
            if fld.type is int:
                data[fld.name] = int(value)
            elif fld.type is float:
                data[fld.name] = float(value)
            else:
                data[fld.name] = value

        return cls(**data)

    def save(self):
        """儲存配置"""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, 'w') as f:
            json.dump(asdict(self), f, indent=2)
        CONFIG_FILE.chmod(0o600)

    def create_store(self):
        """建立帳號儲存"""
        from .storage import JsonFileStore
        return JsonFileStore(Path(self.storage_file).expanduser())
