"""
帳號與設定儲存

KeyValueStore 為儲存介面，CredentialStore 透過注入的 store 存取帳號與 API Key，
每次讀取都直接讀取底層儲存（不做記憶體快取）。
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import AccountNotFound, NotConfigured
from .models import Account

logger = logging.getLogger(__name__)

ACCOUNTS_KEY = "jiraAccounts"
API_KEY_KEY = "openRouterApiKey"
LAST_SELECTED_KEY = "lastSelectedAccountId"


class KeyValueStore:
    """鍵值儲存介面"""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """記憶體儲存（測試用）"""

    def __init__(self, data: Optional[dict] = None):
        self.data: dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """JSON 檔案儲存"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        # 內含 token，設定檔案權限為僅擁有者可讀寫
        self.path.chmod(0o600)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class CredentialStore:
    """Jira 帳號與 OpenRouter API Key 管理"""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_accounts(self) -> list[Account]:
        """列出所有帳號"""
        return [Account.from_dict(a) for a in self.store.get(ACCOUNTS_KEY) or []]

    def add_account(self, account: Account) -> None:
        """新增帳號"""
        accounts = self.store.get(ACCOUNTS_KEY) or []
        accounts.append(account.to_dict())
        self.store.set(ACCOUNTS_KEY, accounts)
        logger.info(f"Added account {account.name} ({account.id})")

    def delete_account(self, account_id: str) -> None:
        """刪除帳號（id 不存在時不做任何事）"""
        accounts = self.store.get(ACCOUNTS_KEY) or []
        remaining = [a for a in accounts if str(a.get("id")) != account_id]
        if len(remaining) != len(accounts):
            self.store.set(ACCOUNTS_KEY, remaining)
            logger.info(f"Deleted account {account_id}")

    def get_account(self, account_id: str) -> Account:
        """取得指定帳號"""
        for account in self.list_accounts():
            if account.id == account_id:
                return account
        raise AccountNotFound(f"Account not found: {account_id}")

    def get_api_key(self) -> str:
        """取得 OpenRouter API Key"""
        api_key = self.store.get(API_KEY_KEY)
        if not api_key:
            raise NotConfigured(
                "OpenRouter API key not found. Run `jira-resume settings set-key` to set it."
            )
        return api_key

    def set_api_key(self, api_key: str) -> None:
        self.store.set(API_KEY_KEY, api_key.strip())

    def has_api_key(self) -> bool:
        return bool(self.store.get(API_KEY_KEY))

    def get_last_selected_account_id(self) -> Optional[str]:
        return self.store.get(LAST_SELECTED_KEY) or None

    def set_last_selected_account_id(self, account_id: str) -> None:
        self.store.set(LAST_SELECTED_KEY, account_id)
