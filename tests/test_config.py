"""Tests for config module."""

import json

from jira_resume.config import Config
from jira_resume.storage import JsonFileStore


class TestConfig:
    """Tests for Config class."""

    def test_default_values(self):
        """Test default configuration values."""
        config = Config()

        assert config.llm_model == "meta-llama/llama-3.2-3b-instruct:free"
        assert config.llm_base_url == "https://openrouter.ai/api/v1"
        assert config.max_results == 100
        assert config.request_timeout == 30

    def test_load_without_file(self, temp_config_dir):
        config = Config.load()
        assert config.llm_model == Config().llm_model

    def test_load_from_file(self, temp_config_dir):
        (temp_config_dir / "config.json").write_text(json.dumps({
            "llm_model": "openai/gpt-4o-mini",
            "max_workers": 2,
            "unknown_key": "ignored",
        }))

        config = Config.load()

        assert config.llm_model == "openai/gpt-4o-mini"
        assert config.max_workers == 2

    def test_invalid_file_falls_back_to_defaults(self, temp_config_dir):
        (temp_config_dir / "config.json").write_text("{broken")

        config = Config.load()

        assert config.max_workers == Config().max_workers

    def test_env_overrides_file(self, temp_config_dir, monkeypatch):
        (temp_config_dir / "config.json").write_text(json.dumps({"max_workers": 2}))
        monkeypatch.setenv("JIRA_RESUME_MAX_WORKERS", "16")
        monkeypatch.setenv("JIRA_RESUME_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("JIRA_RESUME_LLM_MODEL", "x/y")

        config = Config.load()

        assert config.max_workers == 16
        assert config.request_timeout == 12.5
        assert config.llm_model == "x/y"

    def test_save(self, temp_config_dir):
        config = Config(llm_model="x/y")
        config.save()

        path = temp_config_dir / "config.json"
        assert json.loads(path.read_text())["llm_model"] == "x/y"
        assert path.stat().st_mode & 0o777 == 0o600

    def test_create_store(self, temp_config_dir):
        store = Config.load().create_store()

        assert isinstance(store, JsonFileStore)
        assert store.path == temp_config_dir / "storage.json"
