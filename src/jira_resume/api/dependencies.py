"""
FastAPI dependencies
"""

from fastapi import Depends

from ..config import Config
from ..report import ReportService
from ..storage import CredentialStore, KeyValueStore


def get_config() -> Config:
    return Config.load()


def get_store(config: Config = Depends(get_config)) -> KeyValueStore:
    """Key-value store backing accounts and settings"""
    return config.create_store()


def get_credentials(store: KeyValueStore = Depends(get_store)) -> CredentialStore:
    return CredentialStore(store)


def get_report_service(
    config: Config = Depends(get_config),
    credentials: CredentialStore = Depends(get_credentials),
) -> ReportService:
    return ReportService.from_config(config, credentials)
