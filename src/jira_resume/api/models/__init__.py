"""
API Models - Pydantic schemas for the API
"""

from .schemas import (
    # Common
    SuccessResponse,
    # Accounts
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    # Settings
    ApiKeyUpdate,
    SettingsResponse,
    # Reports
    ReportRequestBody,
    WorklogEntryResponse,
    IssueResponse,
    ReportResponse,
)

__all__ = [
    "SuccessResponse",
    "AccountCreate",
    "AccountResponse",
    "AccountListResponse",
    "ApiKeyUpdate",
    "SettingsResponse",
    "ReportRequestBody",
    "WorklogEntryResponse",
    "IssueResponse",
    "ReportResponse",
]
