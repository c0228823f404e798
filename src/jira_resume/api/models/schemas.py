"""
Pydantic schemas for the Jira Resume API
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...models import ReportLanguage, ReportLength, ReportStyle


# ============================================================
# Common
# ============================================================

class SuccessResponse(BaseModel):
    """Generic success response"""
    success: bool = True
    message: str


# ============================================================
# Account Schemas
# ============================================================

class AccountCreate(BaseModel):
    """Request to add a Jira account"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    token: str = Field(min_length=1)
    jira_url: str = Field(min_length=1)


class AccountResponse(BaseModel):
    """Jira account (without token)"""
    id: str
    name: str
    email: str
    jira_url: str
    last_selected: bool = False


class AccountListResponse(BaseModel):
    """List of Jira accounts"""
    accounts: list[AccountResponse]
    total: int


# ============================================================
# Settings Schemas
# ============================================================

class ApiKeyUpdate(BaseModel):
    """OpenRouter API key update request"""
    api_key: str


class SettingsResponse(BaseModel):
    """Settings response (safe version without secrets)"""
    api_key_configured: bool
    llm_model: str
    last_selected_account_id: Optional[str] = None


# ============================================================
# Report Schemas
# ============================================================

class ReportRequestBody(BaseModel):
    """Request to generate a resume"""
    start_date: date
    end_date: date
    account_id: Optional[str] = None  # Defaults to last selected account
    length: ReportLength = ReportLength.MEDIUM
    style: ReportStyle = ReportStyle.PROFESSIONAL
    language: ReportLanguage = ReportLanguage.ENGLISH


class WorklogEntryResponse(BaseModel):
    """Single worklog shown in the raw data pane"""
    issue_key: str
    summary: str
    time_spent: str
    comment: str
    started: datetime


class IssueResponse(BaseModel):
    """Issue with worklogs used for the report"""
    key: str
    summary: str
    worklog_count: int
    fetch_error: Optional[str] = None


class ReportResponse(BaseModel):
    """Generated resume with raw worklog data"""
    resume: str
    failed: bool
    issues: list[IssueResponse]
    entries: list[WorklogEntryResponse]
    raw_html: str
