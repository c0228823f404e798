"""
Reports Router - Generate a resume from Jira worklogs
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from ...errors import ConfigurationError, NetworkError
from ...models import DateRange, ReportRequest
from ...report import ReportService
from ..dependencies import get_report_service
from ..models.schemas import (
    IssueResponse,
    ReportRequestBody,
    ReportResponse,
    WorklogEntryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/resume", response_model=ReportResponse)
async def generate_resume(
    body: ReportRequestBody,
    service: ReportService = Depends(get_report_service),
):
    """Fetch worklogs for the date range and summarize them"""
    try:
        date_range = DateRange(body.start_date, body.end_date)
        account = service.resolve_account(body.account_id)
        request = ReportRequest(
            date_range=date_range,
            account=account,
            length=body.length,
            style=body.style,
            language=body.language,
        )
        # Jira 與 OpenRouter 呼叫為同步 I/O
        result = await run_in_threadpool(service.generate, request)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NetworkError as e:
        logger.error(f"Report generation aborted: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return ReportResponse(
        resume=result.resume,
        failed=result.failed,
        issues=[
            IssueResponse(
                key=issue.key,
                summary=issue.summary,
                worklog_count=len(issue.worklogs),
                fetch_error=issue.fetch_error,
            )
            for issue in result.issues
        ],
        entries=[
            WorklogEntryResponse(
                issue_key=e.issue_key,
                summary=e.summary,
                time_spent=e.time_spent,
                comment=e.comment,
                started=e.started,
            )
            for e in result.entries
        ],
        raw_html=result.raw_html,
    )
