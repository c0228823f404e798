"""
Accounts Router - Jira account management API
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ...errors import AccountNotFound
from ...models import Account
from ...storage import CredentialStore
from ..dependencies import get_credentials
from ..models.schemas import (
    AccountCreate,
    AccountListResponse,
    AccountResponse,
    SuccessResponse,
)

router = APIRouter()


def to_account_response(account: Account, last_selected: str = None) -> AccountResponse:
    """Convert Account to response format (token omitted)."""
    return AccountResponse(
        id=account.id,
        name=account.name,
        email=account.email,
        jira_url=account.jira_url,
        last_selected=account.id == last_selected,
    )


@router.get("", response_model=AccountListResponse)
async def list_accounts(credentials: CredentialStore = Depends(get_credentials)):
    """List all Jira accounts"""
    last_selected = credentials.get_last_selected_account_id()
    accounts = [to_account_response(a, last_selected) for a in credentials.list_accounts()]
    return AccountListResponse(accounts=accounts, total=len(accounts))


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def add_account(
    body: AccountCreate,
    credentials: CredentialStore = Depends(get_credentials),
):
    """Add a Jira account"""
    account = Account.create(
        name=body.name,
        email=body.email,
        token=body.token,
        jira_url=body.jira_url,
    )
    credentials.add_account(account)
    return to_account_response(account)


@router.delete("/{account_id}", response_model=SuccessResponse)
async def delete_account(
    account_id: str,
    credentials: CredentialStore = Depends(get_credentials),
):
    """Delete a Jira account"""
    try:
        credentials.get_account(account_id)
    except AccountNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    credentials.delete_account(account_id)
    return SuccessResponse(message="Account deleted successfully!")
