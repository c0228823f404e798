"""
Settings Router - OpenRouter API key management
"""

from fastapi import APIRouter, Depends, HTTPException

from ...config import Config
from ...storage import CredentialStore
from ..dependencies import get_config, get_credentials
from ..models.schemas import ApiKeyUpdate, SettingsResponse, SuccessResponse

router = APIRouter()


@router.get("", response_model=SettingsResponse)
async def get_settings(
    config: Config = Depends(get_config),
    credentials: CredentialStore = Depends(get_credentials),
):
    """Get current settings (without secrets)"""
    return SettingsResponse(
        api_key_configured=credentials.has_api_key(),
        llm_model=config.llm_model,
        last_selected_account_id=credentials.get_last_selected_account_id(),
    )


@router.put("/api-key", response_model=SuccessResponse)
async def set_api_key(
    update: ApiKeyUpdate,
    credentials: CredentialStore = Depends(get_credentials),
):
    """Save the OpenRouter API key"""
    if not update.api_key.strip():
        raise HTTPException(status_code=400, detail="API key cannot be empty")

    credentials.set_api_key(update.api_key)
    return SuccessResponse(message="API key saved successfully!")
