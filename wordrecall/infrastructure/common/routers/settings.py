from fastapi import APIRouter

from wordrecall.feature_flags import get_feature_flags
from wordrecall.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Public endpoint, no authentication required.
    """
    flags = get_feature_flags()
    return AppSettingsResponse(
        allow_user_registrations=flags.user_registrations, feature_flags=flags
    )
