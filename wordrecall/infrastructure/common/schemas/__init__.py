from .response_wrappers import SuccessResponse
from .settings_schemas import AppSettingsResponse

__all__ = [
    "AppSettingsResponse",
    "SuccessResponse",
]
