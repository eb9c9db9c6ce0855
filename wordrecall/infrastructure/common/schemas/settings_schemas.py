from pydantic import BaseModel, Field

from wordrecall.feature_flags import FeatureFlags


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    allow_user_registrations: bool = Field(..., description="Whether user registration is enabled")
    feature_flags: FeatureFlags = Field(..., description="All feature flags")
