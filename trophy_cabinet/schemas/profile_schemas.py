from datetime import datetime
from pydantic import BaseModel, Field, HttpUrl


class ProfileResponse(BaseModel):
    """Schema for profile response"""

    id: str
    display_name: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """Schema for updating the caller's profile"""

    display_name: str | None = Field(None, min_length=2, max_length=255)
    avatar_url: HttpUrl | None = None
