from datetime import datetime
from pydantic import BaseModel, Field, HttpUrl
from trophy_cabinet.models.trophy_template import TrophyTier


class TrophyTemplateCreate(BaseModel):
    """Schema for creating a new trophy template"""

    name: str = Field(..., min_length=2, max_length=255)
    description: str | None = Field(None, max_length=1000)
    icon_url: HttpUrl | None = None
    tier: TrophyTier | None = None
    points: int = Field(default=0, ge=0)


class TrophyTemplateUpdate(BaseModel):
    """Schema for updating a trophy template"""

    name: str | None = Field(None, min_length=2, max_length=255)
    description: str | None = Field(None, max_length=1000)
    icon_url: HttpUrl | None = None
    tier: TrophyTier | None = None
    points: int | None = Field(None, ge=0)


class TrophyTemplateResponse(BaseModel):
    """Schema for trophy template response"""

    id: int
    tenant_id: int
    name: str
    description: str | None
    icon_url: str | None
    tier: TrophyTier | None
    points: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TrophyTemplateDetailResponse(TrophyTemplateResponse):
    """Template with the number of awards a delete would remove"""

    award_count: int


class TrophyTemplateDeleteResponse(BaseModel):
    """Response after deleting a template and its awards"""

    message: str
    deleted_template_id: int
    deleted_awards: int
