from datetime import datetime
from pydantic import BaseModel, Field
from trophy_cabinet.models.trophy_template import TrophyTier


class AwardCreate(BaseModel):
    """Schema for granting an award"""

    trophy_template_id: int = Field(..., gt=0, description="Trophy to award")
    recipient_user_id: str = Field(..., min_length=1, description="Recipient's user id")
    season_id: int | None = Field(None, gt=0)
    team_id: int | None = Field(None, gt=0)
    notes: str | None = Field(None, max_length=1000)
    is_public: bool = True


class AwardTrophySummary(BaseModel):
    id: int
    name: str
    description: str | None
    icon_url: str | None
    tier: TrophyTier | None
    points: int

    model_config = {"from_attributes": True}


class AwardProfileSummary(BaseModel):
    id: str
    display_name: str | None
    avatar_url: str | None

    model_config = {"from_attributes": True}


class AwardGroupSummary(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class AwardResponse(BaseModel):
    """Award with its template, people, season and team"""

    model_config = {"from_attributes": True}

    id: int
    tenant_id: int
    trophy_template_id: int
    recipient_user_id: str
    awarded_by_user_id: str
    season_id: int | None
    team_id: int | None
    awarded_at: datetime
    notes: str | None
    is_public: bool
    created_at: datetime
    trophy_template: AwardTrophySummary
    recipient: AwardProfileSummary
    awarded_by: AwardProfileSummary
    season: AwardGroupSummary | None
    team: AwardGroupSummary | None


class AwardListResponse(BaseModel):
    """Schema for list of awards"""

    awards: list[AwardResponse]
    total: int
    total_points: int
