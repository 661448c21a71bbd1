from datetime import date, datetime
from pydantic import BaseModel, Field, model_validator


class SeasonCreate(BaseModel):
    """Schema for creating a season"""

    name: str = Field(..., min_length=2, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = False

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SeasonResponse(BaseModel):
    id: int
    tenant_id: int
    name: str
    start_date: date | None
    end_date: date | None
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class TeamCreate(BaseModel):
    """Schema for creating a team"""

    name: str = Field(..., min_length=2, max_length=255)
    season_id: int | None = Field(None, gt=0)


class TeamResponse(BaseModel):
    id: int
    tenant_id: int
    season_id: int | None
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
