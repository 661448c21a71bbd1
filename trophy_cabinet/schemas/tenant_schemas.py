from pydantic import BaseModel, Field, HttpUrl
from datetime import datetime
from trophy_cabinet.models.role import TenantRole

SLUG_PATTERN = r"^[a-z0-9-]+$"


class TenantCreate(BaseModel):
    """Register a new club; the caller becomes its OWNER"""

    name: str = Field(..., min_length=2, max_length=255)
    slug: str = Field(
        ...,
        min_length=2,
        max_length=100,
        pattern=SLUG_PATTERN,
        description="Lowercase letters, numbers and hyphens only",
    )
    logo_url: HttpUrl | None = None


class TenantUpdate(BaseModel):
    """Update club details (OWNER only)"""

    name: str | None = Field(None, min_length=2, max_length=255)
    logo_url: HttpUrl | None = None


class TenantResponse(BaseModel):
    """Tenant details response"""

    id: int
    name: str
    slug: str
    logo_url: str | None
    stripe_subscription_status: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserTenantResponse(BaseModel):
    """A tenant the caller belongs to, with the caller's role in it"""

    id: int
    name: str
    slug: str
    logo_url: str | None
    role: TenantRole
    membership_id: int
    joined_at: datetime | None
    created_at: datetime
