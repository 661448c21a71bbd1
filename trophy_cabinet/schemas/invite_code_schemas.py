from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from trophy_cabinet.core.timeutils import utcnow
from trophy_cabinet.models.role import TenantRole, INVITABLE_ROLES


class InviteCodeCreate(BaseModel):
    """Schema for issuing a new invite code"""

    role_default: TenantRole = Field(
        default=TenantRole.PLAYER, description="Role granted on redemption (default: player)"
    )
    expires_at: datetime | None = Field(None, description="Optional expiry (ISO 8601)")
    max_uses: int | None = Field(None, ge=1, description="Optional cap on redemptions")

    @field_validator("role_default")
    @classmethod
    def role_must_be_invitable(cls, value: TenantRole) -> TenantRole:
        if value not in INVITABLE_ROLES:
            raise ValueError("Invite codes can grant admin, staff or player only")
        return value


class InviteCodeResponse(BaseModel):
    """Schema for invite code response"""

    id: int
    tenant_id: int
    code: str
    role_default: TenantRole
    expires_at: datetime | None
    max_uses: int | None
    uses_count: int
    is_active: bool
    is_usable: bool
    created_by_user_id: str | None
    created_at: datetime

    @classmethod
    def from_invite_code(cls, invite_code, now: datetime | None = None) -> "InviteCodeResponse":
        # is_usable is derived on every read, never stored
        return cls(
            id=invite_code.id,
            tenant_id=invite_code.tenant_id,
            code=invite_code.code,
            role_default=invite_code.role_default,
            expires_at=invite_code.expires_at,
            max_uses=invite_code.max_uses,
            uses_count=invite_code.uses_count,
            is_active=invite_code.is_active,
            is_usable=invite_code.is_usable(now or utcnow()),
            created_by_user_id=invite_code.created_by_user_id,
            created_at=invite_code.created_at,
        )


class InviteCodeRedeem(BaseModel):
    """Join a club with an invite code"""

    code: str = Field(..., min_length=6, max_length=20)

    @field_validator("code", mode="before")
    @classmethod
    def normalise_code(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class InviteCodeRedeemResponse(BaseModel):
    """Membership created (or reactivated) by redeeming a code"""

    membership_id: int
    tenant_id: int
    tenant_slug: str
    role: TenantRole
