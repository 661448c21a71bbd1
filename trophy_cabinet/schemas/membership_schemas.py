from pydantic import BaseModel, Field
from datetime import datetime
from trophy_cabinet.models.role import TenantRole, MembershipStatus


class MemberResponse(BaseModel):
    """Tenant member details with profile info"""

    id: int
    tenant_id: int
    user_id: str
    display_name: str | None
    avatar_url: str | None
    role: TenantRole
    status: MembershipStatus
    joined_at: datetime | None
    created_at: datetime

    @classmethod
    def from_membership(cls, membership) -> "MemberResponse":
        profile = membership.profile
        return cls(
            id=membership.id,
            tenant_id=membership.tenant_id,
            user_id=membership.user_id,
            display_name=profile.display_name if profile else None,
            avatar_url=profile.avatar_url if profile else None,
            role=membership.role,
            status=membership.status,
            joined_at=membership.joined_at,
            created_at=membership.created_at,
        )


class MemberRoleUpdate(BaseModel):
    """Change a member's role (ADMIN or OWNER)"""

    role: TenantRole = Field(..., description="New role to assign")


class MemberStatusUpdate(BaseModel):
    """Suspend, deactivate or re-activate a member (ADMIN or OWNER)"""

    status: MembershipStatus = Field(..., description="New membership status")


class MemberRemoveResponse(BaseModel):
    """Response after removing member"""

    message: str
    removed_membership_id: int
