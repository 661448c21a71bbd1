from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trophy_cabinet.core.timeutils import utcnow
from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_tenant_context, get_current_profile
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.services.invite_code_service import InviteCodeService
from trophy_cabinet.schemas.invite_code_schemas import (
    InviteCodeCreate,
    InviteCodeResponse,
    InviteCodeRedeem,
    InviteCodeRedeemResponse,
)

# Mounted under /api/tenants/{tenant_slug}/invite-codes
router = APIRouter()

# Mounted under /api/invite-codes (no tenant context: the code names the tenant)
redeem_router = APIRouter()


@router.post("", response_model=InviteCodeResponse, status_code=status.HTTP_201_CREATED)
def create_invite_code(
    data: InviteCodeCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Issue a new invite code.

    - **Requires ADMIN or OWNER permissions**
    - role_default: admin, staff or player (default player)
    - Optional max_uses (>= 1) and expires_at (future)
    """
    service = InviteCodeService(db)
    invite_code = service.issue(data, context)
    return InviteCodeResponse.from_invite_code(invite_code)


@router.get("", response_model=list[InviteCodeResponse])
def list_invite_codes(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    List the club's invite codes, newest first.

    is_usable is recomputed on every request.
    """
    service = InviteCodeService(db)
    now = utcnow()
    return [InviteCodeResponse.from_invite_code(c, now) for c in service.list_codes(context)]


@router.post("/{code_id}/deactivate", response_model=InviteCodeResponse)
def deactivate_invite_code(
    code_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Deactivate an invite code. This cannot be undone.

    - **Requires ADMIN or OWNER permissions**
    """
    service = InviteCodeService(db)
    invite_code = service.deactivate(code_id, context)
    return InviteCodeResponse.from_invite_code(invite_code)


@redeem_router.post("/redeem", response_model=InviteCodeRedeemResponse)
def redeem_invite_code(
    data: InviteCodeRedeem,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """
    Join a club with an invite code.

    - 400 if the code is unknown or deactivated
    - 410 if the code expired or has no uses left
    - 409 if you are already a member
    """
    service = InviteCodeService(db)
    membership = service.redeem(data.code, profile)
    return InviteCodeRedeemResponse(
        membership_id=membership.id,
        tenant_id=membership.tenant_id,
        tenant_slug=membership.tenant.slug,
        role=membership.role,
    )
