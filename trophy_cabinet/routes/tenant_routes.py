from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_tenant_context, get_current_profile
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.services.tenant_service import TenantService
from trophy_cabinet.services.membership_service import MembershipService
from trophy_cabinet.schemas.tenant_schemas import (
    TenantCreate,
    TenantResponse,
    TenantUpdate,
    UserTenantResponse,
)
from trophy_cabinet.schemas.membership_schemas import (
    MemberResponse,
    MemberRoleUpdate,
    MemberStatusUpdate,
    MemberRemoveResponse,
)

router = APIRouter()


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    data: TenantCreate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """
    Register a new club.

    - The caller becomes its OWNER (created in the same transaction)
    - Slug must be unique: 409 if already taken
    """
    service = TenantService(db)
    return service.create_tenant(data, profile)


@router.get("", response_model=list[UserTenantResponse])
def list_user_tenants(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """
    List all clubs the authenticated user is an active member of.

    Returns the user's role in each; used for tenant switching.
    """
    service = TenantService(db)
    return service.list_user_tenants(profile)


@router.get("/{tenant_slug}", response_model=TenantResponse)
def get_tenant(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Get club details. Available to all active members."""
    service = TenantService(db)
    return service.get_current_tenant(context)


@router.patch("/{tenant_slug}", response_model=TenantResponse)
def update_tenant(
    tenant_update: TenantUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Update club name or logo.

    - **Requires OWNER permissions**
    """
    service = TenantService(db)
    return service.update_tenant(tenant_update, context)


@router.get("/{tenant_slug}/members", response_model=list[MemberResponse])
def list_members(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    List all members of the club with their roles and status.

    - **Requires STAFF or higher**
    """
    service = MembershipService(db)
    return [MemberResponse.from_membership(m) for m in service.get_members(context)]


@router.patch("/{tenant_slug}/members/{membership_id}/role", response_model=MemberResponse)
def update_member_role(
    membership_id: int,
    role_update: MemberRoleUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Change a member's role; the membership becomes ACTIVE.

    - **Requires ADMIN or OWNER permissions**
    - Cannot change the OWNER, or grant OWNER
    - Cannot change your own membership
    """
    service = MembershipService(db)
    membership = service.change_role(membership_id, role_update, context)
    return MemberResponse.from_membership(membership)


@router.patch("/{tenant_slug}/members/{membership_id}/status", response_model=MemberResponse)
def update_member_status(
    membership_id: int,
    status_update: MemberStatusUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Suspend, deactivate or re-activate a member.

    - **Requires ADMIN or OWNER permissions**
    - Cannot change the OWNER or your own membership
    """
    service = MembershipService(db)
    membership = service.set_status(membership_id, status_update, context)
    return MemberResponse.from_membership(membership)


@router.delete(
    "/{tenant_slug}/members/{membership_id}",
    response_model=MemberRemoveResponse,
    status_code=status.HTTP_200_OK,
)
def remove_member(
    membership_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Remove member from club.

    - **Requires ADMIN or OWNER permissions**
    - Cannot remove OWNER
    - Cannot remove yourself
    """
    service = MembershipService(db)
    service.remove_member(membership_id, context)

    return {
        "message": "Member removed successfully",
        "removed_membership_id": membership_id,
    }
