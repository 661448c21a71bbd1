from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_tenant_context
from trophy_cabinet.models.award import Award
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.services.award_service import AwardService
from trophy_cabinet.schemas.award_schemas import (
    AwardCreate,
    AwardResponse,
    AwardListResponse,
)

router = APIRouter()


def _award_list(awards: list[Award]) -> AwardListResponse:
    return AwardListResponse(
        awards=awards,
        total=len(awards),
        total_points=sum(award.trophy_template.points for award in awards),
    )


@router.post("", response_model=AwardResponse, status_code=status.HTTP_201_CREATED)
def create_award(
    data: AwardCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Grant a trophy to a club member.

    - **Requires STAFF or higher**
    - The caller is recorded as the awarder
    - Trophy, season and team must belong to this club
    """
    service = AwardService(db)
    return service.create_award(data, context)


@router.get("", response_model=AwardListResponse)
def list_awards(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """All awards of the club, most recent first (STAFF or higher)"""
    service = AwardService(db)
    return _award_list(service.list_for_tenant(context))


@router.get("/mine", response_model=AwardListResponse)
def list_my_awards(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """The caller's trophy cabinet in this club"""
    service = AwardService(db)
    return _award_list(service.list_for_recipient(context.profile.id, context))


@router.get("/recipients/{user_id}", response_model=AwardListResponse)
def list_recipient_awards(
    user_id: str,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """A member's trophy cabinet (STAFF or higher, or the member themselves)"""
    service = AwardService(db)
    return _award_list(service.list_for_recipient(user_id, context))


@router.get("/{award_id}", response_model=AwardResponse)
def get_award(
    award_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Get award details"""
    service = AwardService(db)
    return service.get_award(award_id, context)


@router.delete("/{award_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_award(
    award_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Delete an award (STAFF or higher)"""
    service = AwardService(db)
    service.delete_award(award_id, context)
    return None
