from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_tenant_context
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.services.trophy_service import TrophyService
from trophy_cabinet.schemas.trophy_schemas import (
    TrophyTemplateCreate,
    TrophyTemplateUpdate,
    TrophyTemplateResponse,
    TrophyTemplateDetailResponse,
    TrophyTemplateDeleteResponse,
)

router = APIRouter()


@router.post("", response_model=TrophyTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_trophy(
    data: TrophyTemplateCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Create a trophy template (STAFF or higher)"""
    service = TrophyService(db)
    return service.create_template(data, context)


@router.get("", response_model=list[TrophyTemplateResponse])
def list_trophies(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """List the club's trophy templates, newest first"""
    service = TrophyService(db)
    return service.list_templates(context)


@router.get("/{template_id}", response_model=TrophyTemplateDetailResponse)
def get_trophy(
    template_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Get trophy template details.

    award_count is the number of awards a delete would also remove.
    """
    service = TrophyService(db)
    template = service.get_template(template_id, context)
    response = TrophyTemplateResponse.model_validate(template)
    return TrophyTemplateDetailResponse(
        **response.model_dump(), award_count=service.count_awards(template)
    )


@router.patch("/{template_id}", response_model=TrophyTemplateResponse)
def update_trophy(
    template_id: int,
    data: TrophyTemplateUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Update trophy template details (STAFF or higher)"""
    service = TrophyService(db)
    return service.update_template(template_id, data, context)


@router.delete("/{template_id}", response_model=TrophyTemplateDeleteResponse)
def delete_trophy(
    template_id: int,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Delete a trophy template and every award granted from it.

    - **Requires STAFF or higher**
    - Clients should confirm with the user first (see award_count)
    """
    service = TrophyService(db)
    removed = service.delete_template(template_id, context)
    return {
        "message": "Trophy deleted successfully",
        "deleted_template_id": template_id,
        "deleted_awards": removed,
    }
