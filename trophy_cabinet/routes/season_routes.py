from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_tenant_context
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.services.season_service import SeasonService
from trophy_cabinet.schemas.season_schemas import (
    SeasonCreate,
    SeasonResponse,
    TeamCreate,
    TeamResponse,
)

router = APIRouter()


@router.get("/seasons", response_model=list[SeasonResponse])
def list_seasons(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """List seasons, latest start date first"""
    return SeasonService(db).list_seasons(context)


@router.post("/seasons", response_model=SeasonResponse, status_code=status.HTTP_201_CREATED)
def create_season(
    data: SeasonCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Create a season (STAFF or higher)"""
    return SeasonService(db).create_season(data, context)


@router.get("/teams", response_model=list[TeamResponse])
def list_teams(
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """List teams alphabetically"""
    return SeasonService(db).list_teams(context)


@router.post("/teams", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    data: TeamCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Create a team, optionally in a season (STAFF or higher)"""
    return SeasonService(db).create_team(data, context)
