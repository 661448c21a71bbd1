from sqlalchemy.orm import Session
from trophy_cabinet.models.season import Season
from trophy_cabinet.models.team import Team
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.repositories.season_repository import SeasonRepository
from trophy_cabinet.schemas.season_schemas import SeasonCreate, TeamCreate
from trophy_cabinet.core.exceptions import NotFoundException, ForbiddenException


class SeasonService:
    """Service for seasons and teams, the optional groupings of awards"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SeasonRepository(db)

    def list_seasons(self, context: TenantContext) -> list[Season]:
        return self.repo.get_seasons(context.tenant.id)

    def create_season(self, data: SeasonCreate, context: TenantContext) -> Season:
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can create seasons")
        season = Season(
            tenant_id=context.tenant.id,
            name=data.name,
            start_date=data.start_date,
            end_date=data.end_date,
            is_active=data.is_active,
        )
        return self.repo.create(season)

    def list_teams(self, context: TenantContext) -> list[Team]:
        return self.repo.get_teams(context.tenant.id)

    def create_team(self, data: TeamCreate, context: TenantContext) -> Team:
        """
        Create a team, optionally tied to a season of the same tenant.

        Raises:
            ForbiddenException: If user is below STAFF
            NotFoundException: If season not found in this tenant
        """
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can create teams")
        if data.season_id is not None and not self.repo.get_season(data.season_id, context.tenant.id):
            raise NotFoundException("Season not found")
        team = Team(tenant_id=context.tenant.id, season_id=data.season_id, name=data.name)
        return self.repo.create(team)
