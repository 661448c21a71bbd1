from sqlalchemy.orm import Session
from trophy_cabinet.models.season import Season
from trophy_cabinet.models.team import Team


class SeasonRepository:
    """Repository for Season and Team operations (both are tenant groupings)"""

    def __init__(self, db: Session):
        self.db = db

    def get_seasons(self, tenant_id: int) -> list[Season]:
        """Seasons of a tenant, latest start date first (undated last)"""
        return (
            self.db.query(Season)
            .filter(Season.tenant_id == tenant_id)
            .order_by(Season.start_date.is_(None), Season.start_date.desc(), Season.id.desc())
            .all()
        )

    def get_season(self, season_id: int, tenant_id: int) -> Season | None:
        return (
            self.db.query(Season)
            .filter(Season.id == season_id, Season.tenant_id == tenant_id)
            .first()
        )

    def get_teams(self, tenant_id: int) -> list[Team]:
        """Teams of a tenant, alphabetically"""
        return (
            self.db.query(Team)
            .filter(Team.tenant_id == tenant_id)
            .order_by(Team.name.asc(), Team.id.asc())
            .all()
        )

    def get_team(self, team_id: int, tenant_id: int) -> Team | None:
        return self.db.query(Team).filter(Team.id == team_id, Team.tenant_id == tenant_id).first()

    def create(self, entity: Season | Team) -> Season | Team:
        """Create a season or team"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
