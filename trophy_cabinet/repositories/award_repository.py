from sqlalchemy.orm import Session, joinedload
from trophy_cabinet.models.award import Award


class AwardRepository:
    """Repository for Award data access"""

    def __init__(self, db: Session):
        self.db = db

    def _with_details(self):
        """Base query join-fetching template, people, season and team"""
        return self.db.query(Award).options(
            joinedload(Award.trophy_template),
            joinedload(Award.recipient),
            joinedload(Award.awarded_by),
            joinedload(Award.season),
            joinedload(Award.team),
        )

    def create(self, award: Award) -> Award:
        """Create a new award"""
        self.db.add(award)
        self.db.commit()
        self.db.refresh(award)
        return award

    def get_by_id_and_tenant(self, award_id: int, tenant_id: int) -> Award | None:
        """
        Get award by ID with details, ensuring it belongs to the tenant.

        Returns:
            Award object or None if not found or belongs to different tenant
        """
        return (
            self._with_details()
            .filter(Award.id == award_id, Award.tenant_id == tenant_id)
            .first()
        )

    def get_by_tenant(self, tenant_id: int) -> list[Award]:
        """All awards of a tenant, most recent first"""
        return (
            self._with_details()
            .filter(Award.tenant_id == tenant_id)
            .order_by(Award.awarded_at.desc(), Award.id.desc())
            .all()
        )

    def get_by_recipient(self, tenant_id: int, recipient_user_id: str) -> list[Award]:
        """Awards of one recipient within a tenant, most recent first"""
        return (
            self._with_details()
            .filter(Award.tenant_id == tenant_id, Award.recipient_user_id == recipient_user_id)
            .order_by(Award.awarded_at.desc(), Award.id.desc())
            .all()
        )

    def delete(self, award: Award) -> None:
        """Delete an award"""
        self.db.delete(award)
        self.db.commit()
