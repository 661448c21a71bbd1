from sqlalchemy import func
from sqlalchemy.orm import Session
from trophy_cabinet.models.trophy_template import TrophyTemplate
from trophy_cabinet.models.award import Award


class TrophyTemplateRepository:
    """Repository for TrophyTemplate model operations with multi-tenant support"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_tenant(self, tenant_id: int) -> list[TrophyTemplate]:
        """Get all templates for a tenant, newest first"""
        return (
            self.db.query(TrophyTemplate)
            .filter(TrophyTemplate.tenant_id == tenant_id)
            .order_by(TrophyTemplate.created_at.desc(), TrophyTemplate.id.desc())
            .all()
        )

    def get_by_id_and_tenant(self, template_id: int, tenant_id: int) -> TrophyTemplate | None:
        """
        Get template ensuring it belongs to tenant (multi-tenant safety).

        Returns None if template doesn't exist or belongs to another tenant.
        """
        return (
            self.db.query(TrophyTemplate)
            .filter(TrophyTemplate.id == template_id, TrophyTemplate.tenant_id == tenant_id)
            .first()
        )

    def count_awards(self, template_id: int) -> int:
        """Number of awards granted from a template"""
        result = (
            self.db.query(func.count(Award.id))
            .filter(Award.trophy_template_id == template_id)
            .scalar()
        )
        return int(result or 0)

    def create(self, template: TrophyTemplate) -> TrophyTemplate:
        """Create new template"""
        self.db.add(template)
        self.db.commit()
        self.db.refresh(template)
        return template

    def update(self, template: TrophyTemplate) -> TrophyTemplate:
        """Update existing template"""
        self.db.commit()
        self.db.refresh(template)
        return template

    def delete_with_awards(self, template: TrophyTemplate) -> int:
        """
        Delete template and every award granted from it in one transaction.

        Returns:
            Number of awards deleted
        """
        try:
            removed = (
                self.db.query(Award)
                .filter(Award.trophy_template_id == template.id)
                .delete(synchronize_session="fetch")
            )
            self.db.delete(template)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return removed
