import logging
from sqlalchemy.orm import Session
from trophy_cabinet.models.trophy_template import TrophyTemplate
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.repositories.trophy_template_repository import TrophyTemplateRepository
from trophy_cabinet.schemas.trophy_schemas import TrophyTemplateCreate, TrophyTemplateUpdate
from trophy_cabinet.core.exceptions import NotFoundException, ForbiddenException

logger = logging.getLogger(__name__)


class TrophyService:
    """Service for trophy template business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrophyTemplateRepository(db)

    def _require_catalog_access(self, context: TenantContext) -> None:
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can manage trophies")

    def list_templates(self, context: TenantContext) -> list[TrophyTemplate]:
        """Get all trophy templates of the tenant"""
        return self.repo.get_by_tenant(context.tenant.id)

    def get_template(self, template_id: int, context: TenantContext) -> TrophyTemplate:
        """
        Get specific template ensuring tenant ownership.

        Raises:
            NotFoundException: If template not found or belongs to another tenant
        """
        template = self.repo.get_by_id_and_tenant(template_id, context.tenant.id)
        if not template:
            raise NotFoundException("Trophy not found")
        return template

    def count_awards(self, template: TrophyTemplate) -> int:
        """Awards that deleting this template would remove"""
        return self.repo.count_awards(template.id)

    def create_template(self, data: TrophyTemplateCreate, context: TenantContext) -> TrophyTemplate:
        """Create new trophy template for the tenant"""
        self._require_catalog_access(context)
        template = TrophyTemplate(
            tenant_id=context.tenant.id,
            name=data.name,
            description=data.description,
            icon_url=str(data.icon_url) if data.icon_url else None,
            tier=data.tier,
            points=data.points,
        )
        return self.repo.create(template)

    def update_template(
        self, template_id: int, data: TrophyTemplateUpdate, context: TenantContext
    ) -> TrophyTemplate:
        """Update template details (only fields that were sent)"""
        self._require_catalog_access(context)
        template = self.get_template(template_id, context)

        fields = data.model_dump(exclude_unset=True)
        if "icon_url" in fields and fields["icon_url"] is not None:
            fields["icon_url"] = str(fields["icon_url"])
        for field, value in fields.items():
            # name and points are required columns; an explicit null leaves them as is
            if value is None and field in ("name", "points"):
                continue
            setattr(template, field, value)

        return self.repo.update(template)

    def delete_template(self, template_id: int, context: TenantContext) -> int:
        """
        Delete template and all awards granted from it (cascade).

        Returns:
            Number of awards deleted
        """
        self._require_catalog_access(context)
        template = self.get_template(template_id, context)
        removed = self.repo.delete_with_awards(template)
        logger.info(
            "Trophy %s deleted from tenant %s with %d award(s) (by %s)",
            template_id,
            context.tenant.slug,
            removed,
            context.profile.id,
        )
        return removed
