import logging
from sqlalchemy.orm import Session

from trophy_cabinet.models.award import Award
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.repositories.award_repository import AwardRepository
from trophy_cabinet.repositories.membership_repository import MembershipRepository
from trophy_cabinet.repositories.season_repository import SeasonRepository
from trophy_cabinet.repositories.trophy_template_repository import TrophyTemplateRepository
from trophy_cabinet.schemas.award_schemas import AwardCreate
from trophy_cabinet.core.exceptions import NotFoundException, ForbiddenException

logger = logging.getLogger(__name__)


class AwardService:
    """Service layer for award business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.award_repo = AwardRepository(db)
        self.template_repo = TrophyTemplateRepository(db)
        self.membership_repo = MembershipRepository(db)
        self.season_repo = SeasonRepository(db)

    def create_award(self, data: AwardCreate, context: TenantContext) -> Award:
        """
        Grant a trophy to a member of the tenant.

        Template, season and team must belong to the tenant and the
        recipient must hold a membership in it.

        Args:
            data: Award creation data
            context: Tenant context; its profile is recorded as the awarder

        Returns:
            Created award with related entities loaded

        Raises:
            ForbiddenException: If user is below STAFF
            NotFoundException: If a referenced entity is not in this tenant
        """
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can grant awards")

        tenant_id = context.tenant.id
        if not self.template_repo.get_by_id_and_tenant(data.trophy_template_id, tenant_id):
            raise NotFoundException(f"Trophy {data.trophy_template_id} not found")
        if not self.membership_repo.get_membership(data.recipient_user_id, tenant_id):
            raise NotFoundException("Recipient is not a member of this club")
        if data.season_id is not None and not self.season_repo.get_season(data.season_id, tenant_id):
            raise NotFoundException(f"Season {data.season_id} not found")
        if data.team_id is not None and not self.season_repo.get_team(data.team_id, tenant_id):
            raise NotFoundException(f"Team {data.team_id} not found")

        award = Award(
            tenant_id=tenant_id,
            trophy_template_id=data.trophy_template_id,
            recipient_user_id=data.recipient_user_id,
            awarded_by_user_id=context.profile.id,
            season_id=data.season_id,
            team_id=data.team_id,
            notes=data.notes,
            is_public=data.is_public,
        )
        award = self.award_repo.create(award)
        logger.info(
            "Award %s (trophy %s) granted to %s in tenant %s by %s",
            award.id,
            award.trophy_template_id,
            award.recipient_user_id,
            context.tenant.slug,
            context.profile.id,
        )
        return self.award_repo.get_by_id_and_tenant(award.id, tenant_id)

    def get_award(self, award_id: int, context: TenantContext) -> Award:
        """
        Get award by ID.

        Private awards of other members are only visible from the admin area.

        Raises:
            NotFoundException: If award doesn't exist or isn't visible to the caller
        """
        award = self.award_repo.get_by_id_and_tenant(award_id, context.tenant.id)
        if not award:
            raise NotFoundException(f"Award {award_id} not found")
        if (
            not award.is_public
            and award.recipient_user_id != context.profile.id
            and not context.in_admin_area()
        ):
            raise NotFoundException(f"Award {award_id} not found")
        return award

    def list_for_tenant(self, context: TenantContext) -> list[Award]:
        """All awards of the tenant (admin area)"""
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can list all awards")
        return self.award_repo.get_by_tenant(context.tenant.id)

    def list_for_recipient(self, recipient_user_id: str, context: TenantContext) -> list[Award]:
        """
        Awards of one recipient in the tenant (a trophy cabinet).

        Players may only open their own cabinet.
        """
        if recipient_user_id != context.profile.id and not context.in_admin_area():
            raise ForbiddenException("You can only view your own trophy cabinet")
        return self.award_repo.get_by_recipient(context.tenant.id, recipient_user_id)

    def delete_award(self, award_id: int, context: TenantContext) -> None:
        """Delete a single award"""
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can delete awards")
        award = self.award_repo.get_by_id_and_tenant(award_id, context.tenant.id)
        if not award:
            raise NotFoundException(f"Award {award_id} not found")
        self.award_repo.delete(award)
        logger.info("Award %s deleted from tenant %s", award_id, context.tenant.slug)
