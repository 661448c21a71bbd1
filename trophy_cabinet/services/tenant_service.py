import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from trophy_cabinet.core.timeutils import utcnow
from trophy_cabinet.models.tenant import Tenant
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.models.role import TenantRole, MembershipStatus
from trophy_cabinet.repositories.tenant_repository import TenantRepository
from trophy_cabinet.repositories.membership_repository import MembershipRepository
from trophy_cabinet.schemas.tenant_schemas import TenantCreate, TenantUpdate
from trophy_cabinet.core.exceptions import (
    ConflictException,
    ForbiddenException,
)

logger = logging.getLogger(__name__)


class TenantService:
    """Service layer for tenant (club) business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)
        self.membership_repo = MembershipRepository(db)

    def create_tenant(self, data: TenantCreate, profile: Profile) -> Tenant:
        """
        Create a tenant and its OWNER membership atomically.

        Args:
            data: Club name, slug and optional logo
            profile: Creator, who becomes the owner

        Returns:
            Created tenant

        Raises:
            ConflictException: If the slug is already taken
        """
        if self.tenant_repo.slug_exists(data.slug):
            raise ConflictException(f"A club with slug '{data.slug}' already exists")

        try:
            tenant = self.tenant_repo.create_no_commit(
                Tenant(
                    name=data.name,
                    slug=data.slug,
                    logo_url=str(data.logo_url) if data.logo_url else None,
                )
            )
            self.membership_repo.create_no_commit(
                Membership(
                    tenant_id=tenant.id,
                    user_id=profile.id,
                    role=TenantRole.OWNER,
                    status=MembershipStatus.ACTIVE,
                    joined_at=utcnow(),
                )
            )
            self.db.commit()
        except IntegrityError:
            # Lost a race for the slug between the check and the insert
            self.db.rollback()
            raise ConflictException(f"A club with slug '{data.slug}' already exists")

        self.db.refresh(tenant)
        logger.info("Tenant %s created by %s", tenant.slug, profile.id)
        return tenant

    def list_user_tenants(self, profile: Profile) -> list[dict]:
        """
        List all tenants where the user has an ACTIVE membership.

        Args:
            profile: Authenticated user

        Returns:
            List of tenants with user's role in each tenant
        """
        memberships = self.membership_repo.get_user_active_memberships(profile.id)

        return [
            {
                "id": membership.tenant.id,
                "name": membership.tenant.name,
                "slug": membership.tenant.slug,
                "logo_url": membership.tenant.logo_url,
                "role": membership.role,
                "membership_id": membership.id,
                "joined_at": membership.joined_at,
                "created_at": membership.tenant.created_at,
            }
            for membership in memberships
        ]

    def get_current_tenant(self, context: TenantContext) -> Tenant:
        """
        Get current tenant details.

        Args:
            context: Tenant context with authenticated user

        Returns:
            Current tenant object
        """
        return context.tenant

    def update_tenant(self, tenant_update: TenantUpdate, context: TenantContext) -> Tenant:
        """
        Update tenant name and logo (OWNER only).

        Raises:
            ForbiddenException: If user is not OWNER
        """
        if not context.is_owner():
            raise ForbiddenException("Only the owner can update club details")

        if tenant_update.name is not None:
            context.tenant.name = tenant_update.name
        if tenant_update.logo_url is not None:
            context.tenant.logo_url = str(tenant_update.logo_url)

        return self.tenant_repo.update(context.tenant)
