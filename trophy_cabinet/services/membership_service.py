import logging
from sqlalchemy.orm import Session
from trophy_cabinet.core.timeutils import utcnow
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.tenant import Tenant
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.models.role import TenantRole, MembershipStatus
from trophy_cabinet.repositories.membership_repository import MembershipRepository
from trophy_cabinet.schemas.membership_schemas import MemberRoleUpdate, MemberStatusUpdate
from trophy_cabinet.core.exceptions import (
    NotFoundException,
    ForbiddenException,
)

logger = logging.getLogger(__name__)


class MembershipService:
    """Service layer for membership and role management"""

    def __init__(self, db: Session):
        self.db = db
        self.membership_repo = MembershipRepository(db)

    def _active_membership(self, user_id: str, tenant_id: int) -> Membership | None:
        return self.membership_repo.get_active_membership(user_id, tenant_id)

    def resolve_role(self, user_id: str, tenant_id: int) -> TenantRole | None:
        """
        Role of a user in a tenant.

        Returns None when there is no membership or it is not ACTIVE.
        """
        membership = self._active_membership(user_id, tenant_id)
        return membership.role if membership else None

    def resolve_context(self, profile: Profile, tenant: Tenant) -> TenantContext:
        """
        Build the request context for a caller entering a tenant.

        Uses the same lookup as resolve_role: any ACTIVE membership grants
        the player area and services check higher roles through the context.

        Raises:
            ForbiddenException: If the caller has no active membership
        """
        membership = self._active_membership(profile.id, tenant.id)
        if membership is None:
            raise ForbiddenException("You are not an active member of this club")
        return TenantContext(profile=profile, tenant=tenant, membership=membership)

    def get_members(self, context: TenantContext) -> list[Membership]:
        """
        Get all members of current tenant (admin area).

        Raises:
            ForbiddenException: If user is below STAFF
        """
        if not context.in_admin_area():
            raise ForbiddenException("Only staff, admins and owners can list members")
        return self.membership_repo.get_tenant_members(context.tenant.id)

    def _get_manageable_membership(
        self, membership_id: int, context: TenantContext, action: str
    ) -> Membership:
        """
        Load a membership the caller is allowed to modify.

        Raises:
            ForbiddenException: If caller is below ADMIN, targets themselves or the owner
            NotFoundException: If membership not found in this tenant
        """
        if not context.can_manage_members():
            raise ForbiddenException(f"Only admins and owners can {action}")

        membership = self.membership_repo.get_by_id_and_tenant(membership_id, context.tenant.id)
        if not membership:
            raise NotFoundException("Member not found in this club")

        # Cannot modify self (check first for better error message)
        if membership.id == context.membership.id:
            raise ForbiddenException("Cannot modify your own membership")

        if membership.role == TenantRole.OWNER:
            raise ForbiddenException("The club owner cannot be changed or removed")

        return membership

    def change_role(
        self, membership_id: int, role_update: MemberRoleUpdate, context: TenantContext
    ) -> Membership:
        """
        Overwrite a member's role and force the membership ACTIVE.

        Re-submitting the current role is accepted.

        Raises:
            ForbiddenException: If target is the owner, the caller, or the new role is OWNER
            NotFoundException: If membership not found
        """
        membership = self._get_manageable_membership(membership_id, context, "change roles")

        if role_update.role == TenantRole.OWNER:
            raise ForbiddenException("The owner role cannot be assigned")

        previous = membership.role
        membership.role = role_update.role
        membership.status = MembershipStatus.ACTIVE
        if membership.joined_at is None:
            membership.joined_at = utcnow()

        membership = self.membership_repo.update(membership)
        logger.info(
            "Membership %s in tenant %s: role %s -> %s (by %s)",
            membership.id,
            context.tenant.slug,
            previous.value,
            membership.role.value,
            context.profile.id,
        )
        return membership

    def set_status(
        self, membership_id: int, status_update: MemberStatusUpdate, context: TenantContext
    ) -> Membership:
        """
        Suspend, deactivate or re-activate a member.

        Raises:
            ForbiddenException: If target is the owner or the caller
            NotFoundException: If membership not found
        """
        membership = self._get_manageable_membership(membership_id, context, "change status")

        membership.status = status_update.status
        if status_update.status == MembershipStatus.ACTIVE and membership.joined_at is None:
            membership.joined_at = utcnow()

        membership = self.membership_repo.update(membership)
        logger.info(
            "Membership %s in tenant %s set to %s (by %s)",
            membership.id,
            context.tenant.slug,
            membership.status.value,
            context.profile.id,
        )
        return membership

    def remove_member(self, membership_id: int, context: TenantContext) -> None:
        """
        Delete a membership.

        Removing an already removed membership raises NotFoundException.

        Raises:
            ForbiddenException: If target is the owner or the caller
            NotFoundException: If membership not found
        """
        membership = self._get_manageable_membership(membership_id, context, "remove members")
        self.membership_repo.delete(membership)
        logger.info(
            "Membership %s removed from tenant %s (by %s)",
            membership_id,
            context.tenant.slug,
            context.profile.id,
        )
