"""Repository for Membership model operations."""

from sqlalchemy.orm import Session, joinedload
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.role import MembershipStatus


class MembershipRepository:
    """Repository for Membership model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_membership(self, user_id: str, tenant_id: int) -> Membership | None:
        """
        Get membership for a specific user in a specific tenant, any status.

        Args:
            user_id: Profile ID
            tenant_id: Tenant ID

        Returns:
            Membership object or None if not found
        """
        return (
            self.db.query(Membership)
            .filter(
                Membership.user_id == user_id,
                Membership.tenant_id == tenant_id,
            )
            .first()
        )

    def get_active_membership(self, user_id: str, tenant_id: int) -> Membership | None:
        """Get the user's membership in a tenant only if its status is ACTIVE"""
        return (
            self.db.query(Membership)
            .filter(
                Membership.user_id == user_id,
                Membership.tenant_id == tenant_id,
                Membership.status == MembershipStatus.ACTIVE,
            )
            .first()
        )

    def get_by_id_and_tenant(self, membership_id: int, tenant_id: int) -> Membership | None:
        """
        Get membership ensuring it belongs to the tenant.

        Returns None if membership doesn't exist or belongs to another tenant.
        """
        return (
            self.db.query(Membership)
            .filter(Membership.id == membership_id, Membership.tenant_id == tenant_id)
            .first()
        )

    def get_tenant_members(self, tenant_id: int) -> list[Membership]:
        """
        Get all memberships for a tenant with profiles, newest first.

        Args:
            tenant_id: Tenant ID

        Returns:
            List of Membership objects for the tenant
        """
        return (
            self.db.query(Membership)
            .options(joinedload(Membership.profile))
            .filter(Membership.tenant_id == tenant_id)
            .order_by(Membership.created_at.desc(), Membership.id.desc())
            .all()
        )

    def get_user_active_memberships(self, user_id: str) -> list[Membership]:
        """
        Get all ACTIVE memberships for a user with their tenants, newest first.

        Args:
            user_id: Profile ID

        Returns:
            List of Membership objects for the user
        """
        return (
            self.db.query(Membership)
            .options(joinedload(Membership.tenant))
            .filter(
                Membership.user_id == user_id,
                Membership.status == MembershipStatus.ACTIVE,
            )
            .order_by(Membership.created_at.desc(), Membership.id.desc())
            .all()
        )

    def create_no_commit(self, membership: Membership) -> Membership:
        """Create membership without committing (for atomic ops)"""
        self.db.add(membership)
        self.db.flush()
        return membership

    def update(self, membership: Membership) -> Membership:
        """
        Update a membership.

        Args:
            membership: Membership object to update

        Returns:
            Updated Membership object
        """
        self.db.commit()
        self.db.refresh(membership)
        return membership

    def delete(self, membership: Membership) -> None:
        """
        Remove a user from a tenant.

        Args:
            membership: Membership object to delete
        """
        self.db.delete(membership)
        self.db.commit()
