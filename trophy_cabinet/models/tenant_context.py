"""Tenant context for request authorization."""

from dataclasses import dataclass
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.tenant import Tenant
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.role import (
    TenantRole,
    ADMIN_AREA_ROLE,
    MEMBER_MANAGEMENT_ROLE,
)


@dataclass
class TenantContext:
    """
    Complete tenant context for request authorization.

    Contains the caller's profile, the tenant addressed by the request and
    the caller's active membership in it. Passed explicitly into every
    tenant-scoped service call.

    Attributes:
        profile: The authenticated Profile
        tenant: The Tenant the user is accessing
        membership: The caller's ACTIVE membership in the tenant
    """

    profile: Profile
    tenant: Tenant
    membership: Membership

    @property
    def role(self) -> TenantRole:
        return self.membership.role

    def has_permission(self, required_role: TenantRole) -> bool:
        """
        Check if user's role meets or exceeds required role.

        Role hierarchy: OWNER (4) > ADMIN (3) > STAFF (2) > PLAYER (1)

        Args:
            required_role: Minimum role required for the operation

        Returns:
            True if user has sufficient permissions
        """
        return self.role.satisfies(required_role)

    def is_owner(self) -> bool:
        """Check if user is the tenant owner."""
        return self.role == TenantRole.OWNER

    def can_manage_members(self) -> bool:
        """Check if user is admin or owner."""
        return self.has_permission(MEMBER_MANAGEMENT_ROLE)

    def in_admin_area(self) -> bool:
        """Check if user may use the admin area (STAFF or higher)."""
        return self.has_permission(ADMIN_AREA_ROLE)

    def __repr__(self) -> str:
        return (
            f"<TenantContext(user_id='{self.profile.id}', tenant_id={self.tenant.id}, "
            f"role={self.role.value})>"
        )
