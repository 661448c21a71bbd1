"""Tenant role and membership status enums for role-based access control."""

from enum import Enum as PyEnum


class TenantRole(str, PyEnum):
    """
    Tenant membership roles with hierarchical permissions.

    Role Hierarchy (highest to lowest):
    1. OWNER - Full control, created with the tenant, cannot be changed or removed
    2. ADMIN - Manage members and invite codes, manage the trophy catalog
    3. STAFF - Admin area access, create/delete trophies and awards
    4. PLAYER - Player area only: own trophy cabinet and the tenant's catalog

    The admin area is open to OWNER, ADMIN and STAFF; the player area is open
    to any active member.
    """

    OWNER = "owner"
    ADMIN = "admin"
    STAFF = "staff"
    PLAYER = "player"

    @property
    def rank(self) -> int:
        return ROLE_RANK[self]

    def satisfies(self, required: "TenantRole") -> bool:
        """True when this role meets or exceeds the required role."""
        return self.rank >= required.rank


ROLE_RANK = {
    TenantRole.OWNER: 4,
    TenantRole.ADMIN: 3,
    TenantRole.STAFF: 2,
    TenantRole.PLAYER: 1,
}

# Minimum role for each area of the application
ADMIN_AREA_ROLE = TenantRole.STAFF
PLAYER_AREA_ROLE = TenantRole.PLAYER
MEMBER_MANAGEMENT_ROLE = TenantRole.ADMIN

# Roles an invite code may grant
INVITABLE_ROLES = (TenantRole.ADMIN, TenantRole.STAFF, TenantRole.PLAYER)


class MembershipStatus(str, PyEnum):
    """Lifecycle of a membership. Only ACTIVE memberships grant access."""

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"
