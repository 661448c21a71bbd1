"""Membership model linking profiles to tenants with a role and status."""

from datetime import datetime
from sqlalchemy import Integer, String, ForeignKey, Enum, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from trophy_cabinet.models.base import Base, TimestampMixin
from trophy_cabinet.models.role import TenantRole, MembershipStatus

if TYPE_CHECKING:
    from trophy_cabinet.models.profile import Profile
    from trophy_cabinet.models.tenant import Tenant


class Membership(Base, TimestampMixin):
    """
    Join table linking profiles to tenants with a role and a status.

    Example memberships:
    - "Alice" is OWNER/ACTIVE in "Riverside FC"
    - "Bob" is PLAYER/ACTIVE in "Riverside FC"
    - "Bob" is STAFF/SUSPENDED in "Hilltop Chess Club" (no access there)

    Constraints:
    - Unique(tenant_id, user_id) - one membership per user per tenant
    - Exactly one OWNER per tenant, created together with the tenant
      (enforced at application layer)
    """

    __tablename__ = "memberships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[TenantRole] = mapped_column(
        Enum(TenantRole, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=TenantRole.PLAYER,
    )
    status: Mapped[MembershipStatus] = mapped_column(
        Enum(MembershipStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=MembershipStatus.PENDING,
    )
    joined_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="memberships")
    profile: Mapped["Profile"] = relationship("Profile", back_populates="memberships")

    # Constraints
    __table_args__ = (
        UniqueConstraint("tenant_id", "user_id", name="uq_tenant_user"),
    )

    @property
    def is_active(self) -> bool:
        return self.status == MembershipStatus.ACTIVE

    def __repr__(self) -> str:
        return (
            f"<Membership(tenant_id={self.tenant_id}, user_id='{self.user_id}', "
            f"role={self.role.value}, status={self.status.value})>"
        )
