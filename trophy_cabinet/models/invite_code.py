"""Invite code model: redeemable tokens that grant a role in a tenant."""

from datetime import datetime
from sqlalchemy import Integer, String, Boolean, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from trophy_cabinet.core.timeutils import as_utc, utcnow
from trophy_cabinet.models.base import Base
from trophy_cabinet.models.role import TenantRole

if TYPE_CHECKING:
    from trophy_cabinet.models.tenant import Tenant


class InviteCode(Base):
    """
    Short code that lets a new user join a tenant with a preset role.

    Lifecycle: ACTIVE -> INACTIVE through explicit deactivation only; there
    is no way back. Expiry and exhaustion are not stored, they are derived
    from expires_at and uses_count/max_uses on every read (see is_usable).

    uses_count only ever grows, and only through the conditional update in
    InviteCodeRepository.consume_use.
    """

    __tablename__ = "invite_codes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    role_default: Mapped[TenantRole] = mapped_column(
        Enum(TenantRole, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=TenantRole.PLAYER,
    )
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    max_uses: Mapped[int | None] = mapped_column(Integer, nullable=True)
    uses_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_by_user_id: Mapped[str | None] = mapped_column(
        String(255),
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="invite_codes")

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return as_utc(self.expires_at) <= (now or utcnow())

    def is_exhausted(self) -> bool:
        return self.max_uses is not None and self.uses_count >= self.max_uses

    def is_usable(self, now: datetime | None = None) -> bool:
        """Active, not expired and not exhausted. Never cached."""
        return self.is_active and not self.is_expired(now) and not self.is_exhausted()

    def __repr__(self) -> str:
        return f"<InviteCode(id={self.id}, code='{self.code}', tenant_id={self.tenant_id})>"
