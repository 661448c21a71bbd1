from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Text, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from trophy_cabinet.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from trophy_cabinet.models.tenant import Tenant
    from trophy_cabinet.models.award import Award


class TrophyTier(str, PyEnum):
    """Trophy tier enumeration"""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    SPECIAL = "special"


class TrophyTemplate(Base, TimestampMixin):
    """
    Reusable trophy definition owned by a tenant.

    Deleting a template deletes every award granted from it
    (see TrophyService.delete_template).
    """

    __tablename__ = "trophy_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    tier: Mapped[TrophyTier | None] = mapped_column(
        Enum(TrophyTier, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="trophy_templates")
    awards: Mapped[list["Award"]] = relationship(
        "Award", back_populates="trophy_template", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("points >= 0", name="ck_trophy_templates_points_non_negative"),
    )
