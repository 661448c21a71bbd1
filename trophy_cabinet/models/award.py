from datetime import datetime
from sqlalchemy import String, Integer, Text, Boolean, ForeignKey, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from trophy_cabinet.core.timeutils import utcnow
from trophy_cabinet.models.base import Base

if TYPE_CHECKING:
    from trophy_cabinet.models.trophy_template import TrophyTemplate
    from trophy_cabinet.models.profile import Profile
    from trophy_cabinet.models.season import Season
    from trophy_cabinet.models.team import Team


class Award(Base):
    """
    A trophy template granted to a recipient within a tenant.

    Awards are created and deleted, never updated in place.
    """

    __tablename__ = "awards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    trophy_template_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("trophy_templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    season_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("seasons.id", ondelete="SET NULL"), nullable=True
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True
    )
    recipient_user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    awarded_by_user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    awarded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    # Relationships
    trophy_template: Mapped["TrophyTemplate"] = relationship(
        "TrophyTemplate", back_populates="awards"
    )
    recipient: Mapped["Profile"] = relationship("Profile", foreign_keys=[recipient_user_id])
    awarded_by: Mapped["Profile"] = relationship("Profile", foreign_keys=[awarded_by_user_id])
    season: Mapped["Season | None"] = relationship("Season")
    team: Mapped["Team | None"] = relationship("Team")

    # Composite indexes for common queries
    __table_args__ = (
        Index("ix_awards_tenant_awarded_at", "tenant_id", "awarded_at"),
        Index("ix_awards_tenant_recipient", "tenant_id", "recipient_user_id"),
    )
