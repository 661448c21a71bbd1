"""Tenant model for multi-tenant isolation."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from trophy_cabinet.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from trophy_cabinet.models.membership import Membership
    from trophy_cabinet.models.invite_code import InviteCode
    from trophy_cabinet.models.trophy_template import TrophyTemplate


class Tenant(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    A tenant is a club: it owns its members, invite codes, trophy templates,
    seasons, teams and awards. Nothing is shared across tenants. Users reach
    tenant data through memberships with a role (Owner, Admin, Staff, Player).

    The slug is globally unique and URL-safe (lowercase letters, digits and
    hyphens); routes address tenants by slug.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    logo_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Billing (populated by the billing provider, not by this API)
    stripe_customer_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stripe_subscription_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stripe_subscription_status: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Relationships
    memberships: Mapped[list["Membership"]] = relationship(
        "Membership",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )
    invite_codes: Mapped[list["InviteCode"]] = relationship(
        "InviteCode",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )
    trophy_templates: Mapped[list["TrophyTemplate"]] = relationship(
        "TrophyTemplate",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, slug='{self.slug}')>"
