from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from trophy_cabinet.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from trophy_cabinet.models.membership import Membership


class Profile(Base, TimestampMixin):
    """
    Public profile of an authenticated user.

    The primary key is the identity provider's user id (the 'sub' claim of
    the JWT). No credentials are stored here. Auto-created on the first API
    request with a valid JWT.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Relationships
    memberships: Mapped[list["Membership"]] = relationship(
        "Membership",
        back_populates="profile",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Profile(id='{self.id}')>"
