"""Repository for InviteCode model operations."""

from datetime import datetime
from sqlalchemy import or_
from sqlalchemy.orm import Session
from trophy_cabinet.models.invite_code import InviteCode


class InviteCodeRepository:
    """Repository for InviteCode model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_code(self, code: str) -> InviteCode | None:
        """Get invite code by its code string"""
        return self.db.query(InviteCode).filter(InviteCode.code == code).first()

    def code_exists(self, code: str) -> bool:
        """Check whether a code string is already in use (any tenant)"""
        return self.db.query(InviteCode.id).filter(InviteCode.code == code).first() is not None

    def get_by_id_and_tenant(self, code_id: int, tenant_id: int) -> InviteCode | None:
        """
        Get invite code ensuring it belongs to the tenant.

        Returns None if code doesn't exist or belongs to another tenant.
        """
        return (
            self.db.query(InviteCode)
            .filter(InviteCode.id == code_id, InviteCode.tenant_id == tenant_id)
            .first()
        )

    def get_by_tenant(self, tenant_id: int) -> list[InviteCode]:
        """Get all invite codes for a tenant, newest first"""
        return (
            self.db.query(InviteCode)
            .filter(InviteCode.tenant_id == tenant_id)
            .order_by(InviteCode.created_at.desc(), InviteCode.id.desc())
            .all()
        )

    def create(self, invite_code: InviteCode) -> InviteCode:
        """
        Create new invite code.

        Raises:
            IntegrityError: If the code string already exists
        """
        self.db.add(invite_code)
        self.db.commit()
        self.db.refresh(invite_code)
        return invite_code

    def update(self, invite_code: InviteCode) -> InviteCode:
        """Update existing invite code"""
        self.db.commit()
        self.db.refresh(invite_code)
        return invite_code

    def consume_use(self, code_id: int, now: datetime) -> bool:
        """
        Atomically take one use of an invite code, without committing.

        A single conditional UPDATE increments uses_count only while the code
        is active, unexpired and below max_uses, so two concurrent
        redemptions of the last use cannot both succeed. The caller commits
        (together with the membership write) or rolls back.

        Args:
            code_id: InviteCode ID
            now: Current time used for the expiry check

        Returns:
            True if a use was taken, False if the code was not redeemable
        """
        updated = (
            self.db.query(InviteCode)
            .filter(
                InviteCode.id == code_id,
                InviteCode.is_active.is_(True),
                or_(InviteCode.expires_at.is_(None), InviteCode.expires_at > now),
                or_(
                    InviteCode.max_uses.is_(None),
                    InviteCode.uses_count < InviteCode.max_uses,
                ),
            )
            .update(
                {InviteCode.uses_count: InviteCode.uses_count + 1},
                synchronize_session=False,
            )
        )
        return updated == 1
