import logging
import secrets
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from trophy_cabinet.config import settings
from trophy_cabinet.core.timeutils import as_utc, utcnow
from trophy_cabinet.models.invite_code import InviteCode
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.tenant_context import TenantContext
from trophy_cabinet.models.role import MembershipStatus
from trophy_cabinet.repositories.invite_code_repository import InviteCodeRepository
from trophy_cabinet.repositories.membership_repository import MembershipRepository
from trophy_cabinet.schemas.invite_code_schemas import InviteCodeCreate
from trophy_cabinet.core.exceptions import (
    ConflictException,
    ForbiddenException,
    InvalidInviteCodeException,
    InviteCodeExhaustedException,
    InviteCodeExpiredException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# No 0/O or 1/I so codes survive being read aloud or copied by hand
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
MAX_CODE_ATTEMPTS = 10

REDEMPTION_ERRORS = (
    InvalidInviteCodeException,
    InviteCodeExpiredException,
    InviteCodeExhaustedException,
)


def generate_code(length: int) -> str:
    """Random invite code drawn from CODE_ALPHABET"""
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


class InviteCodeService:
    """Service layer for invite code issuance and redemption"""

    def __init__(self, db: Session):
        self.db = db
        self.invite_repo = InviteCodeRepository(db)
        self.membership_repo = MembershipRepository(db)

    def _generate_unique_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_code(settings.INVITE_CODE_LENGTH)
            if not self.invite_repo.code_exists(code):
                return code
        raise ConflictException("Could not generate a unique invite code, please try again")

    def issue(self, data: InviteCodeCreate, context: TenantContext) -> InviteCode:
        """
        Issue a new ACTIVE invite code for the current tenant (ADMIN or OWNER).

        Raises:
            ForbiddenException: If user lacks admin permissions
            ValidationException: If expires_at is not in the future
            ConflictException: If no unique code could be allocated
        """
        if not context.can_manage_members():
            raise ForbiddenException("Only admins and owners can create invite codes")

        expires_at = as_utc(data.expires_at)
        if expires_at is not None and expires_at <= utcnow():
            raise ValidationException("Invite code expiry must be in the future")

        invite_code = InviteCode(
            tenant_id=context.tenant.id,
            code=self._generate_unique_code(),
            role_default=data.role_default,
            expires_at=expires_at,
            max_uses=data.max_uses,
            uses_count=0,
            is_active=True,
            created_by_user_id=context.profile.id,
        )
        try:
            invite_code = self.invite_repo.create(invite_code)
        except IntegrityError:
            self.db.rollback()
            raise ConflictException("Could not generate a unique invite code, please try again")

        logger.info(
            "Invite code %s issued for tenant %s (role=%s, max_uses=%s, expires_at=%s)",
            invite_code.code,
            context.tenant.slug,
            invite_code.role_default.value,
            invite_code.max_uses,
            invite_code.expires_at,
        )
        return invite_code

    def list_codes(self, context: TenantContext) -> list[InviteCode]:
        """All invite codes of the current tenant, newest first (ADMIN or OWNER)"""
        if not context.can_manage_members():
            raise ForbiddenException("Only admins and owners can view invite codes")
        return self.invite_repo.get_by_tenant(context.tenant.id)

    def deactivate(self, code_id: int, context: TenantContext) -> InviteCode:
        """
        Permanently deactivate an invite code (ADMIN or OWNER).

        Deactivating an inactive code is accepted and changes nothing.

        Raises:
            ForbiddenException: If user lacks admin permissions
            NotFoundException: If code not found in this tenant
        """
        if not context.can_manage_members():
            raise ForbiddenException("Only admins and owners can deactivate invite codes")

        invite_code = self.invite_repo.get_by_id_and_tenant(code_id, context.tenant.id)
        if not invite_code:
            raise NotFoundException("Invite code not found")

        invite_code.is_active = False
        invite_code = self.invite_repo.update(invite_code)
        logger.info("Invite code %s deactivated by %s", invite_code.code, context.profile.id)
        return invite_code

    @staticmethod
    def _check_redeemable(invite_code: InviteCode | None, now: datetime) -> None:
        """
        Raise the redemption error for a code, in precedence order.

        Raises:
            InvalidInviteCodeException: Unknown or deactivated code
            InviteCodeExpiredException: expires_at has passed
            InviteCodeExhaustedException: uses_count reached max_uses
        """
        if invite_code is None or not invite_code.is_active:
            raise InvalidInviteCodeException("Invalid invite code")
        if invite_code.is_expired(now):
            raise InviteCodeExpiredException("This invite code has expired")
        if invite_code.is_exhausted():
            raise InviteCodeExhaustedException(
                "This invite code has reached its maximum number of uses"
            )

    def _ensure_redeemable(
        self, invite_code: InviteCode | None, code: str, profile: Profile, now: datetime
    ) -> None:
        try:
            self._check_redeemable(invite_code, now)
        except REDEMPTION_ERRORS as e:
            logger.warning("Rejected redemption of %s by %s: %s", code, profile.id, e)
            raise

    def redeem(self, code: str, profile: Profile) -> Membership:
        """
        Join the code's tenant with the code's default role.

        The use is taken with a conditional UPDATE and the membership is
        written in the same transaction, so the code can never be redeemed
        more than max_uses times even by concurrent requests.

        Args:
            code: Normalised (upper-case) code string
            profile: User joining the tenant

        Returns:
            The new (or reactivated) ACTIVE membership

        Raises:
            InvalidInviteCodeException, InviteCodeExpiredException,
            InviteCodeExhaustedException: If the code cannot be redeemed
            ConflictException: If the user is already an active member
            ForbiddenException: If the user's membership is suspended
        """
        now = utcnow()
        invite_code = self.invite_repo.get_by_code(code)
        self._ensure_redeemable(invite_code, code, profile, now)

        membership = self.membership_repo.get_membership(profile.id, invite_code.tenant_id)
        if membership and membership.status == MembershipStatus.ACTIVE:
            raise ConflictException("You are already a member of this club")
        if membership and membership.status == MembershipStatus.SUSPENDED:
            raise ForbiddenException("Your membership in this club is suspended")

        try:
            if not self.invite_repo.consume_use(invite_code.id, now):
                # Another request took the last use (or the code changed) since
                # it was read; the rollback expires the stale copy.
                self.db.rollback()
                self._ensure_redeemable(self.invite_repo.get_by_code(code), code, profile, now)
                raise InvalidInviteCodeException("Invalid invite code")

            if membership:
                membership.role = invite_code.role_default
                membership.status = MembershipStatus.ACTIVE
                membership.joined_at = now
            else:
                membership = self.membership_repo.create_no_commit(
                    Membership(
                        tenant_id=invite_code.tenant_id,
                        user_id=profile.id,
                        role=invite_code.role_default,
                        status=MembershipStatus.ACTIVE,
                        joined_at=now,
                    )
                )
            self.db.commit()
        except IntegrityError:
            # Concurrent join by the same user: uq_tenant_user rejected the insert
            self.db.rollback()
            raise ConflictException("You are already a member of this club")

        self.db.refresh(membership)
        logger.info(
            "Invite code %s redeemed by %s (tenant_id=%s, role=%s)",
            code,
            profile.id,
            membership.tenant_id,
            membership.role.value,
        )
        return membership
