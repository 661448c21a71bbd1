import os

# Settings are read at import time; tests never touch a real database or Stripe
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_trophy_cabinet.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-trophy-cabinet")
os.environ.setdefault("STRIPE_WEBHOOK_SECRET", "whsec_test_secret")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from trophy_cabinet.database import get_db
from trophy_cabinet.models.base import Base
from trophy_cabinet.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from trophy_cabinet.models.tenant import Tenant
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.invite_code import InviteCode
from trophy_cabinet.models.trophy_template import TrophyTemplate, TrophyTier
from trophy_cabinet.models.season import Season
from trophy_cabinet.models.team import Team
from trophy_cabinet.models.award import Award
from trophy_cabinet.models.role import TenantRole, MembershipStatus
from trophy_cabinet.core.timeutils import utcnow
# Import FastAPI app AFTER model imports
from trophy_cabinet.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    user_id: str = "owner-user", expired: bool = False, display_name: str | None = None
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        expired: If True, create expired token
        display_name: Optional display_name claim

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "exp": exp, "iat": datetime.now(UTC)}
    if display_name is not None:
        payload["display_name"] = display_name

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def headers_for(user_id: str) -> dict:
    """Authorization headers for an arbitrary user"""
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id)}"}


def add_member(
    db_session,
    tenant: Tenant,
    user_id: str,
    role: TenantRole,
    status: MembershipStatus = MembershipStatus.ACTIVE,
) -> Membership:
    """Create a profile (if needed) and its membership in a tenant"""
    if db_session.get(Profile, user_id) is None:
        db_session.add(Profile(id=user_id, display_name=user_id.replace("-", " ").title()))
        db_session.flush()
    membership = Membership(
        tenant_id=tenant.id,
        user_id=user_id,
        role=role,
        status=status,
        joined_at=utcnow() if status == MembershipStatus.ACTIVE else None,
    )
    db_session.add(membership)
    db_session.commit()
    db_session.refresh(membership)
    return membership


@pytest.fixture
def club(db_session):
    """Tenant shared by the role fixtures below"""
    tenant = Tenant(name="Riverside Rovers", slug="riverside-rovers")
    db_session.add(tenant)
    db_session.commit()
    db_session.refresh(tenant)
    return tenant


@pytest.fixture
def other_club(db_session):
    """Second tenant for isolation tests"""
    tenant = Tenant(name="Hilltop United", slug="hilltop-united")
    db_session.add(tenant)
    db_session.commit()
    db_session.refresh(tenant)
    return tenant


@pytest.fixture
def owner_membership(db_session, club):
    return add_member(db_session, club, "owner-user", TenantRole.OWNER)


@pytest.fixture
def admin_membership(db_session, club):
    return add_member(db_session, club, "admin-user", TenantRole.ADMIN)


@pytest.fixture
def staff_membership(db_session, club):
    return add_member(db_session, club, "staff-user", TenantRole.STAFF)


@pytest.fixture
def player_membership(db_session, club):
    return add_member(db_session, club, "player-user", TenantRole.PLAYER)


@pytest.fixture
def owner_headers(owner_membership):
    """Authorization headers for the club owner"""
    return headers_for("owner-user")


@pytest.fixture
def admin_headers(admin_membership):
    """Authorization headers for a club admin"""
    return headers_for("admin-user")


@pytest.fixture
def staff_headers(staff_membership):
    """Authorization headers for a club staff member"""
    return headers_for("staff-user")


@pytest.fixture
def player_headers(player_membership):
    """Authorization headers for a club player"""
    return headers_for("player-user")


@pytest.fixture
def outsider_headers():
    """Authorization headers for a user with no memberships"""
    return headers_for("outsider-user")


@pytest.fixture
def gold_trophy(db_session, club):
    """A gold trophy worth 100 points"""
    template = TrophyTemplate(
        tenant_id=club.id, name="Player of the Year", tier=TrophyTier.GOLD, points=100
    )
    db_session.add(template)
    db_session.commit()
    db_session.refresh(template)
    return template


def make_invite_code(db_session, tenant: Tenant, code: str = "JOINUS22", **kwargs) -> InviteCode:
    """Insert an invite code directly, bypassing issuance checks"""
    fields = {"role_default": TenantRole.PLAYER, "uses_count": 0, "is_active": True}
    fields.update(kwargs)
    invite_code = InviteCode(tenant_id=tenant.id, code=code, **fields)
    db_session.add(invite_code)
    db_session.commit()
    db_session.refresh(invite_code)
    return invite_code
