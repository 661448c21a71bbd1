from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from trophy_cabinet.core.security import extract_identity
from trophy_cabinet.core.exceptions import UnauthorizedException, NotFoundException
from trophy_cabinet.database import get_db
from trophy_cabinet.repositories.profile_repository import ProfileRepository
from trophy_cabinet.repositories.tenant_repository import TenantRepository
from trophy_cabinet.services.membership_service import MembershipService
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.models.tenant_context import TenantContext

security = HTTPBearer(auto_error=False)


async def get_current_profile(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Profile:
    """
    FastAPI dependency to validate JWT and get/create the caller's profile.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Extract user id from 'sub' claim
    4. Get or auto-create Profile record
    5. Return Profile object for use in endpoints

    Raises:
        HTTPException 401: If token missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id, display_name = extract_identity(credentials.credentials)

        profile_repo = ProfileRepository(db)
        return profile_repo.get_or_create(user_id, display_name)

    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_tenant_context(
    tenant_slug: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
) -> TenantContext:
    """
    FastAPI dependency resolving the caller's ACTIVE membership in the
    tenant named by the {tenant_slug} path parameter.

    This is the player-area gate: any active member passes. Services check
    the higher roles they need through TenantContext.

    Raises:
        NotFoundException: If no tenant has this slug
        ForbiddenException: If the caller has no active membership in it
    """
    tenant = TenantRepository(db).get_by_slug(tenant_slug)
    if not tenant:
        raise NotFoundException("Club not found")

    return MembershipService(db).resolve_context(profile, tenant)
