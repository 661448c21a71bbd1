from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from trophy_cabinet.database import get_db
from trophy_cabinet.dependencies import get_current_profile
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.services.profile_service import ProfileService
from trophy_cabinet.schemas.profile_schemas import ProfileResponse, ProfileUpdate

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(profile: Profile = Depends(get_current_profile)):
    """Get the authenticated user's profile (created on first request)"""
    return profile


@router.patch("/me", response_model=ProfileResponse)
def update_my_profile(
    data: ProfileUpdate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Update display name and avatar"""
    service = ProfileService(db)
    return service.update_profile(data, profile)
