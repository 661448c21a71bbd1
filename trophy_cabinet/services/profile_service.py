from sqlalchemy.orm import Session
from trophy_cabinet.models.profile import Profile
from trophy_cabinet.repositories.profile_repository import ProfileRepository
from trophy_cabinet.schemas.profile_schemas import ProfileUpdate


class ProfileService:
    """Service for the caller's own profile"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProfileRepository(db)

    def update_profile(self, data: ProfileUpdate, profile: Profile) -> Profile:
        """Update display name and avatar"""
        if data.display_name is not None:
            profile.display_name = data.display_name
        if data.avatar_url is not None:
            profile.avatar_url = str(data.avatar_url)
        return self.repo.update(profile)
