from sqlalchemy.orm import Session
from trophy_cabinet.models.profile import Profile


class ProfileRepository:
    """Repository for Profile model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_or_create(self, profile_id: str, display_name: str | None = None) -> Profile:
        """
        Get profile by identity provider user id or create if doesn't exist.

        This is called automatically when a user makes their first API
        request with a valid JWT.

        Args:
            profile_id: User ID from the JWT 'sub' claim
            display_name: Optional 'display_name' claim used for new profiles

        Returns:
            Profile object (either existing or newly created)
        """
        profile = self.get_by_id(profile_id)

        if not profile:
            profile = Profile(id=profile_id, display_name=display_name)
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)

        return profile

    def get_by_id(self, profile_id: str) -> Profile | None:
        """Get profile by user id"""
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        self.db.commit()
        self.db.refresh(profile)
        return profile
