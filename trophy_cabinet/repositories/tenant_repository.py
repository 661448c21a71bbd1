"""Repository for Tenant model operations."""

from sqlalchemy.orm import Session
from trophy_cabinet.models.tenant import Tenant


class TenantRepository:
    """Repository for Tenant model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_slug(self, slug: str) -> Tenant | None:
        """
        Get tenant by its URL slug.

        Args:
            slug: Tenant slug

        Returns:
            Tenant object or None if not found
        """
        return self.db.query(Tenant).filter(Tenant.slug == slug).first()

    def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is already taken"""
        return self.db.query(Tenant.id).filter(Tenant.slug == slug).first() is not None

    def create_no_commit(self, tenant: Tenant) -> Tenant:
        """
        Add a tenant without committing (for atomic ops).

        Caller responsible for commit. The flush assigns the ID so the
        owner membership can reference it in the same transaction.
        """
        self.db.add(tenant)
        self.db.flush()
        return tenant

    def update(self, tenant: Tenant) -> Tenant:
        """
        Update an existing tenant.

        Args:
            tenant: Tenant object with updated fields

        Returns:
            Updated Tenant object
        """
        self.db.commit()
        self.db.refresh(tenant)
        return tenant
