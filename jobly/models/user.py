"""
User model for authentication.

Only admins may create, update or delete jobs.
"""

from sqlalchemy import Column, String, Boolean, DateTime, func
from jobly.core.database import Base


class User(Base):
    """User account identified by its username."""
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    hashed_password = Column(String, nullable=False)

    # User profile
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    is_admin = Column(Boolean, default=False, nullable=False)  # Admin role for job management

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
