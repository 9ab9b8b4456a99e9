"""
User model backing the built-in identity provider.

A user authenticates with e-mail and password and carries a single role that
is embedded in every token issued for it.
"""

import uuid
from sqlalchemy import Column, String, Boolean, DateTime, func
from jobtracker.core.database import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    """Account known to the identity provider."""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_new_user_id, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    # Authorization
    role = Column(String, nullable=False, default="user")

    # Account status
    is_active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
