"""
Identity provider abstraction.

Authentication only needs three capabilities from whatever issues
identities: verify a credential, create a user, and issue a token for a
user. `JWTIdentityProvider` is the built-in binding, signing its own tokens
and keeping users in the `users` table. Another provider can be plugged in by
overriding the `get_identity_provider` dependency.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol
from jose import JWTError
from sqlalchemy.orm import Session

from jobtracker.core.config import settings
from jobtracker.core.exceptions import ConflictError, NotFoundError
from jobtracker.core.security import create_access_token, decode_token, get_password_hash, verify_password
from jobtracker.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifiedCredential:
    """Claims extracted from a credential the provider accepted"""
    subject_id: str
    role: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)


class IdentityProvider(Protocol):
    def verify_credential(self, token: str) -> VerifiedCredential:
        """Return the credential's claims, or raise if it is not valid."""
        ...

    def create_user(self, email: str, password: str, role: Optional[str] = None) -> User:
        ...

    def issue_token(self, subject_id: str) -> str:
        ...

    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        ...

    def get_user(self, user_id: str) -> Optional[User]:
        ...


class JWTIdentityProvider:
    """Identity provider that signs its own JWTs and stores users via SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    def verify_credential(self, token: str) -> VerifiedCredential:
        """
        Decode and validate a token.

        Only the signature and expiry are checked; the user table is not
        consulted, so a token stays valid until it expires.

        Raises:
            JWTError: If the token is malformed, expired or has no subject
        """
        payload = decode_token(token)
        subject_id = payload.get("sub")
        if not subject_id:
            raise JWTError("Token has no subject")

        return VerifiedCredential(
            subject_id=str(subject_id),
            role=payload.get("role"),
            claims=payload,
        )

    def create_user(self, email: str, password: str, role: Optional[str] = None) -> User:
        """
        Create a new user account.

        Raises:
            ConflictError: If the e-mail is already registered
        """
        existing_user = self.db.query(User).filter(User.email == email).first()
        if existing_user:
            raise ConflictError("Email already registered", code="EMAIL_ALREADY_REGISTERED")

        user = User(
            email=email,
            hashed_password=get_password_hash(password),
            role=role or settings.DEFAULT_USER_ROLE,
            is_active=True,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"New user registered: {user.email} (id: {user.id}, role: {user.role})")
        return user

    def issue_token(self, subject_id: str) -> str:
        """
        Issue an access token carrying the user's id and role.

        Raises:
            NotFoundError: If no user has this id
        """
        user = self.get_user(subject_id)
        if user is None:
            raise NotFoundError(f"User with ID {subject_id} not found", code="USER_NOT_FOUND")

        return create_access_token(data={"sub": user.id, "role": user.role})

    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Return the active user matching the credentials, or None."""
        user = self.db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.hashed_password):
            return None
        if not user.is_active:
            return None
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
