"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and expose the caller's
identity. Usage:

    @router.get("/jobs")
    def list_jobs(identity: IdentityContext = Depends(is_authorized(["user"]))):
        ...
"""

from typing import Iterable, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jobtracker.core import auth
from jobtracker.core.auth import AuthorizationOptions, IdentityContext
from jobtracker.core.database import get_db
from jobtracker.core.identity import IdentityProvider, JWTIdentityProvider

# HTTP Bearer token scheme (Authorization: Bearer <token>).
# auto_error is off so a missing token goes through our own error envelope.
security = HTTPBearer(auto_error=False)


def get_identity_provider(db: Session = Depends(get_db)) -> IdentityProvider:
    """Identity provider bound to the request's database session."""
    return JWTIdentityProvider(db)


async def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> IdentityContext:
    """
    Verify the bearer token and store the identity on request.state.

    Raises:
        AuthenticationError 401: If the token is missing or invalid
    """
    token = credentials.credentials if credentials else None
    identity = auth.authenticate_token(token, provider)
    request.state.identity = identity
    return identity


def is_authorized(has_role: Iterable[str], allow_same_user: bool = False):
    """
    Build a dependency that authenticates, then authorizes the request.

    The `id` path parameter, when the route has one, is compared against the
    caller's uid for the same-user rule. The decision is made on every
    request.

    Raises:
        AuthenticationError 401: If the token is missing or invalid
        AuthorizationError 403: If the role/ownership check fails
    """
    options = AuthorizationOptions(has_role=frozenset(has_role), allow_same_user=allow_same_user)

    async def check_authorization(
        request: Request,
        identity: IdentityContext = Depends(authenticate),
    ) -> IdentityContext:
        auth.authorize(identity, options, request.path_params.get("id"))
        return identity

    return check_authorization
