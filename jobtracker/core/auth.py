"""
Authentication and authorization decisions.

These functions hold the branching logic only; `jobtracker.core.deps` wires
them into FastAPI dependencies.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

from jobtracker.core.exceptions import AuthenticationError, AuthorizationError
from jobtracker.core.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityContext:
    """Who is making the current request. Lives only as long as the request."""
    uid: str
    role: Optional[str] = None


@dataclass(frozen=True)
class AuthorizationOptions:
    """
    Per-route authorization rule.

    has_role: roles allowed to proceed
    allow_same_user: also allow the caller whose uid equals the route's id
    """
    has_role: FrozenSet[str]
    allow_same_user: bool = False


def authenticate_token(token: Optional[str], provider: IdentityProvider) -> IdentityContext:
    """
    Verify a bearer token and build the identity context.

    The provider is called exactly once; any failure it reports becomes an
    AuthenticationError chained to the original exception.

    Raises:
        AuthenticationError: If the token is missing or rejected by the provider
    """
    if not token:
        raise AuthenticationError("Unauthorized: No token provided", code="TOKEN_NOT_FOUND")

    try:
        credential = provider.verify_credential(token)
    except Exception as e:
        logger.warning(f"Token verification failed: {e}")
        raise AuthenticationError("Unauthorized: Invalid token", code="TOKEN_INVALID") from e

    return IdentityContext(uid=credential.subject_id, role=credential.role)


def authorize(
    identity: IdentityContext,
    options: AuthorizationOptions,
    target_id: Optional[str] = None
) -> None:
    """
    Decide whether the identity may proceed.

    Rules, in order:
    1. allow_same_user and target_id == identity.uid -> allowed
    2. identity has no role -> AuthorizationError
    3. identity.role in has_role -> allowed
    4. otherwise -> AuthorizationError

    Raises:
        AuthorizationError: If the request is not allowed
    """
    if options.allow_same_user and target_id is not None and target_id == identity.uid:
        return

    if not identity.role:
        raise AuthorizationError("Forbidden: No role found", code="ROLE_NOT_FOUND")

    if identity.role in options.has_role:
        return

    raise AuthorizationError("Forbidden: Insufficient role", code="INSUFFICIENT_ROLE")
