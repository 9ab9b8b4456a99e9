"""
Authentication endpoints for user registration and login.

- POST /register: Create new user account
- POST /login: Authenticate and receive a bearer token
"""

import logging
from fastapi import APIRouter, Depends

from jobtracker.core.deps import get_identity_provider
from jobtracker.core.exceptions import AuthenticationError
from jobtracker.core.identity import IdentityProvider
from jobtracker.schemas.response import success_response
from jobtracker.schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/register", status_code=201)
def register(
    request: UserRegisterRequest,
    provider: IdentityProvider = Depends(get_identity_provider)
):
    """
    Register a new user account with the default role.

    Returns the created user profile. Use /login to obtain a token.
    """
    user = provider.create_user(request.email, request.password)
    return success_response(UserResponse.model_validate(user), "User registered")


@router.post("/login")
def login(
    request: UserLoginRequest,
    provider: IdentityProvider = Depends(get_identity_provider)
):
    """
    Authenticate with e-mail and password and return a bearer token.
    """
    user = provider.authenticate_user(request.email, request.password)
    if user is None:
        raise AuthenticationError("Incorrect email or password", code="INVALID_CREDENTIALS")

    token = provider.issue_token(user.id)
    logger.info(f"User logged in: {user.email}")

    return success_response(TokenResponse(token=token), "User logged in")
