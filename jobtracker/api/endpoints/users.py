from fastapi import APIRouter, Depends

from jobtracker.core.auth import IdentityContext
from jobtracker.core.deps import get_identity_provider, is_authorized
from jobtracker.core.exceptions import NotFoundError
from jobtracker.core.identity import IdentityProvider
from jobtracker.schemas.response import success_response
from jobtracker.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/{id}")
def get_user(
    id: str,
    provider: IdentityProvider = Depends(get_identity_provider),
    identity: IdentityContext = Depends(is_authorized(["admin"], allow_same_user=True)),
):
    """Retrieve a user profile. Admins can read any profile, users only their own."""
    user = provider.get_user(id)
    if user is None:
        raise NotFoundError(f"User with ID {id} not found", code="USER_NOT_FOUND")

    return success_response(UserResponse.model_validate(user), "User Retrieved")
