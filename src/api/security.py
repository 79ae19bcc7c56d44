"""Session authentication dependencies."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_identity
from api.errors import to_http_exception
from domain.model.errors import UnauthorizedError
from domain.model.user import AuthUser
from port.identity import Identity
from services.token_service import decode_jwt

security = HTTPBearer(auto_error=False)


def get_current_user_required(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    identity: Identity = Depends(get_identity),
) -> AuthUser:
    """Get the authenticated caller (required). Raises 401 if not authenticated.

    The token is read from the session cookie first, then from an
    ``Authorization: Bearer`` header.
    """
    token = identity.identity() or (credentials.credentials if credentials else None)
    if not token:
        raise to_http_exception(UnauthorizedError("Not authenticated"))

    try:
        claim = decode_jwt(token)
    except UnauthorizedError as e:
        raise to_http_exception(e) from e

    return AuthUser(id=claim.user_id, email=claim.email)
