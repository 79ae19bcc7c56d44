"""Authentication routes (login, logout).

Login remembers a signed session token in the caller's session cookie;
logout forgets it.
"""

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_identity, get_user_repo
from api.errors import to_http_exception
from api.models import LoginRequest, MessageResponse, UserResponse
from domain.model.errors import DomainError
from port.identity import Identity
from port.user_repository import UserRepository
from services import auth_service
from services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserResponse)
async def login(
    payload: Any = Body(None),
    repo: UserRepository = Depends(get_user_repo),
    identity: Identity = Depends(get_identity),
):
    """Login a user and remember their JWT in the session.

    Raises:
        HTTPException: 400 if the body is invalid, 401 if credentials don't match
    """
    try:
        request = validate(LoginRequest, payload)
        # bcrypt and the database driver both block
        user = await asyncio.to_thread(
            auth_service.login, repo, identity, request.email, request.password
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return UserResponse.from_domain(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(identity: Identity = Depends(get_identity)):
    """Forget the session token. Succeeds even without an active session."""
    auth_service.logout(identity)
    return MessageResponse(message="Logged out")
