"""Auth service: login/logout orchestration.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.user import User
from port.identity import Identity
from port.user_repository import UserRepository
from services import user_service
from services.token_service import create_jwt, new_claim

logger = logging.getLogger(__name__)


def login(repo: UserRepository, identity: Identity, email: str, password: str) -> User:
    """Authenticate a user and remember a fresh token in their session.

    Returns the authenticated User domain object.

    Raises:
        UnauthorizedError: unknown email or wrong password
    """
    user = user_service.find_by_auth(repo, email, password)

    token = create_jwt(new_claim(user.id, user.email))
    identity.remember(token)

    logger.info("User logged in", extra={"user_id": user.id})
    return user


def logout(identity: Identity) -> None:
    """Forget the session token. Safe to call without an active session."""
    identity.forget()
