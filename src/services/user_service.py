"""User service: lookup and CRUD rules over a UserRepository.

Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from datetime import datetime, timezone

from domain.model.errors import NotFoundError, UnauthorizedError
from domain.model.user import NewUser, UpdateUser, User
from port.user_repository import UserRepository
from services.password_service import DUMMY_HASH, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid login"


def get_all(repo: UserRepository) -> list[User]:
    return repo.get_all()


def find(repo: UserRepository, user_id: str) -> User:
    """Find a user by id.

    Raises:
        NotFoundError: no user with that id
    """
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def find_by_auth(repo: UserRepository, email: str, password: str) -> User:
    """Find the user whose email and password both match.

    Emails are not unique, so every account under the email is tried.
    Unknown email and wrong password raise the same error and both run
    a bcrypt check.

    Raises:
        UnauthorizedError: credentials do not match a stored user
    """
    candidates = repo.get_all_by_email(email)
    if not candidates:
        verify_password(password, DUMMY_HASH)
        raise UnauthorizedError(INVALID_LOGIN)

    for user in candidates:
        if verify_password(password, user.password):
            return user
    raise UnauthorizedError(INVALID_LOGIN)


def create(repo: UserRepository, new_user: NewUser) -> User:
    """Hash the password, insert the user and return the stored record.

    Raises:
        DuplicateError: a user with the same id already exists
    """
    user = repo.create(User.from_new(new_user, hash_password))
    logger.info("User created", extra={"user_id": user.id})
    return user


def _matches(user: User, update_user: UpdateUser) -> bool:
    return (
        user.first_name == update_user.first_name
        and user.last_name == update_user.last_name
        and user.email == update_user.email
        and user.updated_by == update_user.updated_by
    )


def update(repo: UserRepository, update_user: UpdateUser) -> User:
    """Apply an update and return the user as persisted afterwards.

    Re-applying an update that changes nothing leaves the record,
    including updated_at, untouched.

    Raises:
        NotFoundError: no user with that id
    """
    current = find(repo, update_user.id)
    if _matches(current, update_user):
        return current

    repo.update(update_user, datetime.now(timezone.utc))
    user = find(repo, update_user.id)
    logger.info("User updated", extra={"user_id": user.id, "updated_by": update_user.updated_by})
    return user


def delete(repo: UserRepository, user_id: str) -> None:
    """Delete a user. Deleting an absent id is not an error."""
    if repo.delete(user_id):
        logger.info("User deleted", extra={"user_id": user_id})
    else:
        logger.debug("Delete matched no user", extra={"user_id": user_id})
