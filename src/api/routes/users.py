"""User API routes for user CRUD operations.

Endpoints:
- GET /users: List all users
- GET /users/{user_id}: Get a single user
- POST /users: Create (register) a user
- PUT /users/{user_id}: Update a user's identity fields
- DELETE /users/{user_id}: Delete a user

Every route except POST /users requires an authenticated session.
"""

import asyncio
import logging
import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.errors import to_http_exception
from api.models import (
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)
from api.security import get_current_user_required
from domain.model.errors import DomainError
from domain.model.user import AuthUser, NewUser, UpdateUser
from port.user_repository import UserRepository
from services import user_service
from services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _parse_user_id(user_id: str) -> str:
    """Normalize a path id to its canonical UUID string, 400 if malformed."""
    try:
        return str(uuid.UUID(user_id))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid user id: {user_id}")


@router.get("", response_model=UsersResponse)
async def get_users(
    current_user: AuthUser = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get all users."""
    try:
        users = await asyncio.to_thread(user_service.get_all, repo)
    except DomainError as e:
        raise to_http_exception(e) from e

    return [UserResponse.from_domain(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: AuthUser = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get a user by id."""
    user_id = _parse_user_id(user_id)
    try:
        user = await asyncio.to_thread(user_service.find, repo, user_id)
    except DomainError as e:
        raise to_http_exception(e) from e

    return UserResponse.from_domain(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Body(None),
    repo: UserRepository = Depends(get_user_repo),
):
    """Create a user.

    The id is generated here, and the new user is recorded as its own creator.
    """
    try:
        request = validate(CreateUserRequest, payload)
        user_id = str(uuid.uuid4())
        new_user = NewUser(
            id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            created_by=user_id,
            updated_by=user_id,
        )
        user = await asyncio.to_thread(user_service.create, repo, new_user)
    except DomainError as e:
        raise to_http_exception(e) from e

    return UserResponse.from_domain(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    current_user: AuthUser = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update a user and return the record as persisted."""
    user_id = _parse_user_id(user_id)
    try:
        request = validate(UpdateUserRequest, payload)
        update = UpdateUser(
            id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            updated_by=current_user.id,
        )
        user = await asyncio.to_thread(user_service.update, repo, update)
    except DomainError as e:
        raise to_http_exception(e) from e

    return UserResponse.from_domain(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    current_user: AuthUser = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Delete a user. Deleting an unknown id still succeeds."""
    user_id = _parse_user_id(user_id)
    try:
        await asyncio.to_thread(user_service.delete, repo, user_id)
    except DomainError as e:
        raise to_http_exception(e) from e

    logger.info("User delete requested", extra={"user_id": user_id, "requested_by": current_user.id})
    return MessageResponse(message="User deleted successfully")
