from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable


@dataclass
class User:
    """Domain model representing a user row."""
    id: str
    first_name: str
    last_name: str
    email: str
    password: str
    created_by: str
    created_at: datetime
    updated_by: str
    updated_at: datetime

    @classmethod
    def from_new(cls, new_user: 'NewUser', hash_password: Callable[[str], str]) -> 'User':
        """Build a persistable User, hashing the plaintext password once."""
        now = datetime.now(timezone.utc)
        return cls(
            id=new_user.id,
            first_name=new_user.first_name,
            last_name=new_user.last_name,
            email=new_user.email,
            password=hash_password(new_user.password),
            created_by=new_user.created_by,
            created_at=now,
            updated_by=new_user.updated_by,
            updated_at=now,
        )


@dataclass
class NewUser:
    """Creation input. ``password`` is plaintext until converted to a User."""
    id: str
    first_name: str
    last_name: str
    email: str
    password: str
    created_by: str
    updated_by: str


@dataclass
class UpdateUser:
    """Mutable identity fields of an existing user."""
    id: str
    first_name: str
    last_name: str
    email: str
    updated_by: str


@dataclass
class AuthUser:
    """Identity carried by a session token."""
    id: str
    email: str
