from datetime import datetime
from typing import Protocol

from domain.model.user import UpdateUser, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def get_all(self) -> list[User]:
        """Return every user in store-defined order."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_all_by_email(self, email: str) -> list[User]:
        """Return every user registered under an email. Emails are not unique."""
        ...

    def create(self, user: User) -> User:
        """Insert a fully built user. Raise DuplicateError if the id exists."""
        ...

    def update(self, update_user: UpdateUser, updated_at: datetime) -> bool:
        """Apply mutable fields by id. Return True if a row matched."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete by id. Return True if a row was removed."""
        ...
