"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace
from datetime import datetime

from domain.model.errors import DuplicateError
from domain.model.user import UpdateUser, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        if user.id in self.store:
            raise DuplicateError(f"User {user.id} already exists")
        self.store[user.id] = replace(user)
        return user

    def update(self, update_user: UpdateUser, updated_at: datetime) -> bool:
        user = self.store.get(update_user.id)
        if not user:
            return False

        user.first_name = update_user.first_name
        user.last_name = update_user.last_name
        user.email = update_user.email
        user.updated_by = update_user.updated_by
        user.updated_at = updated_at
        return True

    def delete(self, user_id: str) -> bool:
        return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_all(self) -> list[User]:
        return [replace(user) for user in self.store.values()]

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None

    def get_all_by_email(self, email: str) -> list[User]:
        return [replace(user) for user in self.store.values() if user.email == email]
