"""SQLAlchemy implementation of UserRepository."""

from datetime import datetime
from logging import getLogger

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import UserRow
from domain.model.errors import DuplicateError, StorageError
from domain.model.user import UpdateUser, User

logger = getLogger(__name__)


class SqlUserRepository:
    """Each call checks a connection out of the pool and returns it on exit."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def _to_domain(self, row: UserRow) -> User:
        """Convert a users row to the User domain model."""
        return User(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            password=row.password,
            created_by=row.created_by,
            created_at=row.created_at,
            updated_by=row.updated_by,
            updated_at=row.updated_at,
        )

    # ── read operations ──────────────────────────────────────

    def get_all(self) -> list[User]:
        try:
            with self.session_factory() as session:
                rows = session.scalars(select(UserRow)).all()
                return [self._to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise StorageError("Failed to list users") from e

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            with self.session_factory() as session:
                row = session.get(UserRow, user_id)
                return self._to_domain(row) if row else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by ID", extra={"user_id": user_id, "error": str(e)})
            raise StorageError("Failed to get user") from e

    def get_all_by_email(self, email: str) -> list[User]:
        try:
            with self.session_factory() as session:
                rows = session.scalars(select(UserRow).where(UserRow.email == email)).all()
                return [self._to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to get users by email", extra={"error": str(e)})
            raise StorageError("Failed to get user") from e

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        try:
            with self.session_factory.begin() as session:
                session.add(UserRow(
                    id=user.id,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    password=user.password,
                    created_by=user.created_by,
                    created_at=user.created_at,
                    updated_by=user.updated_by,
                    updated_at=user.updated_at,
                ))
            return user
        except IntegrityError as e:
            logger.warning("User creation failed: id already exists", extra={"user_id": user.id})
            raise DuplicateError(f"User {user.id} already exists") from e
        except SQLAlchemyError as e:
            logger.error("Failed to create user", extra={"user_id": user.id, "error": str(e)})
            raise StorageError("Failed to create user") from e

    def update(self, update_user: UpdateUser, updated_at: datetime) -> bool:
        try:
            with self.session_factory.begin() as session:
                result = session.execute(
                    update(UserRow)
                    .where(UserRow.id == update_user.id)
                    .values(
                        first_name=update_user.first_name,
                        last_name=update_user.last_name,
                        email=update_user.email,
                        updated_by=update_user.updated_by,
                        updated_at=updated_at,
                    )
                )
                return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Failed to update user", extra={"user_id": update_user.id, "error": str(e)})
            raise StorageError("Failed to update user") from e

    def delete(self, user_id: str) -> bool:
        try:
            with self.session_factory.begin() as session:
                result = session.execute(delete(UserRow).where(UserRow.id == user_id))
                return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Failed to delete user", extra={"user_id": user_id, "error": str(e)})
            raise StorageError("Failed to delete user") from e
