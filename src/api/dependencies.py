from fastapi import Request, Response

from adapter.sql.connection import get_session_factory
from adapter.sql.user_repository import SqlUserRepository
from api.identity import CookieIdentity
from port.identity import Identity
from port.user_repository import UserRepository


def get_user_repo() -> UserRepository:
    return SqlUserRepository(get_session_factory())


def get_identity(request: Request, response: Response) -> Identity:
    return CookieIdentity(request, response)
