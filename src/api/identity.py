"""Cookie-backed session identity.

Remembers the signed session token in an HttpOnly cookie on the response
and reads it back from the request on later calls. The cookie lives
exactly as long as the token it carries.
"""

import os

from fastapi import Request, Response

from services.token_service import JWT_EXPIRATION_HOURS

SESSION_NAME = os.getenv("SESSION_NAME", "auth")
SESSION_SECURE = os.getenv("SESSION_SECURE", "false").lower() in ("1", "true", "yes")


class CookieIdentity:
    def __init__(self, request: Request, response: Response):
        self.request = request
        self.response = response

    def remember(self, token: str) -> None:
        self.response.set_cookie(
            key=SESSION_NAME,
            value=token,
            httponly=True,
            secure=SESSION_SECURE,
            samesite="lax",
            max_age=JWT_EXPIRATION_HOURS * 3600,
        )

    def forget(self) -> None:
        self.response.delete_cookie(SESSION_NAME, path="/")

    def identity(self) -> str | None:
        return self.request.cookies.get(SESSION_NAME)
