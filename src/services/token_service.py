"""Session token issuance and verification (JWT, HS256)."""

import os
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from domain.model.claim import PrivateClaim
from domain.model.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))


def new_claim(user_id: str, email: str) -> PrivateClaim:
    """Build a claim that expires after JWT_EXPIRATION_HOURS."""
    return PrivateClaim.new(user_id, email, ttl=timedelta(hours=JWT_EXPIRATION_HOURS))


def create_jwt(claim: PrivateClaim) -> str:
    """Sign a claim into an opaque bearer token."""
    expires_at = claim.expires_at or claim.issued_at + timedelta(hours=JWT_EXPIRATION_HOURS)
    payload = {
        "sub": claim.user_id,
        "email": claim.email,
        "iat": int(claim.issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_jwt(token: str) -> PrivateClaim:
    """Verify signature and expiry, returning the embedded claim.

    Raises:
        UnauthorizedError: bad signature, expired token or missing subject
    """
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug("JWT verification failed", extra={"error": str(e)})
        raise UnauthorizedError("Invalid authentication credentials") from e

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedError("Invalid authentication credentials")

    return PrivateClaim(
        user_id=user_id,
        email=payload.get("email", ""),
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc) if "iat" in payload else datetime.now(timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc) if "exp" in payload else None,
    )
