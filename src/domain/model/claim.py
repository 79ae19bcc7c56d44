from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

DEFAULT_EXPIRATION = timedelta(hours=24)


@dataclass
class PrivateClaim:
    """Payload signed into a session token."""
    user_id: str
    email: str
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: datetime | None = None

    @classmethod
    def new(cls, user_id: str, email: str, ttl: timedelta = DEFAULT_EXPIRATION) -> 'PrivateClaim':
        now = datetime.now(timezone.utc)
        return cls(user_id=user_id, email=email, issued_at=now, expires_at=now + ttl)
