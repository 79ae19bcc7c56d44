import os
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

# Driver-level statement logging is noisy; keep it to warnings
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./users.db')
DATABASE_POOL_SIZE = int(os.getenv('DATABASE_POOL_SIZE', '5'))
DATABASE_MAX_OVERFLOW = int(os.getenv('DATABASE_MAX_OVERFLOW', '10'))
DATABASE_POOL_TIMEOUT = int(os.getenv('DATABASE_POOL_TIMEOUT', '30'))

_engine_cache: Engine | None = None
_session_factory_cache: sessionmaker[Session] | None = None


def reset_engine():
    global _engine_cache, _session_factory_cache
    if _engine_cache is not None:
        _engine_cache.dispose()
    _engine_cache = None
    _session_factory_cache = None


def build_engine(url: str = DATABASE_URL) -> Engine:
    """Create an Engine backed by a bounded connection pool.

    Checkout waits up to DATABASE_POOL_TIMEOUT seconds when the pool and
    its overflow are exhausted, then raises.
    """
    if url.startswith('sqlite'):
        # SQLite connections are handed between worker threads
        return create_engine(
            url,
            connect_args={'check_same_thread': False},
            pool_pre_ping=True,
        )
    return create_engine(
        url,
        pool_size=DATABASE_POOL_SIZE,
        max_overflow=DATABASE_MAX_OVERFLOW,
        pool_timeout=DATABASE_POOL_TIMEOUT,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def get_engine() -> Engine:
    """Return the process-wide Engine, creating it on first use."""
    global _engine_cache
    if _engine_cache is None:
        _engine_cache = build_engine()
        logger.info("Database engine created", extra={"dialect": _engine_cache.dialect.name})
    return _engine_cache


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory_cache
    if _session_factory_cache is None:
        _session_factory_cache = sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)
    return _session_factory_cache


def ping() -> bool:
    """Run a trivial query to check that the database is reachable."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text('SELECT 1'))
        return True
    except SQLAlchemyError as e:
        logger.error("Database ping failed", extra={"error": str(e)})
        return False
