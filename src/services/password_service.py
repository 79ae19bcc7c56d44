"""Password hashing with bcrypt (salted per hash)."""

import os

import bcrypt

# 12 rounds (2^12 = 4096 iterations) in production; tests may lower it
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time check; malformed hashes verify as False."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


# Checked when an email has no account, so unknown emails pay the same bcrypt cost
DUMMY_HASH = hash_password("not-a-real-password")
