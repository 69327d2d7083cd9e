"""Salted password hashing for stored credentials."""

import os

import bcrypt

DEFAULT_ROUNDS = 12


def _rounds() -> int:
    return int(os.getenv("BCRYPT_ROUNDS", DEFAULT_ROUNDS))


def hash_password(plain: str) -> str:
    """Hash ``plain`` with a fresh bcrypt salt."""
    hashed = bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=_rounds()))
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
