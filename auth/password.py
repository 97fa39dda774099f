"""
Password hashing and verification.

bcrypt is CPU-bound on purpose; the ``a``-prefixed coroutines run it in a
worker thread so request handlers never stall the event loop.

bcrypt only reads the first 72 bytes of a password. Both hashing and
verification truncate to that length, so long passwords register and log in
with the same rule instead of failing.
"""

from __future__ import annotations

import asyncio

import bcrypt

DEFAULT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Salted bcrypt hash of ``password`` at the given work factor."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        # Stored value is not a bcrypt hash
        return False


async def ahash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    return await asyncio.to_thread(hash_password, password, rounds)


async def averify_password(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)
