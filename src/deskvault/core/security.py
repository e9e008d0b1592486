"""
Password hashing utilities.

This module provides password hashing and verification with Argon2id
(argon2-cffi). A wrong password is reported as False; only a malfunction of
the hashing engine itself (e.g. a corrupt stored hash) raises.
"""

import logging
from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerifyMismatchError
from argon2.exceptions import VerificationError as Argon2VerificationError

from deskvault.core.config import settings
from deskvault.core.exceptions import HashingError, VerificationError

logger = logging.getLogger(__name__)


# =============================================================================
# Password Hashing with Argon2id
# =============================================================================
# Argon2id is memory-hard and salted per hash; the encoded hash carries the
# algorithm, parameters, and salt, so verification needs nothing else.
# =============================================================================

pwd_hasher = PasswordHasher(
    time_cost=settings.argon2_time_cost,
    memory_cost=settings.argon2_memory_cost,
    parallelism=settings.argon2_parallelism,
    hash_len=32,  # 32-byte output
    salt_len=16,  # 16-byte salt
)


def hash_password(password: str) -> str:
    """
    Hash a password using Argon2id.

    Args:
        password: Plain text password to hash

    Returns:
        Argon2id hash string (includes algorithm, parameters, salt, and hash)

    Raises:
        HashingError: If the hashing engine fails

    Example:
        >>> hashed = hash_password("my_secure_password")
        >>> # Returns: $argon2id$v=19$m=65536,t=2,p=4$...
    """
    try:
        return pwd_hasher.hash(password)
    except Argon2HashingError as e:
        logger.error(f"Password hashing failed: {e}")
        raise HashingError(f"Failed to hash password: {e}") from e


def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password against an Argon2id hash.

    Args:
        password: Plain text password to verify
        hashed_password: Argon2id hash to verify against

    Returns:
        True if password matches hash, False on a mismatch

    Raises:
        VerificationError: If the stored hash is malformed or the engine fails

    Example:
        >>> hashed = hash_password("my_password")
        >>> verify_password("my_password", hashed)
        True
        >>> verify_password("wrong_password", hashed)
        False
    """
    try:
        return pwd_hasher.verify(hashed_password, password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, Argon2VerificationError) as e:
        logger.error(f"Password verification failed: {type(e).__name__}")
        raise VerificationError(f"Failed to verify password: {e}") from e


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return pwd_hasher.hash("deskvault-timing-equalizer")


def simulate_password_verification(password: str) -> None:
    """
    Spend the cost of one verification without a stored hash.

    Called when no active account matches an email, so an unknown address
    takes as long to reject as a wrong password.

    Args:
        password: Plain text password supplied by the caller
    """
    try:
        pwd_hasher.verify(_dummy_hash(), password)
    except VerifyMismatchError:
        pass
