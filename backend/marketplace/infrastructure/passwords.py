"""Password Hashing — passlib CryptContext wrapper.

Invariants:
    - Plain passwords never leave this module except as a hash
    - bcrypt's 72-byte input limit surfaces as a validation error, not a silent truncation
"""

from functools import lru_cache

from passlib.context import CryptContext

from marketplace.config import get_settings
from marketplace.core.errors import InputValidationError

MAX_BCRYPT_BYTES = 72


@lru_cache
def get_password_context() -> CryptContext:
    scheme = get_settings().password_hash_scheme
    return CryptContext(schemes=[scheme], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with the configured scheme."""
    if len(password.encode("utf-8")) > MAX_BCRYPT_BYTES:
        raise InputValidationError(
            f"Password too long (max {MAX_BCRYPT_BYTES} bytes)", "password",
        )
    return get_password_context().hash(password)
