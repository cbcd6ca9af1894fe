"""Password hashing utilities."""

import bcrypt

# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    """Check whether bcrypt would refuse the password."""
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Returns False for hashes bcrypt cannot parse rather than raising.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
