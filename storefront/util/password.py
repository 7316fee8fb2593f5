"""Password hashing utilities (bcrypt)."""

import bcrypt

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with a fresh random salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def is_password_hash(value: str | None) -> bool:
    """Return True if the stored value is a bcrypt hash.

    Anything else (federated sentinel, empty string, None) can never be
    used for a local password comparison.
    """
    return bool(value) and value.startswith(BCRYPT_PREFIXES)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns False for values that are not bcrypt hashes instead of raising.
    """
    if not is_password_hash(password_hash):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash with a bcrypt-looking prefix
        return False
