"""bcrypt password helpers (cost comes from ``BCRYPT_LOG_ROUNDS``)."""

from mindmanaged.extensions import bcrypt


def hash_password(plain_password: str) -> str:
    return bcrypt.generate_password_hash(plain_password).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """False for a wrong password and for an empty or non-bcrypt stored hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.check_password_hash(hashed_password, plain_password)
    except ValueError:
        # "Invalid salt": the stored value was never a bcrypt hash.
        return False
