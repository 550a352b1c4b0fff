"""Password hashing utilities."""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored hash.

    Unknown or malformed hashes never verify.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
