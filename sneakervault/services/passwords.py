"""Password hashing with bcrypt."""

from passlib.context import CryptContext

from sneakervault.config import get_settings

settings = get_settings()

# bcrypt only reads this many bytes of the password
MAX_PASSWORD_BYTES = 72

# Password hashing context. bcrypt salts every hash on its own.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
    bcrypt__truncate_error=True,
)


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a password.

    Raises ValueError for passwords bcrypt would truncate; request schemas
    reject those before they get here.
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    A digest that is not a recognisable bcrypt hash counts as a mismatch, and
    so does a password longer than bcrypt can compare.
    """
    if not plain_password or not hashed_password:
        return False
    if password_too_long(plain_password):
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
