"""Credential hashing and the authorization guard for record mutations."""
import logging

from passlib.context import CryptContext

from .config import settings
from .exceptions import Unauthorized

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash this context recognises
        logger.warning("Stored credential has an unrecognised hash format")
        return False


def authorize(record, password: str) -> None:
    """Raise ``Unauthorized`` unless ``password`` matches the record's stored credential.

    Must run before any write to an existing record. ``record`` is the
    unredacted stored record.
    """
    if not verify_password(password, record.password):
        logger.warning("Rejected credential for %s %s", type(record).__name__.lower(), record.id)
        raise Unauthorized("Unauthorized, password does not match, try again")
