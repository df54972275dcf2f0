from passlib.context import CryptContext

from .config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def prepare_password(password: str) -> str:
    # Sin HASH_PASSWORDS se conserva el texto plano para no romper los datos existentes.
    if settings.hash_passwords:
        return get_password_hash(password)
    return password


def verify_password(plain_password: str, stored: str | None) -> bool:
    if not isinstance(stored, str) or not stored:
        return False
    if stored.startswith(BCRYPT_PREFIXES):
        return pwd_context.verify(plain_password, stored)
    # legacy texto plano
    return plain_password == stored
