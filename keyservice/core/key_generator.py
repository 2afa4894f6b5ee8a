"""Random identifiers and secret material for issued keys."""

import secrets
import string
import uuid

# 62-character alphabet the secret part of every key is drawn from
SECRET_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
SECRET_LENGTH = 32

KEY_ID_PREFIX = "key_"


def generate_secret(length: int = SECRET_LENGTH) -> str:
    """Return ``length`` characters chosen uniformly from SECRET_ALPHABET."""
    return "".join(secrets.choice(SECRET_ALPHABET) for _ in range(length))


def generate_id() -> str:
    """Return a key id: ``key_`` plus the first segment of a random UUID."""
    return KEY_ID_PREFIX + str(uuid.uuid4()).split("-")[0]


def build_prefix(environment: str) -> str:
    """Return the display prefix for keys issued in ``environment``."""
    return f"br_{environment}_"


def generate_key(prefix: str) -> str:
    """Return a full key value under ``prefix``."""
    return prefix + generate_secret()
