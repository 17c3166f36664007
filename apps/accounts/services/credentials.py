"""
Password hashing.

Stored format is ``<hex digest>.<hex salt>``: scrypt over the password with
a 16 byte random salt, 64 byte key. Verification re-derives the digest with
the stored salt and compares in constant time.
"""

import hashlib
import secrets

from django.utils.crypto import constant_time_compare

SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64
SALT_BYTES = 16


def _derive(password: str, salt: str) -> str:
    digest = hashlib.scrypt(
        password.encode(),
        salt=salt.encode(),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )
    return digest.hex()


def hash_password(password: str) -> str:
    """Hash ``password`` with a fresh random salt."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive(password, salt)}.{salt}"


def verify_password(supplied: str, stored: str) -> bool:
    """True if ``supplied`` matches the stored ``digest.salt`` string."""
    if not stored or stored.count('.') != 1:
        return False
    digest, salt = stored.split('.')
    if not digest or not salt:
        return False
    return constant_time_compare(_derive(supplied, salt), digest)
