# warm_admin/core/security.py
"""
Password hashing for admin accounts.
bcrypt with a fixed work factor; the hash string embeds its own salt.
"""
import bcrypt

from warm_admin.core.exceptions import ValidationError

# Cost 10 keeps provisioning well under a second on current hardware.
BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


def check_password_length(plain_password: str) -> str:
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes (UTF-8)",
            fields=["password"],
        )
    return plain_password


def hash_password(plain_password: str) -> str:
    """Return a salted bcrypt hash of the password."""
    check_password_length(plain_password)
    return bcrypt.hashpw(
        plain_password.encode("utf-8"),
        bcrypt.gensalt(rounds=BCRYPT_ROUNDS),
    ).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Malformed hash, or a password bcrypt refuses
        return False
