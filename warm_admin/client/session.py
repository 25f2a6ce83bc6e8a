# warm_admin/client/session.py
"""Helpers around the session stored by a successful admin login."""
import json
import logging
from typing import Optional

from pydantic import ValidationError as SchemaError

from warm_admin.client.storage import ADMIN_TOKEN_KEY, ADMIN_USER_KEY, KeyValueStorage
from warm_admin.schemas.auth import AdminProfile

log = logging.getLogger("warm_admin.auth")


def get_token(storage: KeyValueStorage) -> Optional[str]:
    return storage.get(ADMIN_TOKEN_KEY) or None


def current_admin(storage: KeyValueStorage) -> Optional[AdminProfile]:
    """Stored admin profile, or None when missing or unreadable."""
    raw = storage.get(ADMIN_USER_KEY)
    if not raw:
        return None
    try:
        return AdminProfile.model_validate(json.loads(raw))
    except (ValueError, SchemaError):
        log.warning("Stored admin profile is not valid JSON, ignoring it")
        return None


def is_authenticated(storage: KeyValueStorage) -> bool:
    return get_token(storage) is not None


def logout(storage: KeyValueStorage) -> None:
    """Forget the stored token and profile."""
    storage.remove(ADMIN_TOKEN_KEY, ADMIN_USER_KEY)
    log.info("Admin session cleared")
