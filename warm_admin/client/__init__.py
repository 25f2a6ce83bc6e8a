"""Admin panel client: login form, stored session and authenticated API client."""
from warm_admin.client.login import ADMIN_LOGIN_PATH, AdminLoginForm, LoginState
from warm_admin.client.notifications import LogNotifier, Notifier, RecordingNotifier
from warm_admin.client.storage import (
    ADMIN_TOKEN_KEY,
    ADMIN_USER_KEY,
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
)

__all__ = [
    "ADMIN_LOGIN_PATH",
    "ADMIN_TOKEN_KEY",
    "ADMIN_USER_KEY",
    "AdminLoginForm",
    "JsonFileStorage",
    "KeyValueStorage",
    "LogNotifier",
    "LoginState",
    "MemoryStorage",
    "Notifier",
    "RecordingNotifier",
]
