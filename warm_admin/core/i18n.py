# warm_admin/core/i18n.py
"""User-facing notification messages for the admin login flow."""
from typing import Dict

DEFAULT_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "admin.login.welcome": "Welcome to the admin panel!",
        "admin.login.error": "Invalid username or password",
        "admin.login.required": "Please enter username and password",
        "admin.session.expired": "Session expired. Please log in again.",
    },
    "ru": {
        "admin.login.welcome": "Добро пожаловать в админ-панель!",
        "admin.login.error": "Неверное имя пользователя или пароль",
        "admin.login.required": "Введите имя пользователя и пароль",
        "admin.session.expired": "Сессия истекла. Пожалуйста, войдите снова.",
    },
}


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a message, falling back to English and then to the key itself."""
    catalog = MESSAGES.get(language) or MESSAGES[DEFAULT_LANGUAGE]
    return catalog.get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key, key)
