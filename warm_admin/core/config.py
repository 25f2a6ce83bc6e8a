# warm_admin/core/config.py
"""
Application configuration - loads from environment variables.
Single source of truth for all settings.
"""
import os
from typing import Mapping, Optional
from urllib.parse import quote_plus
from pathlib import Path
from dotenv import load_dotenv

from warm_admin.schemas.admin import ProvisionConfig

# Load environment variables FIRST
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_path = BASE_DIR / '.env'
load_dotenv(dotenv_path=env_path)

# ────────────────────────────────────────────
# Defaults
# ────────────────────────────────────────────
DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = "3306"
DEFAULT_DB_USER = "warm"
DEFAULT_DB_NAME = "warm"
DEFAULT_ADMIN_EMAIL = "admin@warmphuket.ru"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "Admin@123456"
DEFAULT_ADMIN_FIRST_NAME = "Admin"
DEFAULT_ADMIN_LAST_NAME = "User"


def build_database_url(env: Mapping[str, str]) -> str:
    """DATABASE_URL wins; otherwise assemble a MySQL URL from the DB_* parts."""
    url = env.get("DATABASE_URL")
    if url:
        return url
    encoded_password = quote_plus(env.get("DB_PASSWORD", ""))
    return (
        f"mysql+pymysql://{env.get('DB_USER', DEFAULT_DB_USER)}:{encoded_password}"
        f"@{env.get('DB_HOST', DEFAULT_DB_HOST)}:{env.get('DB_PORT', DEFAULT_DB_PORT)}"
        f"/{env.get('DB_NAME', DEFAULT_DB_NAME)}?charset=utf8mb4"
    )


# ────────────────────────────────────────────
# Admin UI / API client
# ────────────────────────────────────────────
API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "300"))
UI_LANGUAGE: str = os.getenv("UI_LANGUAGE", "en")

# ────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR: Path = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))


# ────────────────────────────────────────────
# Settings Class
# ────────────────────────────────────────────
class Settings:
    API_BASE_URL: str = API_BASE_URL
    API_TIMEOUT: float = API_TIMEOUT
    UI_LANGUAGE: str = UI_LANGUAGE
    LOG_LEVEL: str = LOG_LEVEL
    LOG_DIR: Path = LOG_DIR

settings = Settings()


def load_provision_config(
    force_update: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> ProvisionConfig:
    """
    Build the provisioning config from the environment.

    Defaults are applied here and nowhere else; the provisioner only
    ever sees a complete ProvisionConfig.
    """
    env = os.environ if environ is None else environ
    return ProvisionConfig(
        database=build_database_url(env),
        target_email=env.get("ADMIN_EMAIL") or DEFAULT_ADMIN_EMAIL,
        target_username=env.get("ADMIN_USERNAME") or DEFAULT_ADMIN_USERNAME,
        initial_password=env.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
        first_name=env.get("ADMIN_FIRST_NAME") or DEFAULT_ADMIN_FIRST_NAME,
        last_name=env.get("ADMIN_LAST_NAME") or DEFAULT_ADMIN_LAST_NAME,
        force_update=force_update,
    )
