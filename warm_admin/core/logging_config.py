# warm_admin/core/logging_config.py
"""
Logging configuration for warm_admin.
Console output plus rotating log files for the provisioning and login flows.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from warm_admin.core.config import LOG_DIR, LOG_LEVEL

AUTH_LOGGER_NAME = "warm_admin.auth"

SENSITIVE_KEYS = {"password", "initial_password", "token", "secret", "api_key", "adminToken"}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record):
        # Work on a copy so file handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        record.levelname = f"{log_color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-30s | %(filename)s:%(lineno)d | %(message)s'
AUTH_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _rotating_handler(path: Path, level: int, fmt: str, max_mb: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_mb * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    app_name: str = "warm_admin",
    level: str = LOG_LEVEL,
    log_dir: Optional[Path] = None,
):
    """
    Console output plus three rotating files under log_dir:

    - error.log: ERROR and above from every logger
    - debug.log: everything
    - auth.log: the login client (warm_admin.auth) only
    """
    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(ColoredFormatter('%(levelname)s | %(name)s | %(message)s'))
    root_logger.addHandler(console_handler)

    root_logger.addHandler(_rotating_handler(log_dir / "error.log", logging.ERROR, FILE_FORMAT, 10))
    root_logger.addHandler(_rotating_handler(log_dir / "debug.log", logging.DEBUG, FILE_FORMAT, 20))

    auth_logger = get_auth_logger()
    for handler in auth_logger.handlers[:]:
        auth_logger.removeHandler(handler)
    auth_logger.addHandler(_rotating_handler(log_dir / "auth.log", logging.DEBUG, AUTH_FORMAT, 5))
    auth_logger.setLevel(logging.DEBUG)
    auth_logger.propagate = True  # root handlers still see login activity

    logging.getLogger(__name__).debug(f"Logging initialized for {app_name} in {log_dir}")
    return root_logger


def get_auth_logger():
    """Get logger for login client activity"""
    return logging.getLogger(AUTH_LOGGER_NAME)


def mask_secrets(params: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of params with sensitive values hidden, safe to log."""
    return {
        key: '***HIDDEN***' if key in SENSITIVE_KEYS else value
        for key, value in params.items()
    }
