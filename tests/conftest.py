import logging

import pytest
from sqlalchemy import create_engine

from warm_admin.client.notifications import RecordingNotifier
from warm_admin.client.storage import MemoryStorage
from warm_admin.schemas.admin import ProvisionConfig

from tests.helpers import ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'warm.db'}"


@pytest.fixture
def engine(db_url):
    engine = create_engine(db_url)
    yield engine
    engine.dispose()


@pytest.fixture
def make_config(engine):
    def _make(**overrides):
        values = {
            "database": engine,
            "target_email": ADMIN_EMAIL,
            "target_username": "admin",
            "initial_password": ADMIN_PASSWORD,
        }
        values.update(overrides)
        return ProvisionConfig(**values)
    return _make


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
