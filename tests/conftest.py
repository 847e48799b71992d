"""Pytest configuration for door status service tests."""

import logging
import pytest
from fastapi.testclient import TestClient

from api import create_app
from src.door_manager import DoorManager


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers and level changes made by configure_logging()."""
    root_logger = logging.getLogger()
    defaults = [h for h in root_logger.handlers if getattr(h, "_door_default", False)]
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if getattr(handler, "_door_configured", False):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in defaults:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    door_manager = DoorManager(open_duration=60, clock=clock)
    yield door_manager
    door_manager.shutdown()


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html>door app</html>")
    (public / "app.js").write_text("console.log('door');")
    return public


@pytest.fixture
def logs_dir(tmp_path):
    return str(tmp_path / "logs")


@pytest.fixture
def client(manager, public_dir, logs_dir):
    app = create_app(
        door_manager=manager, public_dir=str(public_dir), logs_dir=logs_dir
    )
    with TestClient(app) as test_client:
        yield test_client
