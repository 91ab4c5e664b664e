"""Shared test fixtures."""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.enums import EventType
from models.events import Event, EventCollection
from models.preferences import PreferenceProvider


def make_write(duration_ms, path="/var/log/app.log", bytes_written=4096, start_time=0.0):
    return Event(
        type_id=EventType.FILE_WRITE.value,
        start_time=start_time,
        duration_ms=duration_ms,
        attributes={"path": path, "bytes_written": bytes_written},
    )


def make_read(duration_ms, path="/etc/app.conf", bytes_read=1024):
    return Event(
        type_id=EventType.FILE_READ.value,
        duration_ms=duration_ms,
        attributes={"path": path, "bytes_read": bytes_read},
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep IORULES_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("IORULES_"):
            monkeypatch.delenv(key)
    from config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_items():
    """Three writes: 1000ms and 2000ms to /data/a.log, 4500ms to /data/b.log."""
    return EventCollection([
        make_write(1000, path="/data/a.log", bytes_written=512, start_time=1.0),
        make_write(4500, path="/data/b.log", bytes_written=2048, start_time=2.0),
        make_write(2000, path="/data/a.log", bytes_written=1024, start_time=3.0),
        make_read(9000),
    ])


@pytest.fixture
def preferences():
    return PreferenceProvider({"io.file.write.warning.limit": 4000})


@pytest.fixture
def events_file(tmp_path):
    """JSON event dump matching sample_items."""
    import json
    data = {
        "settings": {"jdk.FileWrite": True, "jdk.FileRead": True},
        "events": [
            {"type": "jdk.FileWrite", "start_time": 1.0, "duration_ms": 1000,
             "path": "/data/a.log", "bytes_written": 512},
            {"type": "jdk.FileWrite", "start_time": 2.0, "duration": "4.5 s",
             "path": "/data/b.log", "bytes_written": 2048},
            {"type": "jdk.FileWrite", "start_time": 3.0, "duration_ms": 2000,
             "path": "/data/a.log", "bytes_written": 1024},
            {"type": "jdk.FileRead", "duration_ms": 9000, "path": "/etc/app.conf"},
        ],
    }
    path = tmp_path / "events.json"
    path.write_text(json.dumps(data))
    return path
