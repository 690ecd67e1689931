"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Make the top-level modules importable without installing the project
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from decoder import Decoder
from utils.eventbus import EventBus


class RecordingBus(EventBus):
    """Event bus that remembers every emitted event."""

    def __init__(self):
        super().__init__()
        self.events = []

    def emit(self, event, **payload):
        self.events.append((event, payload))
        super().emit(event, **payload)

    def statuses(self, event=None):
        return [
            payload["status"]
            for name, payload in self.events
            if "status" in payload and (event is None or name == event)
        ]


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def decoder(bus):
    return Decoder(bus)


@pytest.fixture
def sim_file(tmp_path):
    """Write lines to a simulation file and return its path."""

    def _write(lines, name="frames.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
