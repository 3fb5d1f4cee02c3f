"""Pytest fixtures for tests."""

import threading
import time
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional
from unittest.mock import Mock

import pytest

from linnlights.midi import OutputDevice

LINNSTRUMENT = "LinnStrument MIDI"


class RecordingPort:
    """Stand-in for a mido output port that records raw bytes."""

    def __init__(self, name: str, delay: float = 0.0, fail_after: Optional[int] = None):
        self.name = name
        self.sent: list[list[int]] = []
        self.closed = False
        self.delay = delay
        self.fail_after = fail_after

    def send(self, msg) -> None:
        if self.fail_after is not None and len(self.sent) >= self.fail_after:
            raise OSError("device unplugged")
        self.sent.append(msg.bytes())
        if self.delay:
            time.sleep(self.delay)

    def close(self) -> None:
        self.closed = True


class FakeTransport:
    """MidiTransport double with configurable outputs and failures."""

    def __init__(
        self,
        outputs=(),
        access_error: Optional[Exception] = None,
        open_error: Optional[Exception] = None,
        gate: Optional[threading.Event] = None,
    ):
        self.outputs = list(outputs)
        self.access_error = access_error
        self.open_error = open_error
        self.gate = gate
        self.ports: dict[str, RecordingPort] = {}

    def request_access(self) -> None:
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.access_error is not None:
            raise self.access_error

    def enumerate_outputs(self) -> list[str]:
        return list(self.outputs)

    def open_output(self, name: str) -> RecordingPort:
        if self.open_error is not None:
            raise self.open_error
        port = RecordingPort(name)
        self.ports[name] = port
        return port


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def port():
    """Recording port named like a real LinnStrument."""
    return RecordingPort(LINNSTRUMENT)


@pytest.fixture
def device(port):
    """OutputDevice wrapping the recording port."""
    return OutputDevice(port)


@pytest.fixture
def notifier():
    """Notifier mock that records notify() calls."""
    mock = Mock()
    mock.notify = Mock()
    return mock


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_port():
    """Factory for RecordingPort instances."""
    return RecordingPort
