"""Tests for asynchronous LinnStrument discovery."""

import asyncio
import threading
import time

import pytest

from linnlights.exceptions import DeviceAccessUnavailableError, DeviceNotFoundError
from linnlights.midi import DeviceLocator, LocateStatus, OutputDevice

LINNSTRUMENT = "LinnStrument MIDI"


@pytest.mark.asyncio
class TestDeviceLocator:
    """Test discovery outcomes and notifications."""

    async def test_found(self, make_transport, notifier):
        transport = make_transport(outputs=[LINNSTRUMENT])
        locator = DeviceLocator(transport, notifier)

        result = await locator.locate(LINNSTRUMENT)

        assert result.status is LocateStatus.FOUND
        assert result
        assert isinstance(result.device, OutputDevice)
        assert result.device.name == LINNSTRUMENT
        notifier.notify.assert_called_once()
        message = notifier.notify.call_args[0][0]
        assert "LinnStrument found!" in message
        assert "MIDI channel 1" in message
        assert notifier.notify.call_args[1]["severity"] == "information"

    async def test_picks_exact_name_among_others(self, make_transport, notifier):
        transport = make_transport(outputs=["LinnStrument MIDI 2", "IAC Bus 1", LINNSTRUMENT])
        result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT)

        assert result.device.name == LINNSTRUMENT
        assert list(transport.ports) == [LINNSTRUMENT]

    async def test_not_found(self, make_transport, notifier):
        transport = make_transport(outputs=["IAC Bus 1", "LinnStrument MIDI 2"])
        result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT)

        assert result.status is LocateStatus.NOT_FOUND
        assert not result
        assert result.device is None
        assert isinstance(result.error, DeviceNotFoundError)
        assert result.error.available == ["IAC Bus 1", "LinnStrument MIDI 2"]
        notifier.notify.assert_called_once()
        message = notifier.notify.call_args[0][0]
        assert "Could not find your LinnStrument" in message
        assert "make sure it is connected" in message
        assert notifier.notify.call_args[1]["severity"] == "error"
        # No port was opened, so nothing could have been sent
        assert transport.ports == {}

    async def test_zero_outputs(self, make_transport, notifier):
        result = await DeviceLocator(make_transport(), notifier).locate(LINNSTRUMENT)
        assert result.status is LocateStatus.NOT_FOUND
        notifier.notify.assert_called_once()

    async def test_access_unavailable(self, make_transport, notifier):
        transport = make_transport(outputs=[LINNSTRUMENT], access_error=PermissionError("denied"))
        result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT)

        assert result.status is LocateStatus.ACCESS_UNAVAILABLE
        assert isinstance(result.error, DeviceAccessUnavailableError)
        assert "denied" in result.error.technical_message
        notifier.notify.assert_called_once()
        assert "restart" in notifier.notify.call_args[0][0]

    async def test_missing_backend_is_access_unavailable(self, make_transport, notifier):
        transport = make_transport(access_error=ImportError("No module named 'rtmidi'"))
        result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT)
        assert result.status is LocateStatus.ACCESS_UNAVAILABLE

    async def test_open_failure_is_access_unavailable(self, make_transport, notifier):
        transport = make_transport(outputs=[LINNSTRUMENT], open_error=RuntimeError("port busy"))
        result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT)

        assert result.status is LocateStatus.ACCESS_UNAVAILABLE
        assert "port busy" in result.error.technical_message
        notifier.notify.assert_called_once()

    async def test_find_returns_device_or_none(self, make_transport, notifier):
        found = await DeviceLocator(make_transport(outputs=[LINNSTRUMENT]), notifier).find(LINNSTRUMENT)
        missing = await DeviceLocator(make_transport(), notifier).find(LINNSTRUMENT)

        assert found is not None
        assert missing is None

    async def test_timeout_reported_as_access_unavailable(self, make_transport, notifier):
        gate = threading.Event()
        transport = make_transport(outputs=[LINNSTRUMENT], gate=gate)
        try:
            result = await DeviceLocator(transport, notifier).locate(LINNSTRUMENT, timeout=0.05)
        finally:
            gate.set()

        assert result.status is LocateStatus.ACCESS_UNAVAILABLE
        assert "no response within" in result.error.technical_message
        notifier.notify.assert_called_once()

        for _ in range(200):
            port = transport.ports.get(LINNSTRUMENT)
            if port is not None and port.closed:
                break
            await asyncio.sleep(0.01)
        assert transport.ports[LINNSTRUMENT].closed

    async def test_cancellation_propagates_without_notification(self, make_transport, notifier):
        gate = threading.Event()
        transport = make_transport(outputs=[LINNSTRUMENT], gate=gate)
        task = asyncio.create_task(DeviceLocator(transport, notifier).locate(LINNSTRUMENT))
        await asyncio.sleep(0.02)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        notifier.notify.assert_not_called()

        # A port opened after cancellation is closed again
        gate.set()
        for _ in range(200):
            port = transport.ports.get(LINNSTRUMENT)
            if port is not None and port.closed:
                break
            await asyncio.sleep(0.01)
        assert transport.ports[LINNSTRUMENT].closed

    async def test_default_notifier_logs(self, make_transport, caplog):
        with caplog.at_level("INFO"):
            result = await DeviceLocator(make_transport(outputs=[LINNSTRUMENT])).locate()
        assert result
        assert "LinnStrument found!" in caplog.text


def wait_until_closed(transport, name, limit=2.0):
    """Poll until the worker thread has opened and closed the named port."""
    deadline = time.monotonic() + limit
    while time.monotonic() < deadline:
        port = transport.ports.get(name)
        if port is not None and port.closed:
            return True
        time.sleep(0.01)
    return False


class TestDiscoveryFromSyncCode:
    """Discovery driven by asyncio.run(), as the CLI does it."""

    def test_timeout_does_not_wait_for_hung_backend(self, make_transport, notifier):
        gate = threading.Event()
        transport = make_transport(outputs=[LINNSTRUMENT], gate=gate)
        locator = DeviceLocator(transport, notifier)

        try:
            started = time.monotonic()
            device = asyncio.run(locator.find(LINNSTRUMENT, timeout=0.1))
            elapsed = time.monotonic() - started
        finally:
            gate.set()

        assert device is None
        assert elapsed < 1.0
        assert "restart" in notifier.notify.call_args[0][0]

        # The backend answers late; the port it opens is closed again
        assert wait_until_closed(transport, LINNSTRUMENT)

    def test_found(self, make_transport, notifier):
        transport = make_transport(outputs=[LINNSTRUMENT])
        device = asyncio.run(DeviceLocator(transport, notifier).find(LINNSTRUMENT, timeout=1.0))

        assert device is not None
        assert not device.closed
        device.close()
        assert transport.ports[LINNSTRUMENT].closed
