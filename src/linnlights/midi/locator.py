"""Asynchronous discovery of the LinnStrument output port."""

import asyncio
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from linnlights.exceptions import (
    DeviceAccessUnavailableError,
    DeviceError,
    DeviceNotFoundError,
    wrap_midi_error,
)
from linnlights.models import DEFAULT_DEVICE_NAME
from linnlights.notifications import LoggingNotifier, Notifier

from .device import OutputDevice
from .transport import MidiTransport

logger = logging.getLogger(__name__)

FOUND_MESSAGE = (
    "LinnStrument found!\n"
    "Make sure your LinnStrument is listening on MIDI channel 1,\n"
    "and send colors when ready."
)


class LocateStatus(str, Enum):
    """Outcome of a discovery attempt."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ACCESS_UNAVAILABLE = "access_unavailable"


@dataclass(frozen=True)
class LocateResult:
    """Discovery result: a device when FOUND, otherwise the reported error."""

    status: LocateStatus
    device: Optional[OutputDevice] = None
    error: Optional[DeviceError] = None

    @property
    def found(self) -> bool:
        return self.status is LocateStatus.FOUND

    def __bool__(self) -> bool:
        return self.found


class _Handoff:
    """
    Carries the discovery outcome from the worker thread to the event loop.

    Once the caller abandons discovery, a port the worker opens later is
    closed by whichever side sees it last, so it is never leaked.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, future: "asyncio.Future[OutputDevice]"):
        self._loop = loop
        self._future = future
        self._lock = threading.Lock()
        self._abandoned = False
        self._device: Optional[OutputDevice] = None

    def deliver(self, device: Optional[OutputDevice] = None, error: Optional[BaseException] = None) -> None:
        """Hand over the outcome. Called from the worker thread."""
        with self._lock:
            if self._abandoned:
                if device is not None:
                    _close_abandoned(device)
                return
            self._device = device
            self._loop.call_soon_threadsafe(self._resolve, device, error)

    def abandon(self) -> None:
        """Stop waiting. Called on the event loop."""
        with self._lock:
            self._abandoned = True
            device, self._device = self._device, None
        if device is not None:
            _close_abandoned(device)

    def _resolve(self, device: Optional[OutputDevice], error: Optional[BaseException]) -> None:
        if self._future.done():
            return
        if error is not None:
            self._future.set_exception(error)
        else:
            self._future.set_result(device)


class DeviceLocator:
    """
    Find the LinnStrument among the available MIDI outputs.

    Access and enumeration run on a daemon thread so neither the event
    loop nor asyncio.run() shutdown waits on a slow or permission-gated
    backend. Failures are reported to the notifier and returned as a
    LocateResult; they are never raised. Cancel the awaiting task to
    abandon discovery.
    """

    def __init__(self, transport: MidiTransport, notifier: Optional[Notifier] = None):
        """
        Initialize the locator.

        Args:
            transport: MIDI backend used for access, enumeration and opening
            notifier: Where to report success and failure (defaults to the log)
        """
        self.transport = transport
        self.notifier = notifier or LoggingNotifier()

    async def locate(
        self,
        expected_name: str = DEFAULT_DEVICE_NAME,
        timeout: Optional[float] = None,
    ) -> LocateResult:
        """
        Locate and open the output port named exactly expected_name.

        Args:
            expected_name: Exact port name to match
            timeout: Seconds to wait for MIDI access (None = no limit).
                     Expiry is reported as access unavailable.

        Returns:
            LocateResult (FOUND, NOT_FOUND or ACCESS_UNAVAILABLE)

        Raises:
            asyncio.CancelledError: If the awaiting task is cancelled
        """
        logger.info(f"Looking for MIDI output {expected_name!r}")
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        handoff = _Handoff(loop, future)
        worker = threading.Thread(
            target=self._discover,
            args=(expected_name, handoff),
            name="linnlights-discovery",
            daemon=True,
        )
        worker.start()

        try:
            device = await asyncio.wait_for(future, timeout)
        except asyncio.TimeoutError:
            handoff.abandon()
            error = DeviceAccessUnavailableError(
                expected_name, original_error=f"no response within {timeout}s"
            )
            return self._report(LocateStatus.ACCESS_UNAVAILABLE, error)
        except asyncio.CancelledError:
            handoff.abandon()
            logger.info(f"Discovery of {expected_name!r} cancelled")
            raise
        except DeviceNotFoundError as e:
            return self._report(LocateStatus.NOT_FOUND, e)
        except DeviceAccessUnavailableError as e:
            return self._report(LocateStatus.ACCESS_UNAVAILABLE, e)

        logger.info(f"Connected to MIDI output: {device.name}")
        self.notifier.notify(FOUND_MESSAGE, severity="information")
        return LocateResult(LocateStatus.FOUND, device=device)

    async def find(
        self,
        expected_name: str = DEFAULT_DEVICE_NAME,
        timeout: Optional[float] = None,
    ) -> Optional[OutputDevice]:
        """Locate the device, returning None when it is unavailable."""
        result = await self.locate(expected_name, timeout)
        return result.device

    def _discover(self, expected_name: str, handoff: _Handoff) -> None:
        try:
            device = self._connect(expected_name)
        except Exception as e:
            handoff.deliver(error=e)
        else:
            handoff.deliver(device=device)

    def _connect(self, expected_name: str) -> OutputDevice:
        """Blocking part of discovery. Runs on the worker thread."""
        try:
            self.transport.request_access()
            available = self.transport.enumerate_outputs()
        except Exception as e:
            raise _as_access_error(e, expected_name) from e

        logger.debug(f"Available MIDI outputs: {available}")
        match = next((name for name in available if name == expected_name), None)
        if match is None:
            raise DeviceNotFoundError(expected_name, available)

        try:
            port = self.transport.open_output(match)
        except Exception as e:
            raise _as_access_error(e, expected_name) from e

        return OutputDevice(port, name=match)

    def _report(self, status: LocateStatus, error: DeviceError) -> LocateResult:
        logger.warning(error.technical_message)
        self.notifier.notify(error.get_full_message(), severity=error.severity)
        return LocateResult(status, error=error)


def _as_access_error(error: Exception, device_name: str) -> DeviceAccessUnavailableError:
    wrapped = wrap_midi_error(error, device_name)
    if isinstance(wrapped, DeviceAccessUnavailableError):
        return wrapped
    return DeviceAccessUnavailableError(device_name, original_error=wrapped.technical_message)


def _close_abandoned(device: OutputDevice) -> None:
    logger.info(f"Closing {device.name!r} opened after discovery was abandoned")
    device.close()
