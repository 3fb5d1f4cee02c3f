"""Output device handle with a per-device exclusive send lane."""

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

import mido

from linnlights.exceptions import SendFailureError
from linnlights.protocol import ControlChangeMessage

logger = logging.getLogger(__name__)

Sendable = Union[ControlChangeMessage, mido.Message, bytes, bytearray, Sequence[int]]


@dataclass(frozen=True)
class SendResult:
    """Outcome of transmitting one encoded sequence."""

    total: int
    sent: int
    error: Optional[SendFailureError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.sent == self.total

    def __bool__(self) -> bool:
        return self.ok

    def merge(self, other: "SendResult") -> "SendResult":
        """Combine two results, keeping the first error."""
        return SendResult(
            total=self.total + other.total,
            sent=self.sent + other.sent,
            error=self.error or other.error,
        )


def _to_mido(message: Sendable) -> mido.Message:
    if isinstance(message, ControlChangeMessage):
        return message.to_mido()
    if isinstance(message, mido.Message):
        return message
    return mido.Message.from_bytes(list(message))


class OutputDevice:
    """
    An open LinnStrument output port.

    Every encoded sequence goes through send_sequence(), which holds the
    device lock until the whole sequence has been handed to the port. Two
    pad updates issued from different threads therefore never interleave
    their CC20/CC21/CC22 triples.
    """

    def __init__(self, port: mido.ports.BaseOutput, name: Optional[str] = None):
        """
        Initialize the device handle.

        Args:
            port: Open mido output port (ownership passes to this object)
            name: Port name (defaults to port.name)
        """
        self._port = port
        self.name = name or getattr(port, "name", None) or "unknown"
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, message: Sendable) -> None:
        """
        Send a single message immediately.

        Raises:
            SendFailureError: If the port rejects the message
        """
        with self._lock:
            self._send_locked(_to_mido(message))

    def send_sequence(self, messages: Sequence[Sendable]) -> SendResult:
        """
        Send messages in order as one uninterrupted sequence.

        Stops at the first failure; the failure is returned, not raised.

        Args:
            messages: Messages in transmission order

        Returns:
            SendResult with how many messages reached the port
        """
        total = len(messages)
        sent = 0
        with self._lock:
            for message in messages:
                try:
                    self._send_locked(_to_mido(message))
                except SendFailureError as e:
                    logger.error(e.technical_message)
                    return SendResult(total=total, sent=sent, error=e)
                sent += 1
        return SendResult(total=total, sent=sent)

    def _send_locked(self, msg: mido.Message) -> None:
        """Note: Should be called with _lock held."""
        if self._closed:
            raise SendFailureError(self.name, message=msg.bytes(), original_error="port is closed")
        try:
            self._port.send(msg)
        except Exception as e:
            raise SendFailureError(self.name, message=msg.bytes(), original_error=str(e)) from e
        logger.debug(f"Sent {msg.bytes()} to {self.name}")

    def close(self) -> None:
        """Close the underlying port."""
        with self._lock:
            if not self._closed:
                self._port.close()
                self._closed = True
                logger.info(f"Closed MIDI output: {self.name}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"OutputDevice(name={self.name!r})"
