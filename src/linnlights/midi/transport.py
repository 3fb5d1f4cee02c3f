"""MIDI transport: access, enumeration and opening of output ports."""

import logging
from typing import Optional, Protocol

import mido

logger = logging.getLogger(__name__)


class MidiTransport(Protocol):
    """What the locator needs from a MIDI backend."""

    def request_access(self) -> None:
        """
        Make sure the backend can be used.

        May block while the OS grants MIDI access. Raises on failure.
        """
        ...

    def enumerate_outputs(self) -> list[str]:
        """Names of the currently available output ports."""
        ...

    def open_output(self, name: str) -> mido.ports.BaseOutput:
        """Open an output port by exact name."""
        ...


class MidoTransport:
    """
    MidiTransport backed by mido.

    Uses mido's default backend (python-rtmidi unless MIDO_BACKEND says
    otherwise) or an explicitly named backend module.
    """

    def __init__(self, backend: Optional[str] = None):
        """
        Initialize the transport.

        Args:
            backend: mido backend module name, e.g. "mido.backends.rtmidi".
                     None uses mido's default backend.
        """
        self._backend = mido.Backend(backend, load=False) if backend else mido.backend

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def request_access(self) -> None:
        """Load the backend module and query it once."""
        logger.debug(f"Requesting MIDI access via {self.backend_name}")
        self._backend.load()
        self._backend.get_output_names()

    def enumerate_outputs(self) -> list[str]:
        return list(self._backend.get_output_names())

    def open_output(self, name: str) -> mido.ports.BaseOutput:
        return self._backend.open_output(name)
