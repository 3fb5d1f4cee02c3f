"""Control Change message model."""

import mido
from pydantic import BaseModel, ConfigDict, Field

from .constants import STATUS_CONTROL_CHANGE


class ControlChangeMessage(BaseModel):
    """A 3-byte Control Change message on MIDI channel 1."""

    model_config = ConfigDict(frozen=True)

    control: int = Field(ge=0, le=127, description="Controller number")
    value: int = Field(ge=0, le=127, description="Controller value")

    @property
    def status(self) -> int:
        """Status byte (always Control Change on channel 1)."""
        return STATUS_CONTROL_CHANGE

    def bytes(self) -> list[int]:
        """Raw wire bytes: [status, control, value]."""
        return [self.status, int(self.control), int(self.value)]

    def to_mido(self) -> mido.Message:
        """Convert to a mido message for sending through a port."""
        return mido.Message(
            "control_change",
            channel=self.status & 0x0F,
            control=int(self.control),
            value=int(self.value),
        )

    def __str__(self) -> str:
        return f"CC{int(self.control)}={int(self.value)}"
