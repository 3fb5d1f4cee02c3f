"""LinnStrument light-control protocol constants.

The LinnStrument accepts five Control Change messages on MIDI channel 1:

- CC20: Column of the pad to change (control key column is 0, play columns 1-25)
- CC21: Row of the pad to change (bottom row is 0, top is 7)
- CC22: Color for the pad selected by CC20/CC21 (0-11)
- CC23: Save loaded light pattern to Scale Select memory A, A# or B (0, 1, 2)
- CC24: Clear custom light pattern from memory A, A# or B (0, 1, 2)
"""

from enum import IntEnum

# Control Change status byte, MIDI channel 1
STATUS_CONTROL_CHANGE = 0xB0

DEVICE_TOP_ROW = 7


class LinnControl(IntEnum):
    """Controller numbers understood by the LinnStrument."""

    SELECT_COLUMN = 20
    SELECT_ROW = 21
    APPLY_COLOR = 22
    SAVE_PATTERN = 23
    CLEAR_PATTERN = 24
