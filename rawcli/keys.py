"""
Decoding of the raw input byte stream into keys.

The decoder is a small state machine that is fed one byte at a time. It
produces either a key name (e.g. "up" or "backspace"), a single
character to insert, or None when the byte was consumed as part of an
escape sequence.
"""

import enum
import logging
from codecs import getincrementaldecoder


logger = logging.getLogger("rawcli")


class State(enum.Enum):
    NORMAL = "normal"
    SAW_ESCAPE = "saw_escape"  # ESC
    SAW_CSI = "saw_csi"  # ESC [
    SAW_DELETE = "saw_delete"  # ESC [ 3


ESC = 0x1B

# Bytes with a meaning of their own in the normal state
CONTROL_KEYS = {
    0x01: "home",  # Control-A
    0x02: "home",  # Control-B, same as Control-A
    0x09: "tab",
    0x0A: "enter",
    0x7F: "backspace",
}

# The final byte of a CSI sequence
CSI_KEYS = {
    0x41: "up",  # A
    0x42: "down",  # B
    0x43: "right",  # C
    0x44: "left",  # D
}

CSI_DELETE = 0x33  # 3, followed by ~
TILDE = 0x7E


class InputDecoder:
    """A streaming input key decoder."""

    def __init__(self):
        self.state = State.NORMAL
        self._handlers = {
            State.NORMAL: self._feed_normal,
            State.SAW_ESCAPE: self._feed_escape,
            State.SAW_CSI: self._feed_csi,
            State.SAW_DELETE: self._feed_delete,
        }
        self._utf8 = getincrementaldecoder("utf-8")(errors="replace")

    def reset(self):
        self.state = State.NORMAL
        self._utf8.reset()

    def feed(self, byte):
        """Feed a single byte (an int). Returns a key, a character, or None."""
        return self._handlers[self.state](byte)

    def _feed_normal(self, byte):
        if byte == ESC:
            self._utf8.reset()
            self.state = State.SAW_ESCAPE
            return None
        key = CONTROL_KEYS.get(byte)
        if key is not None:
            self._utf8.reset()
            return key
        # A normal character. Multi-byte characters come in one byte at a time.
        return self._utf8.decode(bytes([byte])) or None

    def _feed_escape(self, byte):
        # Anything but a CSI is silently dropped
        self.state = State.SAW_CSI if byte == 0x5B else State.NORMAL
        return None

    def _feed_csi(self, byte):
        self.state = State.NORMAL
        if byte == CSI_DELETE:
            self.state = State.SAW_DELETE
            return None
        key = CSI_KEYS.get(byte)
        if key is None:
            logger.warning(f"Unhandled ANSI escape sequence: {byte}")
        return key

    def _feed_delete(self, byte):
        self.state = State.NORMAL
        if byte != TILDE:
            logger.warning(f"Unexpected character {chr(byte)!r}")
            return None
        return "delete"
