"""Fakes for the terminal and its input, so no test touches a real tty."""

import io

import pytest


class FakeTerminal:
    """Stands in for a TerminalContext."""

    def __init__(self):
        self.opened = 0
        self.closed = 0

    def open(self):
        self.opened += 1

    def close(self):
        self.closed += 1


class BytesReader:
    """Produce the given bytes, then raise EOFError, like a closed stdin."""

    def __init__(self, data, error=None):
        self._data = iter(data)
        self._error = error

    def read_byte(self):
        for byte in self._data:
            return byte
        raise self._error or EOFError("Input stream is closed.")


class AsyncBytesReader(BytesReader):
    async def read_byte(self):
        return super().read_byte()


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def file_out():
    return io.StringIO()
