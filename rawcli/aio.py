"""
Asyncio support: a Cli whose ``get_action()`` is a coroutine.
"""

import os
import asyncio

from .cli import Cli


class AsyncFdReader:
    """Read single bytes from a file descriptor, without blocking the event loop."""

    def __init__(self, fd=0):
        self._fd = fd
        self._pending = bytearray()

    async def read_byte(self):
        if not self._pending:
            bb = await self._wait_and_read()
            if not bb:  # stdin is closed
                raise EOFError("Input stream is closed.")
            self._pending.extend(bb)
        return self._pending.pop(0)

    async def _wait_and_read(self):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def on_readable():
            loop.remove_reader(self._fd)
            if future.done():
                return
            try:
                future.set_result(os.read(self._fd, 1024))
            except OSError as err:
                future.set_exception(err)

        loop.add_reader(self._fd, on_readable)
        try:
            return await future
        finally:
            loop.remove_reader(self._fd)


class AsyncCli(Cli):
    """An interactive command line interface for use with asyncio.

    Same as ``Cli``, except that ``get_action()`` must be awaited, and
    that the reader must have an async ``read_byte()`` method.

        with AsyncCli() as cli:
            while True:
                action = await cli.get_action()
                ...
    """

    def __init__(self, prompt="> ", *, fd=0, file_out=None, terminal=None, reader=None):
        reader = AsyncFdReader(fd) if reader is None else reader
        super().__init__(
            prompt, fd=fd, file_out=file_out, terminal=terminal, reader=reader
        )

    async def get_action(self):
        """Wait for the user to demand an action, and return it."""
        self._start_line()
        read_byte = self._reader.read_byte
        try:
            while True:
                action = self._on_byte(await read_byte())
                if action is not None:
                    return action
        except BaseException:
            # Also when cancelled, e.g. by asyncio.wait_for()
            self._decoder.reset()
            raise
