import sys
import logging


logger = logging.getLogger("rawcli")


class TerminalContext:
    """Base class for putting the terminal in character mode.

    Instantiating this class produces a class corresponding with the
    current platform. The context can be used in a with-statement, or
    via ``open()`` and ``close()``. The original terminal mode is
    restored exactly once, no matter how many times ``close()`` is called.
    """

    def __new__(cls, *args, **kwargs):
        # Select terminal class
        if cls is not TerminalContext:
            return super().__new__(cls)
        if sys.platform.startswith("win"):
            raise OSError("Character mode is only supported on Unix terminals.")
        from ._context_unix import UnixTerminalContext

        return super().__new__(UnixTerminalContext)

    def __init__(self, fd=0):
        self.fd_in = fd
        self._entered = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def is_open(self):
        return self._entered

    def open(self):
        """Store the current terminal mode and switch to character mode.

        Raises OSError if the file descriptor is not a terminal, or if
        its attributes cannot be read or set.
        """
        if self._entered:
            raise RuntimeError("Can only enter the context state once.")
        self._store_terminal_mode()
        self._set_terminal_mode()
        self._entered = True
        logger.info(f"terminal {self.fd_in} in character mode")

    def close(self):
        """Reset the terminal to the state it was when the context was entered."""
        if not self._entered:
            return
        self._entered = False
        try:
            self._reset_terminal_mode()
        except Exception as err:
            logger.error(f"Failed to restore terminal config: {err}")
        else:
            logger.info(f"terminal {self.fd_in} restored")

    reset = close

    # For subclasses to implement

    def _store_terminal_mode(self):
        raise NotImplementedError()

    def _set_terminal_mode(self):
        raise NotImplementedError()

    def _reset_terminal_mode(self):
        raise NotImplementedError()
