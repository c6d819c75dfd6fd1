import os


class FdReader:
    """Read single bytes from a file descriptor, blocking until one is available."""

    def __init__(self, fd=0):
        self._fd = fd

    def read_byte(self):
        bb = os.read(self._fd, 1)
        if not bb:  # stdin is closed
            raise EOFError("Input stream is closed.")
        return bb[0]
