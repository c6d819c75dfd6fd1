import os
import tty  # Unix
import termios  # Unix

from ._context import TerminalContext


def patch_lflag(attrs: int) -> int:
    # No echo of typed chars, no echo of newline, no line buffering.
    return attrs & ~(termios.ECHO | termios.ECHONL | termios.ICANON)


class UnixTerminalContext(TerminalContext):
    def __init__(self, fd=0):
        self._ori_term_attr = None
        super().__init__(fd)

    def _store_terminal_mode(self):
        if not os.isatty(self.fd_in):
            raise OSError(f"Input is not a terminal: fd {self.fd_in}")
        try:
            self._ori_term_attr = termios.tcgetattr(self.fd_in)
        except termios.error as err:
            raise OSError(f"Cannot get terminal attributes: {err}") from err

    def _set_terminal_mode(self):
        newattr = list(self._ori_term_attr)
        newattr[tty.LFLAG] = patch_lflag(newattr[tty.LFLAG])

        # VMIN defines the number of characters read at a time in
        # non-canonical mode. It seems to default to 1 on Linux, but on
        # Solaris and derived operating systems it defaults to 4. (This is
        # because the VMIN slot is the same as the VEOF slot, which
        # defaults to ASCII EOT = Ctrl-D = 4.)
        newattr[tty.CC] = list(newattr[tty.CC])
        newattr[tty.CC][termios.VMIN] = 1

        try:
            termios.tcsetattr(self.fd_in, termios.TCSANOW, newattr)
        except termios.error as err:
            self._ori_term_attr = None
            raise OSError(f"Cannot set terminal attributes: {err}") from err

    def _reset_terminal_mode(self):
        if self._ori_term_attr is not None:
            attr, self._ori_term_attr = self._ori_term_attr, None
            termios.tcsetattr(self.fd_in, termios.TCSANOW, attr)
