"""
Utilities to work with the terminal and escape sequences.

The line editor needs the terminal in character mode: every keystroke
must reach us individually, and the terminal must not echo it. We use a
sensible subset of vt100 escape sequences for output, so no curses.

There are parts where the code for different platforms would differ.
This is why we have a base TerminalContext class, with an implementation
for Unix.
"""

from ._context import TerminalContext  # noqa
from ._reader import FdReader  # noqa
from . import ansi  # noqa
