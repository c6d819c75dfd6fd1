"""
Human-readable vt100 escape sequences, as written to the terminal.
"""

CSI = "\x1b["


def cursor_up(n):
    return f"{CSI}{n}A"


def cursor_down(n):
    return f"{CSI}{n}B"


def cursor_right(n):
    return f"{CSI}{n}C"


def cursor_left(n):
    return f"{CSI}{n}D"


def horizontal_abs(n):
    """Move the cursor to column n."""
    return f"{CSI}{n}G"


def erase_in_display(n):
    return f"{CSI}{n}J"


ERASE_LINE_TO_END = f"{CSI}0K"
ERASE_LINE_TO_START = f"{CSI}1K"
ERASE_LINE = f"{CSI}2K"
