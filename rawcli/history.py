from .line import split_args


class History:
    """The commands submitted so far, and a position to navigate them.

    A position of None means that we are not navigating the history, but
    editing a fresh line.
    """

    def __init__(self):
        self.entries = []
        self.position = None

    def __len__(self):
        return len(self.entries)

    def reset(self):
        self.position = None

    def push(self, command):
        """Add a command (the raw line) unless its first argument is empty."""
        if split_args(command)[0]:
            self.entries.append(command)

    def previous(self):
        """Move to the previous (older) entry and return it."""
        if self.position is None:
            if self.entries:
                self.position = len(self.entries) - 1
        elif self.position > 0:
            self.position -= 1
        return self._current()

    def next(self):
        """Move to the next (newer) entry and return it.

        Moving past the newest entry leaves the history, and returns None.
        The caller then keeps the line as it is.
        """
        if self.position is not None and self.position + 1 < len(self.entries):
            self.position += 1
        else:
            self.position = None
        return self._current()

    def _current(self):
        if self.position is None:
            return None
        return self.entries[self.position]
