import logging

from .actions import Command, AutoComplete
from .completion import Autocompleter
from .history import History
from .keys import InputDecoder
from .line import LineBuffer
from .term import TerminalContext, FdReader


logger = logging.getLogger("rawcli")


class Cli:
    """An interactive command line interface.

    Creating a Cli puts the terminal in character mode. It is put back
    in its original mode by ``close()``, which is called automatically
    when the Cli is used as a context manager:

        with Cli() as cli:
            while True:
                action = cli.get_action()
                ...

    Arguments:
        prompt (str): the prompt to show at the start of each line.
        fd (int): the file descriptor of the terminal to read from.
        file_out: the text file to write to. Defaults to ``sys.stderr``.
        terminal: an object with ``open()`` and ``close()`` to use instead
            of a ``TerminalContext`` for ``fd``.
        reader: an object with a ``read_byte()`` method to read input from,
            instead of reading from ``fd``.
    """

    def __init__(self, prompt="> ", *, fd=0, file_out=None, terminal=None, reader=None):
        self._terminal = TerminalContext(fd) if terminal is None else terminal
        self._reader = FdReader(fd) if reader is None else reader

        self._line = LineBuffer(file_out, prompt)
        self._history = History()
        self._completer = Autocompleter(self._line)
        self._decoder = InputDecoder()

        # Whether the next read starts on a fresh line
        self._do_reset = True

        line = self._line
        self._key_handlers = {
            "home": line.cursor_home,
            "backspace": line.backspace,
            "delete": line.delete_forward,
            "left": line.cursor_left,
            "right": line.cursor_right,
            "up": self._history_previous,
            "down": self._history_next,
        }

        # Last, because the terminal must be restored once it is opened
        self._terminal.open()
        self._closed = False

    def __del__(self):
        if not getattr(self, "_closed", True):
            self.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        """Release the terminal, putting it back in its original mode."""
        self._closed = True
        self._terminal.close()

    @property
    def prompt(self):
        return self._line.prompt

    def set_prompt(self, prompt):
        """Set the prompt. Returns the Cli, so calls can be chained."""
        self._line.prompt = prompt
        return self

    @property
    def line(self):
        """The line buffer being edited."""
        return self._line

    @property
    def history(self):
        """The history of submitted commands."""
        return self._history

    def get_action(self):
        """Wait for the user to demand an action, and return it.

        Returns a ``Command`` when enter is pressed, or an
        ``AutoComplete`` when tab is pressed.
        """
        self._start_line()
        read_byte = self._reader.read_byte
        try:
            while True:
                action = self._on_byte(read_byte())
                if action is not None:
                    return action
        except BaseException:
            # A sequence cut short by an error must not eat the next key
            self._decoder.reset()
            raise

    def autocomplete(self, words):
        """Auto-complete the current command with the given possible words."""
        self._completer.complete(words)

    def _start_line(self):
        if self._do_reset:
            self._do_reset = False
            self._history.reset()
            self._line.reset()

    def _on_byte(self, byte):
        key = self._decoder.feed(byte)
        if key is None:
            return None
        elif key == "enter":
            return self._submit()
        elif key == "tab":
            return AutoComplete(self._line.tokenize())

        handler = self._key_handlers.get(key)
        if handler is not None:
            handler()
        else:
            for c in key:
                self._line.insert(c)
        return None

    def _submit(self):
        line = self._line
        line.write("\n")
        args = line.tokenize()
        self._history.push(line.text)
        self._do_reset = True
        logger.info(f"command {args!r}")
        return Command(args)

    def _history_previous(self):
        command = self._history.previous()
        if command is not None:
            self._line.replace(command)

    def _history_next(self):
        # Moving past the newest entry keeps the line as it is
        command = self._history.next()
        if command is not None:
            self._line.replace(command)
