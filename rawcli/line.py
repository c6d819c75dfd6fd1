import sys

from .term import ansi


def split_args(text):
    """Split a command line into arguments.

    Arguments are separated by single spaces. A backslash escapes the
    next character, and double quotes delimit a string in which spaces
    are kept. The last argument is always included, so an empty line
    gives ``[""]``, and consecutive spaces give empty arguments.
    """
    args = []
    arg = ""
    in_string = False
    escaped = False
    for c in text:
        if escaped:
            arg += c
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == '"':
            in_string = not in_string
        elif c == " " and not in_string:
            args.append(arg)
            arg = ""
        else:
            arg += c
    args.append(arg)
    return args


class LineBuffer:
    """The command being edited, and its representation on the terminal.

    Every edit is written to the terminal right away, so that what is
    shown always matches the text and cursor.
    """

    def __init__(self, file_out=None, prompt="> "):
        self._file_out = sys.stderr if file_out is None else file_out
        self.prompt = prompt
        self.text = ""
        self.cursor = 0

    def write(self, text):
        self._file_out.write(text)
        self._file_out.flush()

    def _check(self):
        assert 0 <= self.cursor <= len(self.text), (self.cursor, self.text)

    def tokenize(self):
        return split_args(self.text)

    def reset(self):
        """Start a fresh line, showing the prompt."""
        self.text = ""
        self.cursor = 0
        self.write(self.prompt)

    def redraw(self):
        """Erase the whole line and write prompt and text again."""
        self.write(ansi.ERASE_LINE + ansi.horizontal_abs(0))
        self.write(self.prompt + self.text)

    def replace(self, text):
        """Replace the text, e.g. with an entry from the history."""
        self.text = text
        self.cursor = len(text)
        self.redraw()

    def extend(self, text):
        """Append text at the end of the line, e.g. for a completion."""
        self.text += text
        self.cursor += len(text)
        self._check()

    def insert(self, c):
        if self.cursor < len(self.text):
            # Rewrite what's right of the cursor, and move back
            right = self.text[self.cursor :]
            self.write(c + right + ansi.cursor_left(len(right)))
        else:
            self.write(c)
        self.text = self.text[: self.cursor] + c + self.text[self.cursor :]
        self.cursor += 1
        self._check()

    def backspace(self):
        if self.cursor == 0:
            return
        right = self.text[self.cursor :]
        self.cursor -= 1
        # The trailing space erases the last char that is now one column left
        self.write("\x08" + right + " " + ansi.cursor_left(len(right) + 1))
        self.text = self.text[: self.cursor] + right
        self._check()

    def delete_forward(self):
        # Note that the last char of the line cannot be deleted this way
        if self.cursor + 1 >= len(self.text):
            return
        right = self.text[self.cursor + 1 :]
        self.write(right + " " + ansi.cursor_left(len(right) + 1))
        self.text = self.text[: self.cursor] + right
        self._check()

    def cursor_left(self):
        if self.cursor > 0:
            self.write(ansi.cursor_left(1))
            self.cursor -= 1

    def cursor_right(self):
        if self.cursor < len(self.text):
            self.write(ansi.cursor_right(1))
            self.cursor += 1

    def cursor_home(self):
        self.write(ansi.cursor_left(self.cursor))
        self.cursor = 0
