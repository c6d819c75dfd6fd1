import io

from rawcli.line import LineBuffer, split_args
from rawcli.term import ansi


def make_line(text="", cursor=None, prompt="> "):
    file = io.StringIO()
    line = LineBuffer(file, prompt)
    line.text = text
    line.cursor = len(text) if cursor is None else cursor
    return line, file


def test_split_args():
    assert split_args("hello") == ["hello"]
    assert split_args("upper a b") == ["upper", "a", "b"]
    assert split_args("a\\ b") == ["a b"]
    assert split_args('"a b" c') == ["a b", "c"]
    assert split_args('say "x \\" y"') == ["say", 'x " y']
    assert split_args("a\\\\b") == ["a\\b"]


def test_split_args_empty_args():
    assert split_args("") == [""]
    assert split_args("a  b") == ["a", "", "b"]
    assert split_args("cmd ") == ["cmd", ""]
    assert split_args(" ") == ["", ""]
    assert split_args('""') == [""]


def test_insert():
    line, file = make_line()
    for c in "abc":
        line.insert(c)
    assert line.text == "abc"
    assert line.cursor == 3
    assert file.getvalue() == "abc"


def test_insert_in_the_middle():
    line, file = make_line("ac", 1)
    line.insert("b")
    assert line.text == "abc"
    assert line.cursor == 2
    # The part right of the cursor is rewritten, and the cursor moved back
    assert file.getvalue() == "bc\x1b[1D"


def test_backspace():
    line, file = make_line("abc", 2)
    line.backspace()
    assert line.text == "ac"
    assert line.cursor == 1
    assert file.getvalue() == "\x08c \x1b[2D"

    line, file = make_line("abc")
    line.backspace()
    assert line.text == "ab"
    assert line.cursor == 2
    assert file.getvalue() == "\x08 \x1b[1D"


def test_backspace_at_start():
    line, file = make_line("abc", 0)
    line.backspace()
    assert line.text == "abc"
    assert line.cursor == 0
    assert file.getvalue() == ""


def test_delete_forward():
    line, file = make_line("abc", 1)
    line.delete_forward()
    assert line.text == "ac"
    assert line.cursor == 1
    assert file.getvalue() == "c \x1b[2D"

    line, file = make_line("abc", 0)
    line.delete_forward()
    assert line.text == "bc"
    assert line.cursor == 0


def test_delete_forward_at_end():
    for cursor in (2, 3):
        line, file = make_line("abc", cursor)
        line.delete_forward()
        assert line.text == "abc"
        assert line.cursor == cursor
        assert file.getvalue() == ""

    line, file = make_line("")
    line.delete_forward()
    assert line.text == ""
    assert line.cursor == 0


def test_cursor_moves():
    line, file = make_line("ab")

    line.cursor_right()
    assert line.cursor == 2
    assert file.getvalue() == ""

    line.cursor_left()
    line.cursor_left()
    assert line.cursor == 0
    assert file.getvalue() == "\x1b[1D\x1b[1D"

    line.cursor_left()
    assert line.cursor == 0
    assert file.getvalue() == "\x1b[1D\x1b[1D"

    line.cursor_right()
    assert line.cursor == 1
    assert file.getvalue().endswith("\x1b[1C")


def test_cursor_home():
    line, file = make_line("hello", 3)
    line.cursor_home()
    assert line.cursor == 0
    assert line.text == "hello"
    assert file.getvalue() == "\x1b[3D"


def test_reset_and_replace():
    line, file = make_line("old", prompt="$ ")
    line.reset()
    assert line.text == ""
    assert line.cursor == 0
    assert file.getvalue() == "$ "

    line.replace("ls -l")
    assert line.text == "ls -l"
    assert line.cursor == 5
    assert file.getvalue() == "$ \x1b[2K\x1b[0G$ ls -l"


def test_tokenize():
    line, _ = make_line("cmd  arg")
    assert line.tokenize() == ["cmd", "", "arg"]
    assert line.text == "cmd  arg"


def test_escape_sequences():
    assert ansi.cursor_up(2) == "\x1b[2A"
    assert ansi.cursor_down(1) == "\x1b[1B"
    assert ansi.cursor_right(3) == "\x1b[3C"
    assert ansi.cursor_left(0) == "\x1b[0D"
    assert ansi.horizontal_abs(0) == "\x1b[0G"
    assert ansi.erase_in_display(2) == "\x1b[2J"
    assert ansi.ERASE_LINE_TO_END == "\x1b[0K"
    assert ansi.ERASE_LINE_TO_START == "\x1b[1K"
    assert ansi.ERASE_LINE == "\x1b[2K"


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            func()
