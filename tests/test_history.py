from rawcli.history import History


def make_history(*commands):
    history = History()
    for command in commands:
        history.push(command)
    return history


def test_push():
    history = make_history("one", "", "two", "one", " x", "cmd  arg")
    # Empty first arguments are skipped, duplicates are kept, raw text is kept
    assert history.entries == ["one", "two", "one", "cmd  arg"]
    assert len(history) == 4
    assert history.position is None


def test_previous():
    history = make_history("one", "two", "three")
    assert history.previous() == "three"
    assert history.previous() == "two"
    assert history.previous() == "one"
    assert history.position == 0
    # Stays at the oldest
    assert history.previous() == "one"
    assert history.position == 0


def test_previous_empty():
    history = History()
    assert history.previous() is None
    assert history.position is None


def test_next():
    history = make_history("one", "two", "three")
    assert history.next() is None
    assert history.position is None

    history.previous()
    history.previous()
    assert history.next() == "three"
    assert history.position == 2
    # Past the newest entry
    assert history.next() is None
    assert history.position is None


def test_previous_then_next_returns_to_fresh_line():
    commands = ["a", "b", "c", "d"]
    for k in range(1, len(commands) + 1):
        history = make_history(*commands)
        for _ in range(k):
            history.previous()
        assert history.position == len(commands) - k
        for _ in range(k):
            history.next()
        assert history.position is None


def test_reset():
    history = make_history("one")
    history.previous()
    history.reset()
    assert history.position is None
    assert history.previous() == "one"


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            func()
