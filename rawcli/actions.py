"""
The actions that the user can demand via the command line.
"""


class Action:
    """Base class for an action performed by the user."""

    def __init__(self, args=()):
        self.args = list(args)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.args!r})"

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    @property
    def name(self):
        """The command name, i.e. the first argument."""
        return self.args[0] if self.args else ""


class Command(Action):
    """The user demands to execute a command (name + arguments)."""


class AutoComplete(Action):
    """The user demands to auto-complete a command (name + arguments so far)."""


class NoAction(Action):
    """Nothing more to do. Never produced by rawcli, for use by applications."""
