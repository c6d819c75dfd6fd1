"""
rawcli - build interactive command line interfaces in a Unix spirit.
"""

from .actions import Action, Command, AutoComplete, NoAction  # noqa
from .line import split_args  # noqa
from .completion import common_prefix  # noqa
from .cli import Cli  # noqa
from .aio import AsyncCli  # noqa
from ._main import main  # noqa
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
