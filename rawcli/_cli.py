import sys

from ._main import main
from .utils import listen_to_logs, enable_log_forwarding


def cli(argv=None):
    argv = sys.argv if argv is None else argv
    if "--version" in argv or "version" in argv[1:]:
        from . import __version__

        print("rawcli", __version__)
    elif "--listen" in argv:
        listen_to_logs()
    else:
        if "--log" in argv:
            enable_log_forwarding()
        main()
