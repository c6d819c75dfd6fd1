"""
A small interactive shell, to show how rawcli is used.
"""

import sys

from .actions import Command, AutoComplete, NoAction
from .cli import Cli


COMMANDS = ["hello", "upper", "exit", "help"]


def main(cli=None, file=None):
    file = sys.stdout if file is None else file
    cli = Cli() if cli is None else cli

    try:
        with cli:
            while True:
                action = cli.get_action()
                if isinstance(action, Command):
                    action = run_command(action.args, file)
                elif isinstance(action, AutoComplete):
                    autocomplete(cli, action.args)
                if isinstance(action, NoAction):
                    break
    except (EOFError, KeyboardInterrupt):
        pass


def run_command(args, file):
    name = args[0]
    if name == "hello":
        print("Hello from rawcli", file=file)
    elif name == "upper":
        print("".join(arg.upper() + " " for arg in args[1:]), file=file)
    elif name == "exit":
        return NoAction()
    elif name == "help":
        print("Simple interactive cli example.", file=file)
        print("Available commands:", file=file)
        print("  hello: Print hello world", file=file)
        print("  upper: Print arguments to upper case", file=file)
        print("  exit: Exit this application", file=file)
        print("  help: Display this help", file=file)
    elif name:
        print(f"Unknown command '{name}'.", file=file)
        print("Type 'help' to list available commands.", file=file)
    file.flush()


def autocomplete(cli, args):
    if len(args) == 1:
        # Complete the command name, arguments have no completion
        words = [name for name in COMMANDS if name.startswith(args[0])]
        cli.autocomplete(words)
