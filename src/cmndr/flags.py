"""
Per-command flag scope built on argparse.

A FlagSet parses the flags in front of the first positional argument and
hands everything from that positional onward back untouched, so a
subcommand can parse its own flags from the remainder.

Errors are raised as FlagError instead of argparse's print-and-exit.
"""

import argparse

from cmndr.errors import FlagError, HelpRequested

# Destination of the hidden positional that collects the remaining arguments.
_REST = "__cmndr_args__"
_TERMINATOR = "--"


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested(option_string)


class FlagSet(argparse.ArgumentParser):
    """
    argparse.ArgumentParser scoped to a single command.

    Flags are declared with the usual add_argument() calls. Redefining
    -h or --help replaces the built-in help flag.

    usage_func: optional hook called with the output stream when the
                owning command's usage is printed.
    """

    def __init__(self, name: str, **kwargs):
        kwargs.setdefault("formatter_class", argparse.ArgumentDefaultsHelpFormatter)
        super().__init__(
            prog=name,
            add_help=False,
            allow_abbrev=False,
            conflict_handler="resolve",
            **kwargs,
        )
        self.name = name
        self.usage_func = None
        self.add_argument(
            "-h", "--help", action=_HelpAction, dest=argparse.SUPPRESS, help=argparse.SUPPRESS
        )
        self.add_argument(_REST, nargs=argparse.REMAINDER, default=[], help=argparse.SUPPRESS)

    def error(self, message):
        raise FlagError(message)

    def parse(self, args: list) -> tuple:
        """
        Parse args.

        Returns (namespace, positionals). Raises FlagError on malformed or
        unknown flags and HelpRequested when the help flag is given.
        """
        namespace = self.parse_args(list(args))
        positionals = list(getattr(namespace, _REST, None) or [])
        if hasattr(namespace, _REST):
            delattr(namespace, _REST)
        if positionals and positionals[0] == _TERMINATOR:
            positionals = positionals[1:]
        return namespace, positionals

    def dests(self) -> set:
        """Return the destinations of every declared flag."""
        return {
            action.dest
            for action in self._actions
            if action.option_strings and action.dest != argparse.SUPPRESS
        }

    def format_defaults(self) -> str:
        """Render one entry per declared flag: name, metavar, help, default."""
        formatter = self._get_formatter()
        formatter.start_section(None)
        for group in self._action_groups:
            formatter.add_arguments(
                [action for action in group._group_actions if action.option_strings]
            )
        formatter.end_section()
        return formatter.format_help()
