"""Exceptions raised by cmndr."""


class CommandError(Exception):
    """Base class for all cmndr errors."""


class ConfigurationError(CommandError):
    """The command tree was set up incorrectly by the calling program."""


class FlagError(CommandError):
    """The arguments given to a command could not be parsed."""


class NoSuchCommandError(CommandError):
    """`help` was asked about a subcommand that is not registered."""

    def __init__(self, name: str):
        super().__init__(f'no such command: "{name}"')
        self.name = name


class HelpRequested(CommandError):
    """Raised by a flag scope when -h/--help is on the command line."""
