"""
Command tree and argument dispatch.

A Cmd owns its flags, its subcommands and the function it runs. Dispatch
parses a command's own flags, then either hands the remaining arguments
to the subcommand named by the first positional, or runs the command.

    root = new("tool", description="Does tool things.")
    serve = new("serve", run=serve_fn, description="Start the server.")
    serve.flags.add_argument("--port", type=int, default=8080)
    root.add_cmd(serve)
    root.execute()

Dispatch itself never prints or exits; it returns a Result. execute() and
execute_args() are the process adapter that reports a Result on stderr and
exits with its status code.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from cmndr.errors import ConfigurationError, FlagError, HelpRequested, NoSuchCommandError
from cmndr.flags import FlagSet
from cmndr.usage import render_usage

# run(cmd, args); raise to report failure.
RunFunc = Callable[["Cmd", list[str]], None]


# ---------------------------------------------------------------------------
# Dispatch results
# ---------------------------------------------------------------------------


class Status(Enum):
    OK = "ok"
    HELP = "help"
    PARSE_ERROR = "parse-error"
    ROUTING_MISS = "routing-miss"
    ACTION_ERROR = "action-error"


_EXIT_CODES = {
    Status.OK: 0,
    Status.HELP: 0,
    Status.PARSE_ERROR: 2,
    Status.ROUTING_MISS: 1,
    Status.ACTION_ERROR: 1,
}


@dataclass
class Result:
    """Outcome of dispatching arguments into a command tree."""

    status: Status
    cmd: "Cmd"
    args: list[str] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self.status]


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


class Cmd:
    """A node in the command tree."""

    def __init__(
        self,
        name: str,
        description: str = "",
        flags: Optional[FlagSet] = None,
        run: Optional[RunFunc] = None,
    ):
        self.name = name
        self.description = description
        self.flags = flags
        self.run = run
        self.commands: dict[str, "Cmd"] = {}
        self.options = None

    def __repr__(self):
        return f"Cmd({self.name!r})"

    def ensure_flags(self) -> FlagSet:
        """Return the flag scope, creating a default one if there is none."""
        if self.flags is None:
            self.flags = FlagSet(self.name)
        return self.flags

    def add_cmd(self, cmd: "Cmd") -> None:
        """
        Register a subcommand.

        A subcommand already registered under the same name is replaced.
        Raises ConfigurationError if cmd has no name.
        """
        if not cmd.name:
            raise ConfigurationError("cannot add nameless subcommand")
        self.commands[cmd.name] = cmd

    def print_usage(self, file=None) -> None:
        """Write this command's usage text, to stderr by default."""
        if file is None:
            file = sys.stderr
        flags = self.ensure_flags()
        if flags.usage_func is not None:
            flags.usage_func(file)
        else:
            file.write(render_usage(self))

    def dispatch(self, args: list[str]) -> Result:
        """Route args through the tree below this command and run the target."""
        flags = self.ensure_flags()

        try:
            self.options, positionals = flags.parse(args)
        except HelpRequested:
            return Result(Status.HELP, self, list(args))
        except FlagError as e:
            return Result(Status.PARSE_ERROR, self, list(args), e)

        if self.commands and positionals and positionals[0]:
            sub = self.commands.get(positionals[0])
            if sub is not None:
                return sub.dispatch(positionals[1:])

        if self.run is None:
            return Result(Status.ROUTING_MISS, self, positionals)

        try:
            self.run(self, positionals)
        except Exception as e:
            return Result(Status.ACTION_ERROR, self, positionals, e)
        return Result(Status.OK, self, positionals)

    def execute_args(self, args: list[str]) -> Result:
        """
        Dispatch args, report any failure on stderr and exit the process.

        Exits 2 on a flag parsing error and 1 when no command could run or
        the command failed. Returns the Result when the command succeeded.
        """
        result = self.dispatch(args)
        report(result)
        if result.status is Status.OK:
            return result
        sys.exit(result.exit_code)

    def execute(self) -> Result:
        """Shorthand for execute_args(sys.argv[1:])."""
        return self.execute_args(sys.argv[1:])


def report(result: Result, file=None) -> None:
    """Print the diagnostics for a dispatch Result. Successful runs print nothing."""
    if file is None:
        file = sys.stderr

    if result.status is Status.PARSE_ERROR:
        print(f"error parsing arguments: {result.error}", file=file)
    elif result.status is Status.ACTION_ERROR:
        print(f"error: {result.error}", file=file)
    elif result.status in (Status.ROUTING_MISS, Status.HELP):
        result.cmd.print_usage(file)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def new_help_cmd(parent: Cmd) -> Cmd:
    """Build the "help" subcommand that prints usage for parent or one of its subcommands."""

    def run(cmd: Cmd, args: list[str]) -> None:
        if not args or not parent.commands:
            target = parent
        else:
            target = parent.commands.get(args[0])
            if target is None:
                raise NoSuchCommandError(args[0])
        target.print_usage()

    return Cmd(
        name="help",
        description=f"Print the help message for {parent.name} or a subcommand",
        run=run,
    )


def new(name: str, run: Optional[RunFunc] = None, description: str = "") -> Cmd:
    """
    Create a command with its own flag scope and a "help" subcommand.

    The help subcommand prints this command's usage when called with no
    arguments, or the usage of the subcommand named by its first argument.
    These two invocations are therefore equivalent:

        $ tool help serve
        $ tool serve help
    """
    cmd = Cmd(name=name, description=description, flags=FlagSet(name), run=run)
    cmd.flags.usage_func = lambda file: file.write(render_usage(cmd))
    cmd.add_cmd(new_help_cmd(cmd))
    return cmd
