"""
cmndr: a lightweight way to build command-line interfaces.

Each command in the tree has its own argparse flags, its own subcommands
and the function it runs; a "help" subcommand is added to each one.
"""

from cmndr.cmd import Cmd, Result, RunFunc, Status, new, new_help_cmd, report
from cmndr.config import apply_config, load_config, read_config
from cmndr.errors import (
    CommandError,
    ConfigurationError,
    FlagError,
    HelpRequested,
    NoSuchCommandError,
)
from cmndr.flags import FlagSet
from cmndr.usage import render_usage

__version__ = "0.1.0"

__all__ = [
    "Cmd",
    "CommandError",
    "ConfigurationError",
    "FlagError",
    "FlagSet",
    "HelpRequested",
    "NoSuchCommandError",
    "Result",
    "RunFunc",
    "Status",
    "apply_config",
    "load_config",
    "new",
    "new_help_cmd",
    "read_config",
    "render_usage",
    "report",
]
