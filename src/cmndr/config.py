"""
Flag defaults for a command tree, read from TOML.

Top-level keys set defaults for the root command's flags. A table named
after a subcommand applies to that subcommand, recursively:

    verbose = true

    [serve]
    port = 9000

    [serve.tls]
    cert = "server.pem"

Keys are flag destinations (`--dry-run` is `dry_run`). Flags given on the
command line still win over configured defaults.
"""

from pathlib import Path

import tomli

from cmndr.errors import ConfigurationError


def read_config(path: Path) -> dict:
    """Read a TOML config file."""
    with open(path, "rb") as f:
        return tomli.load(f)


def apply_config(cmd, data: dict, _prefix: str = "") -> None:
    """
    Apply config data to cmd and its subcommands.

    Raises ConfigurationError for a key that is neither a flag of the
    command nor, for tables, the name of one of its subcommands.
    """
    flags = cmd.ensure_flags()
    dests = flags.dests()
    defaults = {}

    for key, value in data.items():
        path = f"{_prefix}{key}"
        if isinstance(value, dict) and key in cmd.commands:
            apply_config(cmd.commands[key], value, _prefix=f"{path}.")
        elif key in dests:
            defaults[key] = value
        else:
            raise ConfigurationError(f"unknown config key {path!r} for command {cmd.name!r}")

    if defaults:
        flags.set_defaults(**defaults)


def load_config(cmd, path: Path) -> None:
    """Read path and apply it to the tree rooted at cmd."""
    apply_config(cmd, read_config(path))
