"""
Pytest configuration and shared fixtures.

Fixtures:
    calls -- list that recording actions append (cmd name, args) to
    record -- factory for actions that record their calls
    wide_terminal -- pins COLUMNS so argparse help does not wrap (autouse)
    tree -- a small "tool" command tree:

        tool
          help
          serve   (--port, --verbose)
            help
          db
            help
            migrate   (--dry-run)
              help
"""

import pytest

from cmndr import new


@pytest.fixture()
def calls():
    return []


@pytest.fixture()
def record(calls):
    def factory(fail=None):
        def run(cmd, args):
            calls.append((cmd.name, list(args)))
            if fail is not None:
                raise fail

        return run

    return factory


@pytest.fixture()
def tree(record):
    root = new("tool", description="A tool with subcommands.")

    serve = new("serve", run=record(), description="Start the server.")
    serve.flags.add_argument("--port", type=int, default=8080, help="port to listen on")
    serve.flags.add_argument("--verbose", action="store_true", help="log every request")
    root.add_cmd(serve)

    db = new("db", description="Database commands.")
    migrate = new("migrate", run=record(), description="Apply migrations.")
    migrate.flags.add_argument("--dry-run", action="store_true", help="only print the plan")
    db.add_cmd(migrate)
    root.add_cmd(db)

    return root


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch):
    # argparse wraps help text to the terminal width
    monkeypatch.setenv("COLUMNS", "120")
