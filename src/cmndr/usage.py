"""
Usage text rendering.

    <name> - <description>

    Commands
      <sub>  <description>

    Flags
    <argparse option help>

The Commands block only appears for commands with subcommands, listed in
name order with their descriptions aligned.
"""

_INDENT = "  "
_PADDING = 1


def format_commands(cmd) -> str:
    """Return the Commands block for cmd, or an empty string if it has none."""
    if not cmd.commands:
        return ""

    names = sorted(cmd.commands)
    width = max(len(name) for name in names) + _PADDING
    lines = ["", "Commands"]
    for name in names:
        row = f"{_INDENT}{name:<{width}}{cmd.commands[name].description}"
        lines.append(row.rstrip())
    return "\n".join(lines) + "\n"


def render_usage(cmd) -> str:
    """Return the full usage text for cmd."""
    flags = cmd.ensure_flags()
    text = f"{cmd.name} - {cmd.description}\n"
    text += format_commands(cmd)
    text += "\nFlags\n"
    text += flags.format_defaults()
    return text
