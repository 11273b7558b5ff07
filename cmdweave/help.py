"""Help output for a command."""

from __future__ import annotations

from typing import Any, TextIO

from .formatter import AnyPattern, Designation, Formatter
from .themes import Theme


def _fill(formatter: Formatter, command: Any, pattern: AnyPattern) -> None:
    arguments = list(command.arguments)
    flags = list(command.flags)
    options = list(command.options)
    subcommands = list(command.subcommands)
    description = command.description or ""
    info = command.info or ""

    if description:
        formatter.add(Designation.DESCRIPTION, f"{description}\n")

    formatter.section("USAGE")
    formatter.add(Designation.KEYWORD, f"    {command.usage()}")
    formatter.add(Designation.OTHER, " [OPTIONS]")
    if arguments:
        formatter.add(Designation.OTHER, " <ARGS>")
    if subcommands:
        formatter.add(Designation.OTHER, " <SUBCOMMAND>")
    formatter.close()

    for title, items in (
        ("ARGS", arguments),
        ("FLAGS", flags),
        ("OPTIONS", options),
        ("SUB-COMMANDS", subcommands),
    ):
        if items:
            formatter.section(title)
            formatter.format(items, pattern)

    if info:
        formatter.section("INFO")
        formatter.add(Designation.DESCRIPTION, info)


def render_help(command: Any, theme: Theme, pattern: AnyPattern) -> str:
    """The coloured help text of ``command``."""
    formatter = Formatter(theme)
    _fill(formatter, command, pattern)
    return formatter.render()


def write_help(
    command: Any,
    theme: Theme,
    pattern: AnyPattern,
    stream: TextIO | None = None,
) -> None:
    """Write the help text of ``command`` to ``stream`` (stderr by default)."""
    formatter = Formatter(theme, stream=stream)
    _fill(formatter, command, pattern)
    formatter.print()