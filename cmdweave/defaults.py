"""Built-in behaviour every program gets: the help subcommand and default listeners."""

from __future__ import annotations

import sys
from typing import Any

from .events import Event, EventConfig, EventEmitter
from .matches import ParserMatches
from .settings import ProgramSettings, Setting

HELP_SUBCOMMAND = "help"
HELP_ARGUMENT = "<SUB-COMMAND>"


def _help_subcommand_action(matches: ParserMatches) -> None:
    command = matches.matched_command
    value = matches.get_arg(HELP_ARGUMENT)
    parent = getattr(command, "parent", None)
    if parent is None or value is None:
        return
    target = parent.find_subcommand(value)
    if target is not None:
        target.output_help()


def register_help_subcommand(command: Any) -> Any | None:
    """Add a ``help <SUB-COMMAND>`` subcommand when the command has subcommands.

    Nothing is added when the command has no subcommands or the
    AUTO_INCLUDE_HELP_SUBCOMMAND setting is off. Returns the new subcommand,
    or None.
    """
    if not command.subcommands:
        return None
    if not command.settings[Setting.AUTO_INCLUDE_HELP_SUBCOMMAND]:
        return None

    help_command = command.subcommand(HELP_SUBCOMMAND)
    help_command.argument(HELP_ARGUMENT, "The subcommand to print out help info for")
    help_command.with_description("A subcommand used for printing out help")
    help_command.action(_help_subcommand_action)
    return help_command


def _output_help(config: EventConfig) -> None:
    command = config.matched_command
    if command is None:
        command = config.program
    command.output_help()


def print_version(config: EventConfig) -> None:
    """Print the program's name and version, its author and its description."""
    program = config.program
    print(f"{program.name or ''}, v{program.version or ''}")
    print(program.author or "")
    print(program.description or "")


def print_error(config: EventConfig) -> None:
    """Print the event's error message to stderr, if it has one."""
    if config.error:
        print(f"Error: {config.error}", file=sys.stderr)


def register_default_listeners(emitter: EventEmitter, settings: ProgramSettings) -> None:
    """Register the listeners a program starts with, honouring its settings.

    Help output is always registered. Error printing and version output are
    left out when all defaults are overridden; error printing is also left out
    when errors are ignored. Default listeners of events marked for override
    are removed afterwards.
    """
    emitter.on(Event.OUTPUT_HELP, _output_help, EventEmitter.DEFAULT)

    if settings[Setting.OVERRIDE_ALL_DEFAULT_LISTENERS]:
        return

    if not settings[Setting.IGNORE_ALL_ERRORS]:
        emitter.on_errors(print_error, EventEmitter.DEFAULT)

    emitter.on(Event.OUTPUT_VERSION, print_version, EventEmitter.DEFAULT)

    for event in emitter.events_to_override:
        emitter.remove_default_listeners(event)