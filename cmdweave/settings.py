"""Boolean settings that shape a program's default behaviour."""

from __future__ import annotations

import enum


class Setting(enum.Enum):
    IGNORE_ALL_ERRORS = enum.auto()
    SHOW_HELP_ON_ALL_ERRORS = enum.auto()
    SHOW_HELP_ON_EMPTY_ARGS = enum.auto()
    SHOW_COMMAND_ALIASES = enum.auto()
    OVERRIDE_ALL_DEFAULT_LISTENERS = enum.auto()
    AUTO_INCLUDE_HELP_SUBCOMMAND = enum.auto()


_DEFAULTS = {
    Setting.AUTO_INCLUDE_HELP_SUBCOMMAND: True,
    Setting.IGNORE_ALL_ERRORS: False,
    Setting.OVERRIDE_ALL_DEFAULT_LISTENERS: False,
    Setting.SHOW_COMMAND_ALIASES: False,
    Setting.SHOW_HELP_ON_ALL_ERRORS: False,
    Setting.SHOW_HELP_ON_EMPTY_ARGS: True,
}


class ProgramSettings:
    """A value for every setting, starting from the defaults."""

    def __init__(self) -> None:
        self._values = dict(_DEFAULTS)

    def __getitem__(self, setting: Setting) -> bool:
        return self._values[setting]

    def __setitem__(self, setting: Setting, value: bool) -> None:
        if not isinstance(setting, Setting):
            raise TypeError(f"not a setting: {setting!r}")
        self._values[setting] = bool(value)

    def __repr__(self) -> str:
        body = ", ".join(f"{k.name}={v}" for k, v in self._values.items())
        return f"ProgramSettings({body})"