"""The results of parsing: matched flags, options and arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .flags import CmderFlag
from .options import CmderOption


@dataclass
class FlagMatch:
    cursor_index: int
    flag: CmderFlag
    appearance_count: int = 1


@dataclass
class ArgMatch:
    cursor_index: int
    raw_value: str
    instance_of: str


@dataclass
class OptionMatch:
    cursor_index: int = 0
    option: CmderOption = field(default_factory=CmderOption)
    args: list[ArgMatch] = field(default_factory=list)
    appearance_count: int = 0

    def contains_option(self, name: str) -> bool:
        return name in (self.option.long, self.option.short)


@dataclass
class ParserMatches:
    """Everything the parser matched, queried by flag, option or argument name."""

    root_command: Any
    arg_count: int = 0
    matched_command: Any = None
    flag_matches: list[FlagMatch] = field(default_factory=list)
    option_matches: list[OptionMatch] = field(default_factory=list)
    arg_matches: list[ArgMatch] = field(default_factory=list)
    positional_args: list[str] = field(default_factory=list)

    def raw_args(self) -> list[str]:
        return [arg.raw_value for arg in self.arg_matches]

    def get_arg(self, name: str) -> str | None:
        return next(
            (arg.raw_value for arg in self.arg_matches if arg.instance_of == name),
            None,
        )

    def get_option_arg(self, name: str) -> str | None:
        """The last value given for the option argument ``name``."""
        instances = self.get_instances_of(name)
        return instances[-1] if instances else None

    def get_instances_of(self, name: str) -> list[str]:
        return [
            arg.raw_value
            for match in self.option_matches
            for arg in match.args
            if arg.instance_of == name
        ]

    def get_flag(self, name: str) -> CmderFlag | None:
        return next(
            (m.flag for m in self.flag_matches if name in (m.flag.short, m.flag.long)),
            None,
        )

    def get_option(self, name: str) -> CmderOption | None:
        return next(
            (m.option for m in self.option_matches if m.contains_option(name)),
            None,
        )

    def contains_flag(self, name: str) -> bool:
        return self.get_flag(name) is not None

    def contains_option(self, name: str) -> bool:
        return any(m.contains_option(name) for m in self.option_matches)

    def flag_count(self, name: str) -> int:
        return sum(1 for m in self.flag_matches if name in (m.flag.short, m.flag.long))

    def option_count(self, name: str) -> int:
        return sum(1 for m in self.option_matches if m.contains_option(name))