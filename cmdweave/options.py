"""Options: flags that take arguments, such as ``-p --port <port>``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .arguments import Argument

if TYPE_CHECKING:
    from .formatter import AnyPattern


@dataclass
class CmderOption:
    """An option with long and short forms and the arguments it takes."""

    name: str = ""
    short: str = ""
    long: str = "--"
    arguments: list[Argument] = field(default_factory=list)
    description: str = ""
    required: bool = False
    is_global: bool = False

    @classmethod
    def named(
        cls,
        name: str,
        short: str | None = None,
        help: str = "",
        required: bool = False,
        is_global: bool = False,
        arguments: Iterable[Argument | str] = (),
    ) -> CmderOption:
        """Build an option whose long form is ``--name``.

        ``arguments`` may hold Argument instances or specs to parse.
        """
        return cls(
            name=name,
            short=f"-{short}" if short else "",
            long=f"--{name}",
            arguments=[
                arg if isinstance(arg, Argument) else Argument(arg)
                for arg in arguments
            ],
            description=help,
            required=required,
            is_global=is_global,
        )

    def generate(self, pattern: AnyPattern) -> tuple[str, str]:
        short = f"{self.short}," if self.short else "  "
        args = "".join(f"{arg.raw_value} " for arg in self.arguments)
        return f"{short} {self.long} {args}", self.description


def parse_option_spec(spec: str, help: str, required: bool = False) -> CmderOption:
    """Build an option from a spec such as ``-p --port <port-number>``."""
    short = ""
    long = ""
    arguments = []
    for part in spec.split():
        if part.startswith("--"):
            long = part
        elif part.startswith("-"):
            short = part
        else:
            arguments.append(Argument(part))
    return CmderOption(
        name=long.replace("--", ""),
        short=short,
        long=long,
        arguments=arguments,
        description=help,
        required=required,
    )


def resolve_option(options: Iterable[CmderOption], value: str) -> CmderOption | None:
    """The last option whose short or long form equals ``value``."""
    found = None
    for option in options:
        if value in (option.short, option.long):
            found = option
    return found