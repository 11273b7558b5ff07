"""Boolean flags such as ``-h --help``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formatter import AnyPattern


@dataclass
class CmderFlag:
    """A flag with a long form, an optional short form and a description."""

    name: str = ""
    long: str = "--"
    short: str = ""
    description: str = ""
    is_global: bool = False

    @classmethod
    def named(
        cls,
        name: str,
        short: str | None = None,
        help: str = "",
        is_global: bool = False,
    ) -> CmderFlag:
        """Build a flag whose long form is ``--name`` and short form ``-short``."""
        return cls(
            name=name,
            long=f"--{name}",
            short=f"-{short}" if short else "",
            description=help,
            is_global=is_global,
        )

    def generate(self, pattern: AnyPattern) -> tuple[str, str]:
        short = f"{self.short}," if self.short else "  "
        return f"{short} {self.long}", self.description


def parse_flag_spec(spec: str, help: str) -> CmderFlag:
    """Build a flag from a spec such as ``-v --verbose``."""
    short = ""
    long = ""
    for part in spec.split():
        if part.startswith("--"):
            long = part
        elif part.startswith("-"):
            short = part
    return CmderFlag(
        name=long.replace("--", ""),
        long=long,
        short=short,
        description=help,
    )


def resolve_flag(flags: Iterable[CmderFlag], value: str) -> CmderFlag | None:
    """The last flag whose short or long form equals ``value``."""
    found = None
    for flag in flags:
        if value in (flag.short, flag.long):
            found = flag
    return found