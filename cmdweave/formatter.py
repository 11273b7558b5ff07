"""Layout of help output with coloured segments."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TextIO, Union

if TYPE_CHECKING:
    from .themes import Theme


class Pattern(enum.Enum):
    """Built-in layouts; a CustomPattern may be used in their place."""

    LEGACY = "legacy"
    STANDARD = "standard"


class Designation(enum.Enum):
    """The role of a piece of output, which picks its colour."""

    HEADLINE = "headline"
    DESCRIPTION = "description"
    ERROR = "error"
    OTHER = "other"
    KEYWORD = "keyword"


@dataclass
class CustomPattern:
    """Templates for a user-defined layout."""

    args_format: str = "{{name}}"
    flags_format: str = "{{short}}, {{long}}"
    options_format: str = "{{short}}, {{long}} {{args}}"
    subcommands_format: str = "{{name}}"
    prettify_as_legacy: bool = True


AnyPattern = Union[Pattern, CustomPattern]


class _Generates(Protocol):
    def generate(self, pattern: AnyPattern) -> tuple[str, str]: ...


_RESET = "\x1b[0m"


class Formatter:
    """Collects themed text and writes it out in one go."""

    def __init__(
        self,
        theme: Theme,
        *,
        color: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.theme = theme
        self.color = color
        self.stream = stream
        self.padding = 10
        self._chunks: list[str] = []

    def add(self, designation: Designation, value: str) -> None:
        if self.color:
            code = self.theme[designation].value
            self._chunks.append(f"\x1b[{code}m{value}{_RESET}")
        else:
            self._chunks.append(value)

    def section(self, title: str) -> None:
        self.add(Designation.HEADLINE, f"\n{title}:\n")

    def close(self) -> None:
        self.add(Designation.OTHER, "\n")

    def format(self, items: Iterable[_Generates], pattern: AnyPattern) -> None:
        values = [item.generate(pattern) for item in items]
        for leading, floating in values:
            if isinstance(pattern, CustomPattern):
                self._custom(pattern, leading, floating)
            elif pattern is Pattern.STANDARD:
                self._standard(leading, floating)
            else:
                for other, _ in values:
                    if len(other) > self.padding:
                        self.padding = len(other) + 5
                self._legacy(leading, floating)

    def render(self) -> str:
        return "".join(self._chunks)

    def print(self) -> None:
        """Write the collected text to the stream (stderr by default) and clear it."""
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(self.render())
        stream.flush()
        self._chunks.clear()

    def _legacy(self, leading: str, floating: str) -> None:
        width = len(leading.encode())
        if self.padding > width:
            gap = self.padding - width
        else:
            self.padding = width + 5
            gap = 5
        self.add(Designation.KEYWORD, f"   {leading}{' ' * gap}")
        self.add(Designation.DESCRIPTION, f"{floating}\n")

    def _standard(self, leading: str, floating: str) -> None:
        self.add(Designation.KEYWORD, f"    {leading}\n")
        self.add(Designation.DESCRIPTION, f"      {floating}\n")

    def _custom(self, pattern: CustomPattern, leading: str, floating: str) -> None:
        if pattern.prettify_as_legacy:
            self._legacy(leading, floating)
            return
        self.add(Designation.KEYWORD, leading)
        self.add(Designation.OTHER, f"{floating}\n" if floating else "\n")