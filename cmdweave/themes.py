"""Colour themes for help output."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .formatter import Designation


class Color(enum.Enum):
    """Terminal foreground colours, valued by their ANSI code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


@dataclass(frozen=True)
class Theme:
    """Maps each designation to a colour."""

    keyword: Color
    headline: Color
    description: Color
    error: Color
    other: Color

    def __getitem__(self, designation: Designation) -> Color:
        return {
            Designation.KEYWORD: self.keyword,
            Designation.HEADLINE: self.headline,
            Designation.DESCRIPTION: self.description,
            Designation.ERROR: self.error,
            Designation.OTHER: self.other,
        }[designation]

    @classmethod
    def plain(cls) -> Theme:
        return cls(Color.WHITE, Color.WHITE, Color.WHITE, Color.RED, Color.WHITE)

    @classmethod
    def colorful(cls) -> Theme:
        return cls(Color.GREEN, Color.MAGENTA, Color.BLUE, Color.RED, Color.WHITE)

    @classmethod
    def default(cls) -> Theme:
        return cls(Color.YELLOW, Color.CYAN, Color.WHITE, Color.RED, Color.WHITE)


class PredefinedTheme(enum.Enum):
    PLAIN = "plain"
    COLORFUL = "colorful"


def get_predefined_theme(theme: PredefinedTheme) -> Theme:
    if theme is PredefinedTheme.COLORFUL:
        return Theme.colorful()
    return Theme.plain()