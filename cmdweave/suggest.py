"""Suggest a known command for a mistyped one."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

MIN_MATCH_SIZE = 3


def suggest_command(value: str, commands: Iterable[Any]) -> str | None:
    """Name of the first command sharing at least three characters with ``value``.

    Each character of ``value`` found in a name counts once per occurrence in
    ``value``.
    """
    scores: dict[str, int] = {}
    names = [command.name for command in commands]
    for name in names:
        scores.setdefault(name, 0)

    for char in value:
        for name in scores:
            if char in name:
                scores[name] += 1

    return next((name for name, score in scores.items() if score >= MIN_MATCH_SIZE), None)