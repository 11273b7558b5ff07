"""Positional arguments accepted by commands and options."""

from __future__ import annotations

import copy
import warnings
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formatter import AnyPattern

ArgValidator = Callable[[str], None]


@dataclass(init=False)
class Argument:
    """An argument parsed from a spec such as ``<name>``, ``[name]`` or ``<name...>``.

    Specs in angle brackets are required, those in square brackets are
    optional, and a trailing ``...`` makes the argument variadic.  A bare name
    is optional and has no raw display form of its own.
    """

    raw: str
    name: str
    required: bool
    variadic: bool
    description: str | None
    valid_values: list[str] = field(default_factory=list)
    default_value: str | None = None
    validator: ArgValidator | None = None

    def __init__(
        self,
        spec: str,
        *,
        help: str | None = None,
        required: bool | None = None,
        variadic: bool | None = None,
        valid_values: Iterable[str] = (),
        default: str | None = None,
        validate_with: ArgValidator | None = None,
        display_as: str | None = None,
    ) -> None:
        opening, closing = " ", " "
        is_required = False
        raw = ""
        if spec.startswith("<"):
            opening, closing = "<", ">"
            is_required = True
            raw = spec
        elif spec.startswith("["):
            opening, closing = "[", "]"
            raw = spec

        name = spec.replace(opening, "").replace(closing, "").replace("-", "")
        is_variadic = False
        if name.endswith("..."):
            name = name.replace("...", "")
            is_variadic = True

        self.raw = raw if display_as is None else display_as
        self.name = name
        self.required = is_required if required is None else required
        self.variadic = is_variadic if variadic is None else variadic
        self.description = help
        self.valid_values = list(valid_values)
        self.default_value = None
        self.validator = validate_with
        if default is not None:
            self._apply_default(default)

    def _apply_default(self, value: str) -> None:
        if self.valid_values and not self.test_value(value):
            warnings.warn(
                "You have provided a default value but it does not match the "
                "valid values. It will therefore be ignored",
                stacklevel=3,
            )
            return
        self.default_value = value

    def with_default(self, value: str) -> Argument:
        """Return a copy with ``value`` as default, unless it is not a valid value."""
        result = copy.copy(self)
        result.valid_values = list(self.valid_values)
        result._apply_default(value)
        return result

    def test_value(self, value: str) -> bool:
        """Whether ``value`` is among the valid values."""
        return value in self.valid_values

    @property
    def raw_value(self) -> str:
        """The display form, built from the name when no raw spec was given."""
        if self.raw:
            return self.raw
        suffix = "..." if self.variadic else ""
        body = self.name.replace("_", "-") + suffix
        return f"<{body}>" if self.required else f"[{body}]"

    def generate(self, pattern: AnyPattern) -> tuple[str, str]:
        return self.raw_value, self.description or ""