"""Events emitted by a program and the emitter that dispatches them."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any


class Event(enum.Enum):
    """Every event a program can emit."""

    MISSING_REQUIRED_ARGUMENT = enum.auto()
    OUTPUT_HELP = enum.auto()
    OUTPUT_VERSION = enum.auto()
    UNKNOWN_COMMAND = enum.auto()
    UNKNOWN_OPTION = enum.auto()
    UNRESOLVED_ARGUMENT = enum.auto()
    INVALID_ARGUMENT_VALUE = enum.auto()
    MISSING_REQUIRED_OPTION = enum.auto()


_NON_ERROR_EVENTS = frozenset({Event.OUTPUT_HELP, Event.OUTPUT_VERSION})


@dataclass
class EventConfig:
    """Data handed to each listener when an event fires."""

    program: Any
    event: Event = Event.OUTPUT_HELP
    args: list[str] = field(default_factory=list)
    error: str = ""
    exit_code: int = 0
    matched_command: Any = None
    info: str = ""

    @property
    def arg_count(self) -> int:
        return len(self.args)


EventCallback = Callable[[EventConfig], None]


@dataclass
class EventListener:
    """A callback and the position at which it runs."""

    callback: EventCallback
    index: int


class EventEmitter:
    """Holds listeners per event and runs them in order of position."""

    BEFORE_ALL = -5
    DEFAULT = -4
    USER = 0
    AFTER_HELP = 1
    AFTER_ALL = 5

    def __init__(self) -> None:
        self._listeners: dict[Event, list[EventListener]] = {}
        self._events_to_override: list[Event] = []

    def __repr__(self) -> str:
        names = ", ".join(event.name for event in self._listeners)
        return f"EventEmitter([{names}])"

    @property
    def events_to_override(self) -> list[Event]:
        return list(self._events_to_override)

    def on(self, event: Event, callback: EventCallback, position: int) -> None:
        self._listeners.setdefault(event, []).append(EventListener(callback, position))

    def override_event(self, event: Event) -> None:
        self._events_to_override.append(event)

    def listeners_for(self, event: Event) -> list[EventListener]:
        """Listeners of an event in the order they would run."""
        return sorted(self._listeners.get(event, []), key=lambda lst: lst.index)

    def emit(self, config: EventConfig) -> None:
        """Run the listeners of the event, then exit with its code.

        Nothing happens when the event has no listeners.
        """
        listeners = self.listeners_for(config.event)
        if not listeners:
            return
        for listener in listeners:
            listener.callback(replace(config, args=list(config.args)))
        raise SystemExit(config.exit_code)

    def insert_before_all(self, callback: EventCallback) -> None:
        self.on_all(callback, self.BEFORE_ALL)

    def insert_after_all(self, callback: EventCallback) -> None:
        self.on_all(callback, self.AFTER_ALL)

    def on_all(self, callback: EventCallback, position: int) -> None:
        for event in Event:
            self.on(event, callback, position)

    def on_errors(self, callback: EventCallback, position: int) -> None:
        for event in Event:
            if event not in _NON_ERROR_EVENTS:
                self.on(event, callback, position)

    def remove_default_listeners(self, event: Event) -> None:
        if event in self._listeners:
            self._listeners[event] = [
                listener
                for listener in self._listeners[event]
                if listener.index != self.DEFAULT
            ]