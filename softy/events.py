"""Type-keyed event dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619


def fnv1a_hash(text: Union[str, bytes]) -> int:
    """32-bit FNV-1a hash of a string (UTF-8 encoded) or bytes."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def type_id(event_type: type) -> int:
    """A stable 32-bit identifier derived from the type's qualified name."""
    return fnv1a_hash(f"{event_type.__module__}.{event_type.__qualname__}")


@dataclass(frozen=True)
class WindowCreatedEvent:
    """Sent when the output surface has been created."""


class EventChannel:
    """Delivers events to the single handler registered for their type."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Callable[[Any], Any]] = {}

    def subscribe(self, event_type: type, handler: Callable[[Any], Any]) -> None:
        """Register ``handler`` for ``event_type``, replacing any earlier one."""
        self._subscribers[type_id(event_type)] = handler

    def send(self, event: Any) -> None:
        """Call the handler for the event's type, if there is one."""
        handler = self._subscribers.get(type_id(type(event)))
        if handler is not None:
            handler(event)