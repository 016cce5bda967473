"""Minimal publish/subscribe primitive shared by all playing card models."""

from __future__ import annotations

from typing import Any, Callable, Iterable

EventHandler = Callable[..., Any]

__all__ = ["EventHandler", "Observable", "UnknownEventError"]


class UnknownEventError(LookupError):
    """Raised when an event kind was not declared for an observable."""

    def __init__(self, source: object, kind: str) -> None:
        super().__init__(f"{type(source).__name__} object does not emit event '{kind}'")
        self.source = source
        self.kind = kind


class Observable:
    """Object that emits a fixed, declared set of event kinds.

    Handlers are kept per kind in subscription order. Subscribing,
    unsubscribing or publishing a kind that was not declared at construction
    raises :class:`UnknownEventError`.
    """

    def __init__(self, kinds: Iterable[str] = ()) -> None:
        self._handlers: dict[str, list[EventHandler]] = {kind: [] for kind in kinds}

    @property
    def kinds(self) -> frozenset[str]:
        """Return the event kinds this object can emit."""

        return frozenset(self._handlers)

    def handlers(self, kind: str) -> tuple[EventHandler, ...]:
        """Return the handlers currently installed for ``kind``."""

        return tuple(self._registered(kind))

    def subscribe(self, kind: str, handler: EventHandler) -> None:
        """Install ``handler`` for ``kind``; duplicates are kept."""

        self._registered(kind).append(handler)

    def unsubscribe(self, kind: str, handler: EventHandler | None = None) -> None:
        """Remove ``handler`` for ``kind``, or every handler when omitted."""

        registered = self._registered(kind)
        if handler is None:
            registered.clear()
        elif handler in registered:
            registered.remove(handler)

    def publish(self, kind: str, *args: Any) -> None:
        """Call every handler installed for ``kind`` with ``args``."""

        # Snapshot so a handler can unsubscribe itself mid-dispatch.
        for handler in tuple(self._registered(kind)):
            handler(*args)

    def on(self, kind: str, handler: EventHandler) -> None:
        self.subscribe(kind, handler)

    def off(self, kind: str, handler: EventHandler | None = None) -> None:
        self.unsubscribe(kind, handler)

    def emit(self, kind: str, *args: Any) -> None:
        self.publish(kind, *args)

    def _registered(self, kind: str) -> list[EventHandler]:
        try:
            return self._handlers[kind]
        except KeyError:
            raise UnknownEventError(self, kind) from None
