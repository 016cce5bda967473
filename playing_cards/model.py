"""Observable base class for every stateful playing card entity."""

from __future__ import annotations

from typing import Any, Final, Iterable

from .events import Observable

EVENT_MODEL_CHANGE: Final[str] = "event:model:change"

__all__ = ["EVENT_MODEL_CHANGE", "Model"]


class Model(Observable):
    """Observable that follows every domain event with a generic change event.

    Subscribers of :data:`EVENT_MODEL_CHANGE` receive ``(model, kind, args)``
    where ``kind`` and ``args`` describe the domain event that caused the
    change. A single subscription therefore observes every mutation of any
    model subtype.
    """

    def __init__(self, kinds: Iterable[str] = ()) -> None:
        declared = list(kinds)
        if EVENT_MODEL_CHANGE not in declared:
            declared.append(EVENT_MODEL_CHANGE)
        super().__init__(declared)

    def publish(self, kind: str, *args: Any) -> None:
        if kind == EVENT_MODEL_CHANGE:
            super().publish(kind, *args)
            return
        self.publish_domain_event(kind, *args)
        self.publish_changed(kind, args)

    def publish_domain_event(self, kind: str, *args: Any) -> None:
        """Dispatch ``kind`` to its own handlers only."""

        super().publish(kind, *args)

    def publish_changed(self, kind: str, args: tuple[Any, ...] = ()) -> None:
        """Notify change subscribers that ``kind`` happened with ``args``."""

        super().publish(EVENT_MODEL_CHANGE, self, kind, args)
