from __future__ import annotations

import pytest

from playing_cards.events import UnknownEventError
from playing_cards.model import EVENT_MODEL_CHANGE, Model

OTHER_EVENT = "event:other"


def test_model_always_declares_change_event() -> None:
    assert Model().kinds == frozenset({EVENT_MODEL_CHANGE})
    assert Model([OTHER_EVENT]).kinds == frozenset({OTHER_EVENT, EVENT_MODEL_CHANGE})
    assert Model([EVENT_MODEL_CHANGE]).kinds == frozenset({EVENT_MODEL_CHANGE})


def test_domain_event_cascades_to_change_event() -> None:
    model = Model([OTHER_EVENT])
    order: list[str] = []
    changes: list[tuple] = []

    model.on(OTHER_EVENT, lambda n: order.append(f"other:{n}"))

    def on_change(source, kind, args) -> None:
        order.append("change")
        changes.append((source, kind, args))

    model.on(EVENT_MODEL_CHANGE, on_change)
    model.emit(OTHER_EVENT, 5)

    assert order == ["other:5", "change"]
    assert changes == [(model, OTHER_EVENT, (5,))]


def test_publishing_change_directly_does_not_cascade() -> None:
    model = Model([OTHER_EVENT])
    calls: list[tuple] = []
    model.on(EVENT_MODEL_CHANGE, lambda *args: calls.append(args))

    model.publish(EVENT_MODEL_CHANGE, model, OTHER_EVENT, ())

    assert calls == [(model, OTHER_EVENT, ())]


def test_publish_domain_event_skips_change_subscribers() -> None:
    model = Model([OTHER_EVENT])
    changes: list[tuple] = []
    others: list[int] = []
    model.on(EVENT_MODEL_CHANGE, lambda *args: changes.append(args))
    model.on(OTHER_EVENT, others.append)

    model.publish_domain_event(OTHER_EVENT, 1)
    model.publish_changed(OTHER_EVENT, (2,))

    assert others == [1]
    assert changes == [(model, OTHER_EVENT, (2,))]


def test_model_rejects_undeclared_events() -> None:
    model = Model([OTHER_EVENT])

    with pytest.raises(UnknownEventError):
        model.publish("event:missing")
    with pytest.raises(UnknownEventError):
        model.on("event:missing", print)
