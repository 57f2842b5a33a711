"""Unit tests for formcards.events."""

from __future__ import annotations

import pytest

from formcards.events import EventEmitter


class TestEventEmitter:
    def test_delivery_in_registration_order(self) -> None:
        emitter = EventEmitter()
        order: list[str] = []
        emitter.subscribe("evt", lambda p: order.append(f"a:{p}"))
        emitter.subscribe("evt", lambda p: order.append(f"b:{p}"))
        emitter.emit("evt", 1)
        assert order == ["a:1", "b:1"]

    def test_emit_without_listeners_is_a_no_op(self) -> None:
        EventEmitter().emit("nobody-listens", {"x": 1})

    def test_unsubscribe_function(self) -> None:
        emitter = EventEmitter()
        received: list[object] = []
        unsubscribe = emitter.subscribe("evt", received.append)
        assert emitter.listener_count("evt") == 1
        unsubscribe()
        emitter.emit("evt", "ignored")
        assert received == []
        assert emitter.listener_count("evt") == 0

    def test_unsubscribe_unknown_listener_is_ignored(self) -> None:
        EventEmitter().unsubscribe("evt", print)

    def test_listener_may_unsubscribe_itself(self) -> None:
        emitter = EventEmitter()
        received: list[str] = []

        def once(payload: object) -> None:
            received.append("once")
            emitter.unsubscribe("evt", once)

        emitter.subscribe("evt", once)
        emitter.subscribe("evt", lambda p: received.append("always"))
        emitter.emit("evt")
        emitter.emit("evt")
        assert received == ["once", "always", "always"]

    def test_listener_errors_propagate(self) -> None:
        emitter = EventEmitter()

        def boom(payload: object) -> None:
            raise RuntimeError("listener failed")

        emitter.subscribe("evt", boom)
        with pytest.raises(RuntimeError, match="listener failed"):
            emitter.emit("evt")


@pytest.mark.usefixtures("configured_logging")
class TestEventEmitterWithConfiguredLogging:
    def test_emit_delivers_through_debug_logging(self) -> None:
        emitter = EventEmitter()
        received: list[object] = []
        emitter.subscribe("getSuggestions", received.append)
        emitter.emit("getSuggestions", {"query": "ab"})
        assert received == [{"query": "ab"}]
