"""Tests for SignalBinding lifecycle."""

from __future__ import annotations

import pytest

from anysignal import Signal, SignalBinding


@pytest.fixture
def signal() -> Signal:
    return Signal()


def test_binding_properties(signal: Signal):
    """Test that bindings reflect how they were added."""

    def listener() -> None:
        pass

    context = object()
    binding = signal.add_once(listener, context, priority=4)

    assert isinstance(binding, SignalBinding)
    assert binding.is_once()
    assert binding.is_bound()
    assert binding.active
    assert binding.priority == 4
    assert binding.context is context
    assert binding.get_listener() is listener
    assert binding.get_signal() is signal
    assert binding.params is None


def test_execute_returns_listener_result(signal: Signal):
    binding = signal.add(lambda a, b: a + b)

    assert binding.execute((2, 3)) == 5


def test_curried_params_come_first(signal: Signal):
    """Test that curried params are prepended to dispatched ones."""
    calls: list[tuple[object, ...]] = []
    binding = signal.add(lambda *args: calls.append(args))
    binding.params = ["curried", 1]

    signal.dispatch("dispatched")

    assert calls == [("curried", 1, "dispatched")]


def test_curried_params_follow_context(signal: Signal):
    """Test that the context precedes curried params."""
    calls: list[tuple[object, ...]] = []
    context = object()
    binding = signal.add(lambda *args: calls.append(args), context)
    binding.params = [0]

    signal.dispatch("value")

    assert calls == [(context, 0, "value")]


def test_inactive_binding_is_skipped(signal: Signal):
    """Test that inactive bindings stay attached but don't execute."""
    calls: list[str] = []
    binding = signal.add(calls.append)
    binding.active = False

    signal.dispatch("skipped")
    assert calls == []
    assert binding.execute(("direct",)) is None
    assert signal.get_num_listeners() == 1

    binding.active = True
    signal.dispatch("called")
    assert calls == ["called"]


def test_detach(signal: Signal):
    """Test that detach removes the binding and is idempotent."""

    def listener() -> None:
        pass

    binding = signal.add(listener)

    assert binding.detach() is listener
    assert not binding.is_bound()
    assert binding.get_listener() is None
    assert binding.get_signal() is None
    assert signal.get_num_listeners() == 0
    assert binding.detach() is None


def test_detached_binding_execute_is_noop(signal: Signal):
    calls: list[str] = []
    binding = signal.add(calls.append)
    binding.detach()

    assert binding.execute(("value",)) is None
    assert calls == []


def test_once_binding_detaches_after_execute(signal: Signal):
    """Test that a once binding detaches itself regardless of return value."""
    binding = signal.add_once(lambda: False)

    assert binding.execute() is False
    assert not binding.is_bound()
    assert signal.get_num_listeners() == 0


def test_once_binding_stays_when_listener_raises(signal: Signal):
    """Test that a failing once listener is not detached."""

    def failing() -> None:
        msg = "failed"
        raise ValueError(msg)

    binding = signal.add_once(failing)

    with pytest.raises(ValueError, match="failed"):
        signal.dispatch()
    assert binding.is_bound()


def test_detach_during_dispatch(signal: Signal):
    """Test that a binding can detach itself while being executed."""
    calls: list[int] = []
    bindings = []

    def listener(value: int) -> None:
        calls.append(value)
        bindings[0].detach()

    bindings.append(signal.add(listener))
    signal.dispatch(1)
    signal.dispatch(2)

    assert calls == [1]


def test_repr(signal: Signal):
    binding = signal.add_once(lambda: None)
    assert repr(binding) == "<SignalBinding is_once=True is_bound=True active=True>"

    binding.detach()
    assert repr(binding) == "<SignalBinding is_once=True is_bound=False active=True>"
