"""Binding between a signal and one of its listeners."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from anysignal.core import Signal


type Listener = Callable[..., Any]


class SignalBinding:
    """Attachment of a listener to a signal.

    Bindings are created by `Signal.add` / `Signal.add_once` and should not be
    instantiated directly. A binding stays usable until it is detached, after
    which it no longer references its signal or listener.

    Attributes:
        context: Receiver passed as first argument to the listener (or None)
        active: Inactive bindings are skipped during dispatch
        params: Curried parameters prepended to the dispatched ones
    """

    __slots__ = ("_is_once", "_listener", "_priority", "_signal", "active", "context", "params")

    def __init__(
        self,
        signal: Signal,
        listener: Listener,
        is_once: bool = False,
        context: object | None = None,
        priority: int = 0,
    ) -> None:
        self._signal: Signal | None = signal
        self._listener: Listener | None = listener
        self._is_once = is_once
        self._priority = priority
        self.context = context
        self.active = True
        self.params: Sequence[Any] | None = None

    def execute(self, params: Sequence[Any] = ()) -> Any:
        """Call the listener with curried params followed by `params`.

        If the binding was added via `add_once`, it detaches itself after the call.

        Returns:
            Whatever the listener returned, None if the binding is inactive or unbound.
        """
        if not self.active or self._listener is None:
            return None
        args = [*self.params, *params] if self.params else list(params)
        if self.context is not None:
            result = self._listener(self.context, *args)
        else:
            result = self._listener(*args)
        if self._is_once:
            self.detach()
        return result

    def detach(self) -> Listener | None:
        """Detach binding from its signal.

        Returns:
            The listener, or None if the binding was already detached.
        """
        if self._signal is None or self._listener is None:
            return None
        return self._signal.remove(self._listener)

    def is_bound(self) -> bool:
        """Whether the binding is still attached to a signal and has a listener."""
        return self._signal is not None and self._listener is not None

    def is_once(self) -> bool:
        """Whether the binding gets removed after its first execution."""
        return self._is_once

    def get_listener(self) -> Listener | None:
        """Return the listener, None once detached."""
        return self._listener

    def get_signal(self) -> Signal | None:
        """Return the signal the binding belongs to, None once detached."""
        return self._signal

    @property
    def priority(self) -> int:
        """Priority the listener was added with."""
        return self._priority

    def _destroy(self) -> None:
        self._signal = None
        self._listener = None
        self.context = None

    def __repr__(self) -> str:
        return (
            f"<SignalBinding is_once={self._is_once} "
            f"is_bound={self.is_bound()} active={self.active}>"
        )
