"""Core signal class for synchronous event broadcasting."""

from __future__ import annotations

import logging
from types import BuiltinMethodType, MethodType
from typing import TYPE_CHECKING, Any, TypeVarTuple

from anysignal.binding import SignalBinding
from anysignal.exceptions import (
    ConflictingOnceStateError,
    InvalidListenerError,
    SignalDisposedError,
)


if TYPE_CHECKING:
    from anysignal.binding import Listener


Ts = TypeVarTuple("Ts")

logger = logging.getLogger(__name__)


def _validate_listener(listener: object, method: str) -> None:
    if not callable(listener):
        raise InvalidListenerError(method, listener)


def _same_listener(a: Listener, b: Listener) -> bool:
    """Compare listeners by identity.

    Bound methods are recreated on every attribute access, so they are
    matched on the identity of their instance and function instead.
    """
    if a is b:
        return True
    if isinstance(a, MethodType | BuiltinMethodType) and type(a) is type(b):
        return a.__self__ is b.__self__ and a == b
    return False


class Signal[*Ts]:
    """Custom event broadcaster.

    Listeners with higher priority are executed first, listeners sharing a
    priority are executed in the order they were added.

    Example:
        started = Signal[str]()
        started.add(lambda name: print(f"{name} started"))
        started.dispatch("worker")

    Attributes:
        active: If False, dispatch() does nothing. Changing it during a dispatch
            only affects the next dispatch, use halt() to stop propagation.
        memorize: Keep the last dispatched params and execute listeners
            with them as soon as they get added.
    """

    def __init__(self, *, memorize: bool = False, active: bool = True) -> None:
        self._bindings: list[SignalBinding] | None = []
        self._prev_params: tuple[Any, ...] | None = None
        self._should_propagate = True
        self.memorize = memorize
        self.active = active

    def _check_disposed(self) -> None:
        if self._bindings is None:
            msg = f"{type(self).__name__} was disposed and can't be used anymore."
            raise SignalDisposedError(msg)

    def _get_bindings(self) -> list[SignalBinding]:
        self._check_disposed()
        assert self._bindings is not None
        return self._bindings

    def _index_of_listener(self, listener: Listener) -> int:
        for i, binding in enumerate(self._get_bindings()):
            existing = binding.get_listener()
            if existing is not None and _same_listener(existing, listener):
                return i
        return -1

    def _add_binding(self, binding: SignalBinding) -> None:
        # kept in execution order: priority descending, insertion order on ties
        bindings = self._get_bindings()
        index = len(bindings)
        for i, other in enumerate(bindings):
            if other.priority < binding.priority:
                index = i
                break
        bindings.insert(index, binding)

    def _register_listener(
        self,
        listener: Listener,
        is_once: bool,
        context: object | None,
        priority: int,
    ) -> SignalBinding:
        bindings = self._get_bindings()
        prev_index = self._index_of_listener(listener)
        if prev_index != -1:
            binding = bindings[prev_index]
            if binding.is_once() != is_once:
                raise ConflictingOnceStateError(is_once)
        else:
            binding = SignalBinding(self, listener, is_once, context, priority)
            self._add_binding(binding)
            logger.debug(
                "Added listener %r to %r (priority=%d, once=%s)",
                listener,
                self,
                priority,
                is_once,
            )

        if self.memorize and self._prev_params is not None:
            binding.execute(self._prev_params)

        return binding

    def add(
        self, listener: Listener, context: object | None = None, priority: int = 0
    ) -> SignalBinding:
        """Add a listener to the signal.

        Args:
            listener: Signal handler
            context: Object passed as first argument to the listener, acting as its receiver
            priority: Listeners with higher priority are executed first

        Returns:
            The binding between the signal and the listener.
        """
        _validate_listener(listener, "add")
        return self._register_listener(listener, False, context, priority)

    def add_once(
        self, listener: Listener, context: object | None = None, priority: int = 0
    ) -> SignalBinding:
        """Add a listener which gets removed after its first execution.

        Args:
            listener: Signal handler
            context: Object passed as first argument to the listener, acting as its receiver
            priority: Listeners with higher priority are executed first

        Returns:
            The binding between the signal and the listener.
        """
        _validate_listener(listener, "add_once")
        return self._register_listener(listener, True, context, priority)

    def remove(self, listener: Listener) -> Listener:
        """Remove a single listener from the dispatch queue.

        Unknown listeners are ignored.

        Returns:
            The listener that was passed in.
        """
        _validate_listener(listener, "remove")
        i = self._index_of_listener(listener)
        if i != -1:
            bindings = self._get_bindings()
            bindings[i]._destroy()
            del bindings[i]
            logger.debug("Removed listener %r from %r", listener, self)
        return listener

    def remove_all(self) -> None:
        """Remove all listeners from the signal."""
        bindings = self._get_bindings()
        for binding in bindings:
            binding._destroy()
        bindings.clear()

    def has(self, listener: Listener) -> bool:
        """Check if listener is attached to the signal."""
        _validate_listener(listener, "has")
        return self._index_of_listener(listener) != -1

    def get_num_listeners(self) -> int:
        """Return the number of listeners attached to the signal."""
        return len(self._get_bindings())

    def halt(self) -> None:
        """Stop propagation of the current dispatch.

        Only has an effect while a dispatch is in progress.
        """
        self._check_disposed()
        self._should_propagate = False
        logger.debug("Propagation halted on %r", self)

    def dispatch(self, *args: *Ts) -> None:
        """Broadcast the signal to all listeners.

        Listeners are called until one of them returns False or calls halt().
        Exceptions raised by a listener propagate to the caller.
        """
        bindings = self._get_bindings()
        if not self.active:
            return
        # snapshot, listeners may add or remove bindings while we iterate
        snapshot = list(bindings)
        if self.memorize:
            self._prev_params = args
        self._should_propagate = True
        for binding in snapshot:
            if not self._should_propagate:
                break
            if binding.execute(args) is False:
                break

    def forget(self) -> None:
        """Forget memorized params."""
        self._check_disposed()
        self._prev_params = None

    def dispose(self) -> None:
        """Remove all bindings and drop references to external objects.

        Calling any other method afterwards raises SignalDisposedError.
        """
        if self._bindings is None:
            return
        self.remove_all()
        self._bindings = None
        self._prev_params = None
        logger.debug("Disposed %s", type(self).__name__)

    def is_disposed(self) -> bool:
        return self._bindings is None

    @property
    def last_params(self) -> tuple[Any, ...] | None:
        """Params of the last dispatch, if memorize is enabled."""
        self._check_disposed()
        return self._prev_params

    def __contains__(self, listener: object) -> bool:
        self._check_disposed()
        return callable(listener) and self.has(listener)

    def __repr__(self) -> str:
        num = "disposed" if self._bindings is None else len(self._bindings)
        return f"<{type(self).__name__} active={self.active} num_listeners={num}>"
