"""Signal which gets dispatched once a group of signals was dispatched."""

from __future__ import annotations

from functools import partial
import logging
from typing import Any

from anysignal.core import Signal


logger = logging.getLogger(__name__)


class CompoundSignal(Signal):
    """Group of signals, dispatched after every signal of the group was dispatched.

    Listeners receive one tuple per grouped signal, in the same order the
    signals were passed to the constructor. Think of it as a promise which
    resolves once all signals of the group fired.

    Example:
        loaded = Signal[str]()
        rendered = Signal[int]()
        ready = CompoundSignal(loaded, rendered)
        ready.add(lambda loaded_args, rendered_args: print(loaded_args, rendered_args))
        loaded.dispatch("page")
        rendered.dispatch(42)  # prints ('page',) (42,)

    Attributes:
        override: If True, a signal dispatching twice before the group resolved
            replaces its previously collected params.
        unique: If True, the compound acts like a promise. Once resolved it always
            dispatches the same params and removes its listeners after dispatching.
            If False, it resets itself after each dispatch.
        memorize: Inherited from Signal, defaults to True so late listeners still
            receive the resolved params.
    """

    def __init__(
        self,
        *signals: Signal,
        memorize: bool = True,
        unique: bool = True,
        override: bool = False,
        active: bool = True,
    ) -> None:
        super().__init__(memorize=memorize, active=active)
        self.unique = unique
        self.override = override
        self._signals: tuple[Signal, ...] | None = signals
        self._params: dict[int, tuple[Any, ...]] | None = {}
        self._resolved = False
        self._resolved_params: tuple[Any, ...] = ()
        # index is bound before adding, memorizing signals execute on add
        self._handlers = [partial(self._register_dispatch, i) for i in range(len(signals))]
        for signal, handler in zip(signals, self._handlers, strict=True):
            signal.add(handler)

    def _register_dispatch(self, idx: int, *args: Any) -> None:
        params = self._get_params()
        if idx not in params or self.override:
            params[idx] = args
        if self._registered_all() and (not self._resolved or not self.unique):
            self.dispatch(*(params[i] for i in range(len(self.sources))))

    def _registered_all(self) -> bool:
        params = self._get_params()
        return all(i in params for i in range(len(self.sources)))

    def _get_params(self) -> dict[int, tuple[Any, ...]]:
        self._check_disposed()
        assert self._params is not None
        return self._params

    def dispatch(self, *args: Any) -> None:
        """Dispatch the signal.

        Works like Signal.dispatch, but once the compound is resolved and unique,
        the collected params are dispatched no matter which params were passed.
        """
        params = self._get_params()
        if self._resolved and self.unique:
            if self._registered_all():
                args = tuple(params[i] for i in range(len(self.sources)))
            else:
                args = self._resolved_params
        if not self._resolved:
            logger.debug("%r resolved", self)
            self._resolved_params = args
        self._resolved = True

        super().dispatch(*args)

        if self.unique:
            self.remove_all()
        else:
            self.reset()

    def reset(self) -> None:
        """Restore the original state, as if none of the signals was dispatched yet."""
        self._get_params().clear()
        self._resolved = False
        self._resolved_params = ()

    def is_resolved(self) -> bool:
        """Whether all signals of the group were dispatched."""
        self._check_disposed()
        return self._resolved

    @property
    def sources(self) -> tuple[Signal, ...]:
        """The grouped signals."""
        self._check_disposed()
        assert self._signals is not None
        return self._signals

    def dispose(self) -> None:
        """Dispose the compound.

        The grouped signals are not disposed, only the compound's own
        listeners on them are removed.
        """
        if self._signals is None:
            return
        for signal, handler in zip(self._signals, self._handlers, strict=True):
            if not signal.is_disposed():
                signal.remove(handler)
        self._handlers = []
        super().dispose()
        self._signals = None
        self._params = None
