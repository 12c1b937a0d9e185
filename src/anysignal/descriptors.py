"""Class-level signal declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self, overload
from weakref import WeakKeyDictionary

from anysignal.core import Signal


if TYPE_CHECKING:
    from anysignal.configs import SignalConfig


class SignalDescriptor:
    """Descriptor: define at class level, get a Signal per instance.

    Example:
        class Document:
            saved = SignalDescriptor()

        doc = Document()
        doc.saved.add(lambda path: print(f"saved to {path}"))
        doc.saved.dispatch("/tmp/doc.txt")
    """

    __slots__ = ("_config", "_name", "_signals", "memorize")

    def __init__(self, memorize: bool = False, config: SignalConfig | None = None) -> None:
        self._name: str = ""
        self._config = config
        self.memorize = memorize
        self._signals: WeakKeyDictionary[object, Signal] = WeakKeyDictionary()

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def _create_signal(self) -> Signal:
        if self._config is not None:
            return self._config.get_signal()
        return Signal(memorize=self.memorize)

    @overload
    def __get__(self, obj: None, owner: type | None = None) -> Self: ...

    @overload
    def __get__(self, obj: object, owner: type | None = None) -> Signal: ...

    def __get__(self, obj: object | None, owner: type | None = None) -> Signal | Self:
        if obj is None:
            return self
        if obj not in self._signals:
            self._signals[obj] = self._create_signal()
        return self._signals[obj]
