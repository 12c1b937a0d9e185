"""Exceptions raised by signals and bindings."""

from __future__ import annotations


class SignalError(Exception):
    """Base class for all signal errors."""


class InvalidListenerError(SignalError, TypeError):
    """A listener argument is not callable."""

    def __init__(self, method: str, listener: object):
        msg = (
            f"listener is a required param of {method}() and should be a callable, "
            f"got {type(listener).__name__}"
        )
        super().__init__(msg)
        self.method = method
        self.listener = listener


class ConflictingOnceStateError(SignalError):
    """A listener was registered with add() and add_once() at the same time."""

    def __init__(self, is_once: bool):
        first, second = ("add", "add_once") if is_once else ("add_once", "add")
        msg = (
            f"You cannot {first}() then {second}() the same listener "
            "without removing the relationship first."
        )
        super().__init__(msg)
        self.is_once = is_once


class SignalDisposedError(SignalError):
    """An operation was invoked on a disposed signal."""
