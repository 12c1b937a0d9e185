"""Synchronous signals package.

Custom event broadcasters with priorities, one-shot listeners, propagation
control and compound signals acting like promises.

Example:
    # Basic signals
    started = Signal[str]()
    started.add(lambda name: print(f"{name} started"))
    started.dispatch("worker")

    # Class-level declarations
    class Document:
        saved = SignalDescriptor()

    # Wait for multiple signals
    ready = CompoundSignal(loaded, rendered)
"""

from __future__ import annotations

from .binding import SignalBinding
from .core import Signal
from .compound import CompoundSignal
from .configs import CompoundSignalConfig, SignalConfig
from .descriptors import SignalDescriptor
from .exceptions import (
    ConflictingOnceStateError,
    InvalidListenerError,
    SignalDisposedError,
    SignalError,
)

__all__ = [
    "CompoundSignal",
    "CompoundSignalConfig",
    "ConflictingOnceStateError",
    "InvalidListenerError",
    "Signal",
    "SignalBinding",
    "SignalConfig",
    "SignalDescriptor",
    "SignalDisposedError",
    "SignalError",
]

__version__ = "0.1.0"
