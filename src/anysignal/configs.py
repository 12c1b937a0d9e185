"""Signal configuration models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from anysignal.compound import CompoundSignal
    from anysignal.core import Signal


class SignalConfig(BaseModel):
    """Signal configuration."""

    active: bool = Field(default=True, title="Active")
    """Whether the signal broadcasts on dispatch."""

    memorize: bool = Field(default=False, title="Memorize")
    """Whether late listeners get executed with the last dispatched params."""

    model_config = ConfigDict(use_attribute_docstrings=True, extra="forbid")

    def get_signal(self) -> Signal:
        """Create a signal instance."""
        from anysignal.core import Signal

        return Signal(memorize=self.memorize, active=self.active)


class CompoundSignalConfig(SignalConfig):
    """Compound signal configuration.

    Defaults make the compound act like a promise resolving once.
    """

    memorize: bool = Field(default=True, title="Memorize")
    """Whether late listeners get executed with the resolved params."""

    unique: bool = Field(default=True, title="Unique")
    """Resolve only once and drop listeners after dispatch, instead of resetting."""

    override: bool = Field(default=False, title="Override Params")
    """Whether a repeated dispatch of a grouped signal replaces its collected params."""

    def get_signal(self, *signals: Signal) -> CompoundSignal:  # type: ignore[override]
        """Create a compound signal grouping the given signals."""
        from anysignal.compound import CompoundSignal

        return CompoundSignal(
            *signals,
            memorize=self.memorize,
            unique=self.unique,
            override=self.override,
            active=self.active,
        )
