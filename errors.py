from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backends.base import RenderResult


class ConfigurationError(ValueError):
    """A plot description that cannot be turned into a gnuplot script."""


class EngineInvocationError(RuntimeError):
    """gnuplot could not be started or did not produce the requested output."""

    def __init__(self, result: "RenderResult") -> None:
        super().__init__(result.error or "gnuplot invocation failed")
        self.result = result
