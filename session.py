"""Scoped plotting sessions.

A session owns the temp files behind its array and function series, so they
are removed when the session closes instead of at interpreter exit::

    with PlotSession() as session:
        figure = PlotConfig(data=[session.function(math.sin), session.expression("cos(x)")])
        session.plot(figure, "trig.png")
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Sequence

import config as cfg
from backends import RenderResult, render
from script.plot_config import PlotConfig
from series import (
    DEFAULT_RANGE,
    Series,
    as_array,
    as_engine_expression,
    as_file,
    as_sampled_function,
)
from tempfiles import TempFileRegistry


class PlotSession:
    def __init__(self, directory: str | Path | None = None, keep: bool | None = None) -> None:
        self.registry = TempFileRegistry(
            directory=directory if directory is not None else cfg.TEMP_DIR,
            keep=cfg.KEEP_TEMP_FILES if keep is None else keep,
        )

    # ── Series ────────────────────────────────────────────────────────────────

    def expression(self, expression: str, **style: Any) -> Series:
        return as_engine_expression(expression, **style)

    def file(self, path: str | Path, **style: Any) -> Series:
        return as_file(str(path), **style)

    def array(self, columns: Sequence[Sequence[Any]], **style: Any) -> Series:
        return as_array(columns, registry=self.registry, **style)

    def function(self, func: Callable[[Any], Any], x_range=DEFAULT_RANGE, **style: Any) -> Series:
        return as_sampled_function(func, x_range, registry=self.registry, **style)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def plot(self, config: PlotConfig, output_path: str | Path, *, check: bool = True, **kwargs) -> RenderResult:
        result = render(config, "plot", output_path, registry=self.registry, **kwargs)
        return result.raise_for_status() if check else result

    def splot(self, config: PlotConfig, output_path: str | Path, *, check: bool = True, **kwargs) -> RenderResult:
        result = render(config, "splot", output_path, registry=self.registry, **kwargs)
        return result.raise_for_status() if check else result

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def close(self) -> None:
        self.registry.close()

    def __enter__(self) -> PlotSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
