from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import config as cfg
from series.descriptors import Series


def _default_options() -> dict[str, Any]:
    return {"grid": "back", "xlabel": "X", "ylabel": "Y"}


@dataclass
class PlotConfig:
    """Everything needed to compile one gnuplot script.

    The named fields are reserved: they shape the terminal line and the plot
    command. Only ``options`` is serialized as ``set``/``unset`` statements.
    """

    data: list[Series] = field(default_factory=list)
    width: int = field(default_factory=lambda: cfg.PLOT_WIDTH)
    height: int = field(default_factory=lambda: cfg.PLOT_HEIGHT)
    font: str = field(default_factory=lambda: cfg.PLOT_FONT)
    font_size: int = field(default_factory=lambda: cfg.PLOT_FONT_SIZE)
    binary: str = field(default_factory=lambda: cfg.GNUPLOT_PATH)
    # Output type tag; inferred from the output path extension when None
    type: str | None = None
    output: str | None = None
    options: dict[str, Any] = field(default_factory=_default_options)

    def output_type(self, output_path: str | Path) -> str | None:
        """Explicit ``type`` if set, else the output file's extension."""
        if self.type:
            return self.type.lower()
        suffix = Path(output_path).suffix
        return suffix[1:].lower() if suffix else None

    def set(self, **options: Any) -> PlotConfig:
        self.options.update(options)
        return self

    def unset(self, *keys: str) -> PlotConfig:
        for key in keys:
            self.options[key] = False
        return self

    def add(self, *series: Series) -> PlotConfig:
        self.data.extend(series)
        return self
