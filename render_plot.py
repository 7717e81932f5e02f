"""Render a plot described in a JSON file with gnuplot.

Usage:
    uv run render_plot.py plot.json --output plot.png
    uv run render_plot.py surface.json --output surface.svg --splot
    uv run render_plot.py plot.json --output plot.png --dry-run

Example plot.json:
    {
      "options": {"xlabel": "Time", "grid": true},
      "data": [
        {"kind": "file", "source": "d.dat", "title": "measured"},
        {"kind": "array", "columns": [[1, 2, 3], [10, 20, 30]], "style": "lp"},
        {"kind": "expression", "source": "sin(x)"}
      ]
    }
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

import config as cfg
from errors import ConfigurationError
from script import PlotConfig, compile_script
from series import Series
from session import PlotSession

logger = logging.getLogger(__name__)


# ── Input models ──────────────────────────────────────────────────────────────

class SeriesSpec(BaseModel):
    kind: Literal["expression", "file", "array"]
    source: str | None = None
    columns: list[list[int | float | str]] | None = None
    using: list[int] | None = None
    width: int | float | None = None
    style: str | None = None
    linetype: int | None = None
    title: str | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> SeriesSpec:
        if self.kind == "array" and self.columns is None:
            raise ValueError("array series need 'columns'")
        if self.kind != "array" and not self.source:
            raise ValueError(f"{self.kind} series need 'source'")
        return self

    def build(self, session: PlotSession) -> Series:
        style = self.model_dump(
            include={"using", "width", "style", "linetype", "title"},
            exclude_none=True,
        )
        if self.kind == "expression":
            return session.expression(self.source, **style)
        if self.kind == "file":
            return session.file(self.source, **style)
        return session.array(self.columns, **style)


class PlotSpec(BaseModel):
    width: int = Field(default_factory=lambda: cfg.PLOT_WIDTH)
    height: int = Field(default_factory=lambda: cfg.PLOT_HEIGHT)
    font: str = Field(default_factory=lambda: cfg.PLOT_FONT)
    font_size: int = Field(default_factory=lambda: cfg.PLOT_FONT_SIZE)
    binary: str = Field(default_factory=lambda: cfg.GNUPLOT_PATH)
    type: str | None = None
    options: dict[str, bool | int | float | str] = Field(default_factory=dict)
    data: list[SeriesSpec]

    def build(self, session: PlotSession) -> PlotConfig:
        plot_config = PlotConfig(
            data=[series.build(session) for series in self.data],
            width=self.width,
            height=self.height,
            font=self.font,
            font_size=self.font_size,
            binary=self.binary,
            type=self.type,
        )
        return plot_config.set(**self.options)


# ── CLI ───────────────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a JSON plot description with gnuplot.")
    parser.add_argument("spec", type=str, help="Path to the JSON plot description")
    parser.add_argument("--output", "-o", type=str, required=True, help="Image file to write")
    parser.add_argument("--splot", action="store_true", help="3D plot (splot) instead of plot")
    parser.add_argument("--dry-run", action="store_true", help="Print the gnuplot script and exit")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds before gnuplot is killed")
    parser.add_argument("--log-level", type=str, default=cfg.LOG_LEVEL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    command = "splot" if args.splot else "plot"

    try:
        raw = json.loads(Path(args.spec).read_text(encoding="utf-8"))
        spec = PlotSpec.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Invalid plot description {args.spec}: {exc}", file=sys.stderr)
        return 2

    with PlotSession() as session:
        try:
            plot_config = spec.build(session)
            if args.dry_run:
                print(compile_script(plot_config, command, args.output))
                return 0
            result = getattr(session, command)(plot_config, args.output, check=False, timeout=args.timeout)
        except ConfigurationError as exc:
            print(str(exc), file=sys.stderr)
            return 2

    if not result.success:
        print(f"gnuplot failed: {result.error}", file=sys.stderr)
        return 1

    logger.info("Wrote %s", result.output_path)
    print(f"Plot saved to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
