from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from errors import ConfigurationError
from script.options import TERMINALS, to_option
from script.plot_config import PlotConfig
from series.descriptors import Series

COMMANDS = ("plot", "splot")

# Options the compiler writes itself
_RESERVED_OPTIONS = ("terminal", "output")


@dataclass
class ConfigReport:
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def check_config(config: PlotConfig, command: str, output_path: str | Path) -> ConfigReport:
    errors: list[str] = []
    warnings: list[str] = []

    if command not in COMMANDS:
        errors.append(f"unknown plot command {command!r}; expected one of {', '.join(COMMANDS)}")

    errors.extend(_check_canvas(config, output_path))
    errors.extend(_check_options(config))

    if not config.data:
        errors.append("no data series to plot")
    for position, series in enumerate(config.data, start=1):
        series_errors, series_warnings = _check_series(series)
        errors.extend(f"series {position}: {msg}" for msg in series_errors)
        warnings.extend(f"series {position}: {msg}" for msg in series_warnings)

    return ConfigReport(valid=not errors, errors=errors, warnings=warnings)


# ── Terminal / canvas ─────────────────────────────────────────────────────────

def _check_canvas(config: PlotConfig, output_path: str | Path) -> list[str]:
    errors = []
    tag = config.output_type(output_path)
    if tag is None:
        errors.append(f"cannot infer output type from {str(output_path)!r}; set config.type")
    elif tag not in TERMINALS:
        errors.append(f"unknown output type {tag!r} (known: {', '.join(sorted(TERMINALS))})")

    for name in ("width", "height", "font_size"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(f"{name} must be a positive integer, got {value!r}")
    if not config.font:
        errors.append("font must not be empty")
    return errors


# ── Global options ────────────────────────────────────────────────────────────

def _check_options(config: PlotConfig) -> list[str]:
    errors = []
    for key, value in config.options.items():
        if key in _RESERVED_OPTIONS:
            errors.append(f"option {key!r} is reserved and set by the renderer")
            continue
        try:
            to_option(key, value)
        except ConfigurationError as exc:
            errors.append(str(exc))
    return errors


# ── Series ────────────────────────────────────────────────────────────────────

def _check_series(series: object) -> tuple[list[str], list[str]]:
    if not isinstance(series, Series):
        return [f"expected a Series, got {type(series).__name__}"], []

    errors: list[str] = []
    warnings: list[str] = []

    if not series.source:
        errors.append("missing source (expression or file path)")
    if series.file:
        if not series.using:
            errors.append("file series needs at least one column in 'using'")
        elif any(isinstance(c, bool) or not isinstance(c, int) or c < 1 for c in series.using):
            errors.append(f"'using' columns must be positive integers, got {series.using!r}")
        if series.source and not os.path.exists(series.source):
            warnings.append(f"data file {series.source!r} does not exist")
    if not series.style:
        errors.append("missing render style")
    if series.linetype is not None and (isinstance(series.linetype, bool) or not isinstance(series.linetype, int)):
        errors.append(f"linetype must be an integer, got {series.linetype!r}")
    if isinstance(series.width, bool) or not isinstance(series.width, (int, float)) or series.width <= 0:
        errors.append(f"line width must be a positive number, got {series.width!r}")
    if series.title and '"' in series.title:
        warnings.append("title contains a double quote, which is not escaped")

    return errors, warnings
