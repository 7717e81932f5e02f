"""Constructors that turn user data into ``Series`` descriptors.

Array and function data are written to temp files here, once per series, so
the compiled script only ever references files or gnuplot expressions.
"""
from __future__ import annotations

from dataclasses import fields
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from errors import ConfigurationError
from series.descriptors import Series
from tempfiles import TempFileRegistry, default_registry

_STYLE_FIELDS = {f.name for f in fields(Series)} - {"source", "file"}


class SampleRange(NamedTuple):
    start: float
    stop: float
    step: float


DEFAULT_RANGE = SampleRange(-5, 5, 0.1)


def as_engine_expression(expression: str, **style: Any) -> Series:
    """A gnuplot expression such as ``sin(x)``, evaluated by gnuplot itself."""
    return _make(expression, False, style)


def as_file(path: str, **style: Any) -> Series:
    """A data file that already exists on disk."""
    return _make(str(path), True, style)


def as_array(
    columns: Sequence[Sequence[Any]],
    *,
    registry: TempFileRegistry | None = None,
    **style: Any,
) -> Series:
    """Write column-major ``columns`` to a temp file and plot that file."""
    content = format_rows(columns)
    registry = registry if registry is not None else default_registry
    path = registry.write(content, suffix=".dat")
    return as_file(str(path), **style)


def as_sampled_function(
    func: Callable[[Any], Any],
    x_range: SampleRange | Sequence[float] | Mapping[str, float] = DEFAULT_RANGE,
    *,
    registry: TempFileRegistry | None = None,
    **style: Any,
) -> Series:
    """Evaluate ``func`` over ``x_range`` and plot the resulting two columns."""
    return as_array(sample(func, x_range), registry=registry, **style)


def sample(
    func: Callable[[Any], Any],
    x_range: SampleRange | Sequence[float] | Mapping[str, float] = DEFAULT_RANGE,
) -> list[list[Any]]:
    start, stop, step = _coerce_range(x_range)
    if step == 0:
        raise ConfigurationError("range step must be non-zero")

    xs: list[Any] = []
    ys: list[Any] = []
    x = start
    while (x <= stop) if step > 0 else (x >= stop):
        xs.append(x)
        ys.append(func(x))
        x += step
    return [xs, ys]


def format_rows(columns: Sequence[Sequence[Any]]) -> str:
    """Row-major text for column-major data: one row per line, space separated."""
    columns = [_as_list(column) for column in columns]
    if not columns:
        raise ConfigurationError("array series needs at least one column")

    length = len(columns[0])
    for index, column in enumerate(columns[1:], start=2):
        if len(column) != length:
            raise ConfigurationError(
                f"column length mismatch: column 1 has {length} values, "
                f"column {index} has {len(column)}"
            )

    rows = (" ".join(str(column[row]) for column in columns) for row in range(length))
    return "\n".join(rows)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _make(source: str, file: bool, style: dict[str, Any]) -> Series:
    unknown = set(style) - _STYLE_FIELDS
    if unknown:
        raise ConfigurationError(f"unknown series option(s): {', '.join(sorted(unknown))}")
    if "using" in style:
        style["using"] = tuple(style["using"])
    return Series(source=source, file=file, **style)


def _as_list(column: Any) -> list[Any]:
    # numpy arrays and similar
    if hasattr(column, "tolist"):
        column = column.tolist()
    return list(column)


def _coerce_range(x_range: Any) -> SampleRange:
    if isinstance(x_range, Mapping):
        try:
            return SampleRange(x_range["start"], x_range["stop"], x_range["step"])
        except KeyError as exc:
            raise ConfigurationError(f"range is missing {exc.args[0]!r}") from None
    values = tuple(x_range)
    if len(values) != 3:
        raise ConfigurationError(f"range needs start, stop and step, got {values!r}")
    return SampleRange(*values)
