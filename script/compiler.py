from __future__ import annotations

import logging
from pathlib import Path

from errors import ConfigurationError
from script.options import Text, format_option, terminal_statement, to_option
from script.plot_config import PlotConfig

logger = logging.getLogger(__name__)


def compile_script(config: PlotConfig, command: str, output_path: str | Path) -> str:
    """Return the gnuplot script that draws ``config`` into ``output_path``.

    ``command`` is ``"plot"`` (2D) or ``"splot"`` (3D). Nothing is written or
    executed here; invalid configurations raise ``ConfigurationError`` with
    every problem found.
    """
    from validators.config import check_config  # avoid circular at module level

    report = check_config(config, command, output_path)
    for warning in report.warnings:
        logger.warning("%s", warning)
    if not report.valid:
        raise ConfigurationError("invalid plot configuration:\n  " + "\n  ".join(report.errors))

    output = str(output_path)
    config.output = output

    lines = [
        terminal_statement(
            config.output_type(output),
            config.width,
            config.height,
            config.font,
            config.font_size,
        ),
        format_option(Text("output", output, quoted=True)),
    ]
    lines.extend(format_option(to_option(key, value)) for key, value in config.options.items())

    clauses = [series.clause(position) for position, series in enumerate(config.data, start=1)]
    lines.append(f"{command} {', '.join(clauses)}")

    return "\n".join(lines)
