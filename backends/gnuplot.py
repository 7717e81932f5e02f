import logging
import os
import subprocess
from pathlib import Path

import config as cfg
from backends.base import RenderResult
from script.compiler import compile_script
from script.plot_config import PlotConfig
from tempfiles import TempFileRegistry, default_registry

logger = logging.getLogger(__name__)


def render(
    config: PlotConfig,
    command: str,
    output_path: str | Path,
    *,
    registry: TempFileRegistry | None = None,
    timeout: float | None = None,
) -> RenderResult:
    script = compile_script(config, command, output_path)
    output_path = Path(output_path)
    registry = registry if registry is not None else default_registry
    timeout = cfg.RENDER_TIMEOUT if timeout is None else timeout

    binary = _resolve_binary(config.binary)
    script_file = registry.write(script, suffix=".gp")
    logger.debug("Running %s %s -> %s", binary, script_file, output_path)

    try:
        result = subprocess.run(
            [binary, str(script_file)],
            capture_output=True,
            text=True,
            timeout=timeout or None,
        )
    except FileNotFoundError:
        return _failure(
            config, script, output_path,
            f"gnuplot binary '{binary}' not found. Install gnuplot and ensure it is on PATH.",
        )
    except subprocess.TimeoutExpired:
        return _failure(config, script, output_path, f"gnuplot timed out after {timeout}s")
    finally:
        registry.discard(script_file)

    if result.returncode != 0:
        return _failure(
            config, script, output_path,
            result.stderr.strip() or f"gnuplot exited with status {result.returncode}",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    if not output_path.exists():
        return _failure(
            config, script, output_path,
            f"gnuplot ran but produced no output file at {output_path}",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    return RenderResult(
        success=True,
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
        backend="gnuplot",
        source_code=script,
        output_path=output_path,
        config=config,
    )


def plot(config: PlotConfig, output_path: str | Path, *, check: bool = True, **kwargs) -> RenderResult:
    """2D plot; the plotted config is available as ``result.config``.

    With ``check`` a failed render raises ``EngineInvocationError``.
    """
    result = render(config, "plot", output_path, **kwargs)
    return result.raise_for_status() if check else result


def splot(config: PlotConfig, output_path: str | Path, *, check: bool = True, **kwargs) -> RenderResult:
    """3D plot; the plotted config is available as ``result.config``.

    With ``check`` a failed render raises ``EngineInvocationError``.
    """
    result = render(config, "splot", output_path, **kwargs)
    return result.raise_for_status() if check else result


def _failure(
    config: PlotConfig,
    script: str,
    output_path: Path,
    error: str,
    **kwargs,
) -> RenderResult:
    logger.debug("gnuplot render failed: %s", error)
    return RenderResult(
        success=False,
        error=error,
        backend="gnuplot",
        source_code=script,
        output_path=output_path,
        config=config,
        **kwargs,
    )


def _resolve_binary(binary: str) -> str:
    """Return the gnuplot executable, treating a directory as its location."""
    if os.path.isdir(binary):
        return str(Path(binary) / "gnuplot")
    return binary
