from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from errors import EngineInvocationError

if TYPE_CHECKING:
    from script.plot_config import PlotConfig


@dataclass
class RenderResult:
    success: bool
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str = ""
    backend: str = ""
    source_code: str = ""
    output_path: Path | None = None
    config: "PlotConfig | None" = None

    def raise_for_status(self) -> RenderResult:
        if not self.success:
            raise EngineInvocationError(self)
        return self
