"""Temporary file bookkeeping for generated scripts and data files.

Every file written through a ``TempFileRegistry`` is recorded so it can be
removed in one go when the registry is closed. A process-wide default
registry backs the module-level ``write_temp_file`` / ``remove_temp_files``
helpers and is drained when the interpreter exits.
"""
from __future__ import annotations

import atexit
import logging
import os
import tempfile
import threading
from pathlib import Path

import config as cfg

logger = logging.getLogger(__name__)


class TempFileRegistry:
    def __init__(
        self,
        directory: str | Path | None = None,
        prefix: str = "gnuplot_",
        keep: bool = False,
    ) -> None:
        self._directory = str(directory) if directory is not None else None
        self._prefix = prefix
        self._keep = keep
        self._paths: list[Path] = []
        self._lock: threading.RLock = threading.RLock()
        self._closed = False

    # ── Writing ───────────────────────────────────────────────────────────────

    def write(self, content: str, suffix: str = "") -> Path:
        """Write ``content`` to a fresh temp file and return its path."""
        with self._lock:
            if self._closed:
                raise RuntimeError("temp file registry is closed")

            fd, name = tempfile.mkstemp(suffix=suffix, prefix=self._prefix, dir=self._directory)
            path = Path(name)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
            except OSError:
                path.unlink(missing_ok=True)
                raise

            self._paths.append(path)
            logger.debug("Wrote temp file %s (%d chars)", path, len(content))
            return path

    # ── Removal ───────────────────────────────────────────────────────────────

    def discard(self, path: str | Path) -> None:
        """Remove a single recorded file and forget it."""
        path = Path(path)
        with self._lock:
            if path not in self._paths:
                return
            self._paths.remove(path)
            if not self._keep:
                _remove(path)

    def remove_all(self) -> int:
        """Delete every recorded file; returns how many were removed.

        Individual failures are logged and skipped. The registry is empty
        afterwards, so a second call is a no-op.
        """
        with self._lock:
            paths, self._paths = self._paths, []

        if self._keep:
            logger.debug("Keeping %d temp file(s)", len(paths))
            return 0
        return sum(_remove(path) for path in paths)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self.remove_all()

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Container protocol ────────────────────────────────────────────────────

    def __enter__(self) -> TempFileRegistry:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return Path(path) in self._paths  # type: ignore[arg-type]

    def __iter__(self):
        with self._lock:
            return iter(list(self._paths))

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)


def _remove(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.warning("Could not remove temp file %s: %s", path, exc)
        return False
    logger.debug("Removed temp file %s", path)
    return True


# ── Process-wide default ──────────────────────────────────────────────────────

default_registry = TempFileRegistry(directory=cfg.TEMP_DIR, keep=cfg.KEEP_TEMP_FILES)
atexit.register(default_registry.close)


def write_temp_file(content: str) -> Path:
    return default_registry.write(content)


def remove_temp_files() -> int:
    return default_registry.remove_all()
