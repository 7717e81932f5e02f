"""Shared fixtures for the gnuplot script generator tests.

``fake_gnuplot`` replaces ``subprocess.run`` inside the gnuplot backend so the
tests never need a real gnuplot binary. It records every call together with
the script text that was on disk at the time of the call.
"""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pytest

from tempfiles import TempFileRegistry


@pytest.fixture
def registry(tmp_path):
    """A registry writing into the test's own temp directory."""
    (tmp_path / "tmp").mkdir()
    reg = TempFileRegistry(directory=tmp_path / "tmp")
    yield reg
    reg.close()


@dataclass
class FakeGnuplot:
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    create_output: bool = True
    raise_exc: Optional[BaseException] = None
    calls: List[list] = field(default_factory=list)
    scripts: List[str] = field(default_factory=list)

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        script_path = Path(args[1])
        self.scripts.append(script_path.read_text(encoding="utf-8"))
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.create_output and self.returncode == 0:
            for line in self.scripts[-1].splitlines():
                if line.startswith("set output "):
                    Path(line[len('set output "'):-1]).write_bytes(b"\x89PNG")
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_gnuplot(monkeypatch):
    fake = FakeGnuplot()
    monkeypatch.setattr("backends.gnuplot.subprocess.run", fake)
    return fake
