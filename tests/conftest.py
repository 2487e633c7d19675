from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_generator.stream import FinishSignal  # noqa: E402
from pdf_generator.types import StreamFinished  # noqa: E402


@pytest.fixture()
def output_pdf(tmp_path: Path) -> Path:
    return tmp_path / "out.pdf"


@pytest.fixture()
def finished_file(tmp_path: Path) -> Callable[..., tuple[FinishSignal, Path]]:
    """Create a file of the given size and return its fired finish signal and path."""

    def _create(size: int, name: str = "artifact.pdf") -> tuple[FinishSignal, Path]:
        path = tmp_path / name
        path.write_bytes(b"x" * size)
        signal = FinishSignal()
        signal.fire(StreamFinished(path=path, bytes_written=size))
        return signal, path

    return _create
