from __future__ import annotations

from pathlib import Path

import pytest

from pdf_generator.exceptions import DocumentStateError, StreamOpenError
from pdf_generator.stream import FinishSignal, OutputStream
from pdf_generator.types import StreamFinished


def test_signal_consumed_once(tmp_path: Path) -> None:
    signal = FinishSignal()
    payload = StreamFinished(path=tmp_path / "a.pdf", bytes_written=10)
    signal.fire(payload)

    assert signal.consume() == payload
    assert signal.consumed
    with pytest.raises(DocumentStateError):
        signal.consume()


def test_signal_cannot_be_consumed_before_firing() -> None:
    with pytest.raises(DocumentStateError):
        FinishSignal().consume()


def test_signal_fires_once(tmp_path: Path) -> None:
    signal = FinishSignal()
    signal.fire(StreamFinished(path=tmp_path / "a.pdf", bytes_written=1))
    with pytest.raises(DocumentStateError):
        signal.fire(StreamFinished(path=tmp_path / "a.pdf", bytes_written=1))


def test_close_fires_after_data_is_on_disk(tmp_path: Path) -> None:
    path = tmp_path / "stream.bin"
    stream = OutputStream(path)
    stream.write(b"abc")
    stream.write(b"defg")

    assert not stream.finished.fired
    signal = stream.close()

    assert stream.closed
    finished = signal.consume()
    assert finished.bytes_written == 7
    assert path.read_bytes() == b"abcdefg"


def test_abort_does_not_fire(tmp_path: Path) -> None:
    path = tmp_path / "stream.bin"
    with pytest.raises(RuntimeError):
        with OutputStream(path) as stream:
            stream.write(b"partial")
            raise RuntimeError("boom")

    assert stream.closed
    assert not stream.finished.fired


def test_open_failure(tmp_path: Path) -> None:
    with pytest.raises(StreamOpenError, match="Unable to open output stream"):
        OutputStream(tmp_path / "missing" / "stream.bin")
