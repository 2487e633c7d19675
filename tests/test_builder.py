from __future__ import annotations

from pathlib import Path

import pytest
from pypdf import PdfReader

from pdf_generator.backends import ReportlabBackend
from pdf_generator.backends.reportlab_backend import ReportlabAuthor
from pdf_generator.builder import DocumentBuilder
from pdf_generator.exceptions import DocumentStateError, StreamOpenError, StreamWriteError
from pdf_generator.types import PageGeometry
from pdf_generator.utils import count_page_objects


class RecordingAuthor:
    def __init__(self, stream, calls):
        self.stream = stream
        self.calls = calls

    def create_page(self):
        self.calls.append("create_page")

    def draw_centered_text(self, text):
        self.calls.append(("draw", text))

    def finalize(self):
        self.calls.append("finalize")
        self.stream.write(b"%PDF-1.4\n%%EOF\n")


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def open(self, stream, geometry):
        return RecordingAuthor(stream, self.calls)


class FailingHandle:
    def __init__(self):
        self.closed = False

    def write(self, data):
        raise OSError("disk full")

    def flush(self):
        pass

    def close(self):
        self.closed = True


@pytest.mark.parametrize("page_count", [1, 3, 5])
def test_build_emits_exact_page_count(output_pdf: Path, page_count: int) -> None:
    DocumentBuilder().build(output_pdf, page_count)

    reader = PdfReader(str(output_pdf))
    assert len(reader.pages) == page_count
    assert count_page_objects(output_pdf.read_bytes()) == page_count


def test_each_page_shows_its_index(output_pdf: Path) -> None:
    DocumentBuilder().build(output_pdf, 3)

    reader = PdfReader(str(output_pdf))
    texts = [page.extract_text().strip() for page in reader.pages]
    assert texts == ["1", "2", "3"]


def test_default_geometry_is_a4(output_pdf: Path) -> None:
    DocumentBuilder().build(output_pdf, 1)

    box = PdfReader(str(output_pdf)).pages[0].mediabox
    assert float(box.width) == pytest.approx(595.2756, abs=0.01)
    assert float(box.height) == pytest.approx(841.8898, abs=0.01)


def test_custom_geometry(output_pdf: Path) -> None:
    geometry = PageGeometry(width=200, height=300, font_size=12)
    DocumentBuilder(geometry=geometry).build(output_pdf, 2)

    reader = PdfReader(str(output_pdf))
    assert len(reader.pages) == 2
    assert float(reader.pages[1].mediabox.height) == pytest.approx(300)


def test_build_returns_fired_signal(output_pdf: Path) -> None:
    signal = DocumentBuilder().build(output_pdf, 2)

    assert signal.fired
    finished = signal.consume()
    assert finished.path == output_pdf
    assert finished.bytes_written == output_pdf.stat().st_size


def test_build_drives_backend_in_order(output_pdf: Path) -> None:
    backend = RecordingBackend()
    DocumentBuilder(backend=backend).build(output_pdf, 2)

    assert backend.calls == [
        "create_page",
        ("draw", "1"),
        "create_page",
        ("draw", "2"),
        "finalize",
    ]


def test_missing_directory_raises_stream_open_error(tmp_path: Path) -> None:
    target = tmp_path / "nonexistent" / "test.pdf"
    backend = RecordingBackend()

    with pytest.raises(StreamOpenError):
        DocumentBuilder(backend=backend).build(target, 1)

    assert backend.calls == []
    assert not target.exists()


def test_write_failure_raises_stream_write_error(output_pdf: Path) -> None:
    handle = FailingHandle()
    builder = DocumentBuilder(opener=lambda path, mode: handle)

    with pytest.raises(StreamWriteError, match="disk full"):
        builder.build(output_pdf, 1)

    assert handle.closed


def test_author_rejects_text_before_first_page(output_pdf: Path) -> None:
    with output_pdf.open("wb") as stream:
        author = ReportlabBackend().open(stream, PageGeometry())
        with pytest.raises(DocumentStateError):
            author.draw_centered_text("1")


def test_author_rejects_use_after_finalize(output_pdf: Path) -> None:
    with output_pdf.open("wb") as stream:
        author = ReportlabAuthor(stream, PageGeometry())
        author.create_page()
        author.finalize()
        with pytest.raises(DocumentStateError):
            author.create_page()

    assert author.pages_created == 1
    assert len(PdfReader(str(output_pdf)).pages) == 1
