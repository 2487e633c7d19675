"""reportlab backend implementation for PDF Generator."""

from __future__ import annotations

from typing import BinaryIO

from reportlab.pdfgen import canvas

from ..exceptions import DocumentStateError
from ..types import PageGeometry
from .base import DocumentAuthor, PDFBackend


class ReportlabAuthor(DocumentAuthor):
    """Author pages on a :class:`reportlab.pdfgen.canvas.Canvas`."""

    def __init__(self, stream: BinaryIO, geometry: PageGeometry) -> None:
        self.geometry = geometry
        self.pages_created = 0
        self._page_open = False
        self._finalized = False
        # The canvas starts on an implicit page; it is only emitted once
        # create_page() has opened it and showPage() closes it.
        self._canvas = canvas.Canvas(stream, pagesize=geometry.page_size, invariant=1)

    def _ensure_active(self) -> None:
        if self._finalized:
            raise DocumentStateError("Document has already been finalized.")

    def create_page(self) -> None:
        self._ensure_active()
        if self._page_open:
            self._canvas.showPage()
        self._page_open = True
        self.pages_created += 1

    def draw_centered_text(self, text: str) -> None:
        self._ensure_active()
        if not self._page_open:
            raise DocumentStateError("No page has been created yet.")
        geometry = self.geometry
        self._canvas.setFont(geometry.font_name, geometry.font_size)
        baseline = geometry.height / 2 - geometry.font_size / 3
        self._canvas.drawCentredString(geometry.width / 2, baseline, text)

    def finalize(self) -> None:
        self._ensure_active()
        if self._page_open:
            self._canvas.showPage()
            self._page_open = False
        self._canvas.save()
        self._finalized = True


class ReportlabBackend(PDFBackend):
    """Backend implementation that uses `reportlab` under the hood."""

    def open(self, stream: BinaryIO, geometry: PageGeometry) -> ReportlabAuthor:
        return ReportlabAuthor(stream, geometry)
