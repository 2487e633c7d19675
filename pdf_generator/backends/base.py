"""Backend protocol for PDF authoring."""

from __future__ import annotations

from typing import BinaryIO, Protocol

from ..types import PageGeometry


class DocumentAuthor(Protocol):
    """Capability interface used to author a document page by page."""

    def create_page(self) -> None:
        """Start a new page; the previous page, if any, is closed."""

    def draw_centered_text(self, text: str) -> None:
        """Draw text centred horizontally and vertically on the current page."""

    def finalize(self) -> None:
        """Close the last page and flush the document into the stream."""


class PDFBackend(Protocol):
    """Protocol defining how a backend binds an author to an output stream."""

    def open(self, stream: BinaryIO, geometry: PageGeometry) -> DocumentAuthor:
        """Return an author writing into ``stream`` using ``geometry``."""
