"""Document builder driving a :class:`PDFBackend` into an :class:`OutputStream`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .backends import PDFBackend, ReportlabBackend
from .exceptions import StreamWriteError
from .stream import FinishSignal, Opener, OutputStream
from .types import PageGeometry

LOGGER = logging.getLogger(__name__)


class DocumentBuilder:
    """Author a document with one numbered page per requested page."""

    def __init__(
        self,
        *,
        backend: Optional[PDFBackend] = None,
        geometry: Optional[PageGeometry] = None,
        opener: Opener = open,
    ) -> None:
        self.backend: PDFBackend = backend or ReportlabBackend()
        self.geometry = geometry or PageGeometry()
        self._opener = opener

    def build(self, output_path: Union[str, Path], page_count: int) -> FinishSignal:
        """
        Write ``page_count`` pages to ``output_path``.

        Each page shows its 1-based index centred on the page. The returned
        signal has fired once the file is flushed and closed.

        Raises:
            StreamOpenError: If the output file cannot be opened
            StreamWriteError: If writing, flushing or closing the file fails
        """
        path = Path(output_path)
        LOGGER.debug("Building %d page(s) into %s", page_count, path)

        stream = OutputStream(path, opener=self._opener)
        with stream:
            author = self.backend.open(stream, self.geometry)
            for page_number in range(1, page_count + 1):
                author.create_page()
                author.draw_centered_text(str(page_number))
            try:
                author.finalize()
            except OSError as exc:
                raise StreamWriteError(f"Failed writing to {path}. Error: {exc}") from exc
            signal = stream.close()

        LOGGER.debug("Built %s (%d bytes)", path, stream.bytes_written)
        return signal
