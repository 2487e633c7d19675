"""PDF generation pipeline: build the document, then reconcile its size."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .backends.base import PDFBackend
from .builder import DocumentBuilder
from .reconciler import SizeReconciler
from .stream import Opener
from .types import GenerationRequest, GenerationResult, Number, PageGeometry

LOGGER = logging.getLogger(__name__)


class PDFGenerator:
    """High-level generation of numbered, optionally padded, PDF files."""

    def __init__(
        self,
        *,
        backend: Optional[PDFBackend] = None,
        geometry: Optional[PageGeometry] = None,
        reconciler: Optional[SizeReconciler] = None,
        opener: Opener = open,
    ) -> None:
        self.builder = DocumentBuilder(backend=backend, geometry=geometry, opener=opener)
        self.reconciler = reconciler or SizeReconciler()

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Run the builder and the size reconciler for ``request``.

        The reconciler only runs once the builder's finish signal has fired.
        """
        signal = self.builder.build(request.output_path, request.page_count)
        reconcile = self.reconciler.reconcile(signal, request.target_size_bytes)

        result = GenerationResult(
            output_path=request.output_path,
            page_count=request.page_count,
            reconcile=reconcile,
            target_size_mb=request.target_size_mb,
        )
        LOGGER.info(result.summary())
        return result


def generate(
    output_path: Union[str, Path],
    page_count: int,
    target_size_mb: Optional[Number] = None,
    *,
    backend: Optional[PDFBackend] = None,
    geometry: Optional[PageGeometry] = None,
) -> GenerationResult:
    """
    Generate a PDF with ``page_count`` numbered pages at ``output_path``.

    Args:
        output_path: Destination file
        page_count: Number of pages (>= 1)
        target_size_mb: Optional minimum size in megabytes; the file is padded
            with trailing spaces when it is smaller

    Returns:
        GenerationResult describing the generated file

    Raises:
        InvalidPageCountError: If ``page_count`` is not a positive integer
        StreamOpenError: If the output file cannot be created
        StreamWriteError: If writing the document fails
        PaddingIOError: If padding the finished file fails
    """
    request = GenerationRequest.create(output_path, page_count, target_size_mb)
    generator = PDFGenerator(backend=backend, geometry=geometry)
    return generator.generate(request)
