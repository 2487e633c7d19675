"""
PDF Generator - Generate numbered PDF files padded to a target size.

This library produces a PDF with N pages, each showing its page number,
and can inflate the resulting file to a minimum byte size by appending
filler bytes after the document's end marker.

Quick Start:
    >>> from pdf_generator import generate
    >>> result = generate('out.pdf', 3, target_size_mb=1)
    >>> result.final_size
    1048576

Main Classes:
    - PDFGenerator: Builds a document and reconciles its size
    - DocumentBuilder: Authors the numbered pages
    - SizeReconciler: Pads a finished file up to a target size

Exceptions:
    - PDFGeneratorException: Base exception
    - StreamOpenError / StreamWriteError: Failures while writing the PDF
    - PaddingIOError: Failures while padding the finished PDF

For CLI usage, use the 'pdf-generator' command after installation.
"""

import logging

# Core classes
from pdf_generator.builder import DocumentBuilder
from pdf_generator.generator import PDFGenerator, generate
from pdf_generator.reconciler import SizeReconciler, decide_padding, pad_file
from pdf_generator.stream import FinishSignal, OutputStream

# Data types
from pdf_generator.types import (
    ArtifactInfo,
    GenerationRequest,
    GenerationResult,
    PageGeometry,
    PaddingDecision,
    ReconcileResult,
    StreamFinished,
)

# Exceptions
from pdf_generator.exceptions import (
    PDFGeneratorException,
    UsageError,
    InvalidPageCountError,
    InvalidTargetSizeError,
    StreamOpenError,
    StreamWriteError,
    PaddingIOError,
    DocumentStateError,
)

# Utility functions
from pdf_generator.utils import count_page_objects, format_file_size, inspect_artifact

__version__ = "1.0.0"
__author__ = "PDF Generator CLI Contributors"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Main classes
    "PDFGenerator",
    "DocumentBuilder",
    "SizeReconciler",
    "OutputStream",
    "FinishSignal",
    "generate",
    "decide_padding",
    "pad_file",
    # Data types
    "ArtifactInfo",
    "GenerationRequest",
    "GenerationResult",
    "PageGeometry",
    "PaddingDecision",
    "ReconcileResult",
    "StreamFinished",
    # Exceptions
    "PDFGeneratorException",
    "UsageError",
    "InvalidPageCountError",
    "InvalidTargetSizeError",
    "StreamOpenError",
    "StreamWriteError",
    "PaddingIOError",
    "DocumentStateError",
    # Utility functions
    "count_page_objects",
    "format_file_size",
    "inspect_artifact",
    # Version info
    "__version__",
]
