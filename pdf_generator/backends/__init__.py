"""Backend abstractions for PDF Generator."""

from .base import DocumentAuthor, PDFBackend
from .reportlab_backend import ReportlabAuthor, ReportlabBackend

__all__ = [
    "DocumentAuthor",
    "PDFBackend",
    "ReportlabAuthor",
    "ReportlabBackend",
]
