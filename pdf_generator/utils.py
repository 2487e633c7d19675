"""Utility functions for PDF Generator."""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Optional, Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .constants import PDF_EOF_MARKER
from .exceptions import InvalidPageCountError, InvalidTargetSizeError, PDFGeneratorException
from .types import ArtifactInfo

_PAGE_OBJECT_RE = re.compile(rb"/Type\s*/Page\b")
_PAGE_COUNT_RE = re.compile(r"^\+?\d+$")


def parse_page_count(value: str) -> int:
    """Parse a page count argument, rejecting anything but a positive integer."""

    token = value.strip() if value else ""
    if not _PAGE_COUNT_RE.match(token):
        raise InvalidPageCountError()
    page_count = int(token)
    if page_count < 1:
        raise InvalidPageCountError()
    return page_count


def parse_target_size(value: Optional[str]) -> Optional[float]:
    """Parse an optional target size in megabytes."""

    if value is None or not value.strip():
        return None
    try:
        size = float(value)
    except ValueError as exc:
        raise InvalidTargetSizeError() from exc
    if math.isnan(size) or math.isinf(size):
        raise InvalidTargetSizeError()
    return size


def count_page_objects(data: bytes) -> int:
    """Count ``/Type /Page`` dictionaries in raw PDF bytes, ignoring ``/Pages``."""

    return len(_PAGE_OBJECT_RE.findall(data))


def inspect_artifact(pdf_path: Union[str, Path]) -> ArtifactInfo:
    """Return page count, size and trailing filler size of a generated PDF."""

    path = Path(pdf_path)
    try:
        raw_bytes = path.read_bytes()
    except OSError as exc:
        raise PDFGeneratorException(f"Unable to read PDF file: {path}. Error: {exc}") from exc

    try:
        with path.open("rb") as handle:
            num_pages = len(PdfReader(handle, strict=False).pages)
    except PdfReadError:
        num_pages = count_page_objects(raw_bytes)

    eof = raw_bytes.rfind(PDF_EOF_MARKER)
    if eof == -1:
        trailing = 0
    else:
        trailing = len(raw_bytes[eof + len(PDF_EOF_MARKER):].lstrip(b"\r\n"))

    return ArtifactInfo(num_pages=num_pages, file_size=len(raw_bytes), trailing_bytes=trailing)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
