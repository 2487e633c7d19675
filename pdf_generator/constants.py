"""Shared constants for PDF Generator."""

from __future__ import annotations

from reportlab.lib.pagesizes import A4

BYTES_PER_MB = 1024 * 1024

PADDING_CHUNK_SIZE = 1024
PADDING_FILLER = b" "

DEFAULT_PAGE_SIZE = A4
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 20

USAGE_MESSAGE = "Usage: pdf-generator <output-filename> <number-of-pages> [file-size-MB]"
INVALID_PAGES_MESSAGE = "Invalid number of pages provided."
INVALID_SIZE_MESSAGE = "Invalid file size provided."
OVER_TARGET_WARNING = "Warning: The generated PDF is larger than the target file size."

PDF_EOF_MARKER = b"%%EOF"
