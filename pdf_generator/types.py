"""
Type definitions and dataclasses for PDF Generator.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .constants import (
    BYTES_PER_MB,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_PAGE_SIZE,
)
from .exceptions import InvalidPageCountError, InvalidTargetSizeError

Number = Union[int, float]


def mb_to_bytes(size_mb: Number) -> float:
    """Convert a size in megabytes (1 MB = 1024 * 1024 bytes) to bytes."""

    return size_mb * BYTES_PER_MB


def format_megabytes(size_mb: Number) -> str:
    """Render a megabyte value the way it was typed, without a trailing ``.0``."""

    if isinstance(size_mb, float) and size_mb.is_integer():
        return str(int(size_mb))
    return str(size_mb)


@dataclass(frozen=True)
class PageGeometry:
    """
    Page layout used when authoring each page.

    Attributes:
        width: Page width in points
        height: Page height in points
        font_name: Font used for the page number
        font_size: Font size used for the page number
    """
    width: float = DEFAULT_PAGE_SIZE[0]
    height: float = DEFAULT_PAGE_SIZE[1]
    font_name: str = DEFAULT_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE

    @property
    def page_size(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class GenerationRequest:
    """
    Immutable description of one generation call.

    Attributes:
        output_path: Destination of the generated PDF
        page_count: Number of pages to author (>= 1)
        target_size_bytes: Minimum file size to pad up to, if any
        target_size_mb: Target size as requested, in megabytes
    """
    output_path: Path
    page_count: int
    target_size_bytes: Optional[Number] = None
    target_size_mb: Optional[Number] = None

    @classmethod
    def create(
        cls,
        output_path: Union[str, Path],
        page_count: int,
        target_size_mb: Optional[Number] = None,
    ) -> "GenerationRequest":
        if isinstance(page_count, bool) or not isinstance(page_count, int) or page_count < 1:
            raise InvalidPageCountError()

        target_size_bytes: Optional[Number] = None
        if target_size_mb is not None:
            if isinstance(target_size_mb, bool) or not isinstance(target_size_mb, (int, float)):
                raise InvalidTargetSizeError()
            if math.isnan(target_size_mb) or math.isinf(target_size_mb):
                raise InvalidTargetSizeError()
            target_size_bytes = mb_to_bytes(target_size_mb)

        return cls(
            output_path=Path(output_path),
            page_count=page_count,
            target_size_bytes=target_size_bytes,
            target_size_mb=target_size_mb,
        )


class PaddingDecision(enum.Enum):
    """Outcome of comparing the artifact size against the target size."""

    NO_TARGET = "no-target"
    PAD = "pad"
    EXACT_MATCH = "exact-match"
    ALREADY_OVER_TARGET = "already-over-target"


@dataclass(frozen=True)
class StreamFinished:
    """Payload delivered once the output stream is durably written."""

    path: Path
    bytes_written: int


@dataclass(frozen=True)
class ReconcileResult:
    """
    Result of reconciling the artifact size with the target size.

    Attributes:
        decision: Padding decision taken
        initial_size: Size of the artifact before padding (None without a target)
        final_size: Size of the artifact after padding (None without a target)
        bytes_appended: Number of filler bytes appended
        target_size_bytes: Requested target size in bytes, if any
    """
    decision: PaddingDecision
    initial_size: Optional[int] = None
    final_size: Optional[int] = None
    bytes_appended: int = 0
    target_size_bytes: Optional[Number] = None


@dataclass(frozen=True)
class GenerationResult:
    """
    Result of a PDF generation call.

    Attributes:
        output_path: Path of the generated PDF
        page_count: Number of pages authored
        target_size_mb: Requested target size in megabytes, if any
        reconcile: Outcome of the size reconciliation step
    """
    output_path: Path
    page_count: int
    reconcile: ReconcileResult
    target_size_mb: Optional[Number] = None

    @property
    def decision(self) -> PaddingDecision:
        return self.reconcile.decision

    @property
    def bytes_appended(self) -> int:
        return self.reconcile.bytes_appended

    @property
    def final_size(self) -> Optional[int]:
        return self.reconcile.final_size

    @property
    def over_target(self) -> bool:
        return self.reconcile.decision is PaddingDecision.ALREADY_OVER_TARGET

    def summary(self) -> str:
        """Return the human readable summary line for this generation."""
        if self.target_size_mb is None:
            return f'PDF file "{self.output_path}" has been generated ({self.page_count} pages).'
        return (
            f'PDF file "{self.output_path}" has been generated '
            f"({self.page_count} pages, approx. {format_megabytes(self.target_size_mb)} MB)."
        )

    def __str__(self) -> str:
        return (
            f"GenerationResult(pages={self.page_count}, "
            f"decision={self.decision.value}, appended={self.bytes_appended})"
        )


@dataclass(frozen=True)
class ArtifactInfo:
    """
    Information gathered from a generated PDF on disk.

    Attributes:
        num_pages: Number of pages found in the document
        file_size: File size in bytes
        trailing_bytes: Bytes found after the final %%EOF marker
    """
    num_pages: int
    file_size: int
    trailing_bytes: int = 0
