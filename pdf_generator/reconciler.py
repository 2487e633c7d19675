"""Size reconciliation: pad a finished PDF up to a target byte size."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Optional, Union

from .constants import OVER_TARGET_WARNING, PADDING_CHUNK_SIZE, PADDING_FILLER
from .exceptions import PaddingIOError
from .stream import FinishSignal
from .types import Number, PaddingDecision, ReconcileResult

LOGGER = logging.getLogger(__name__)


def decide_padding(artifact_size: int, target_size_bytes: Optional[Number]) -> PaddingDecision:
    """Compare the artifact size with the target and pick a padding decision."""

    if target_size_bytes is None:
        return PaddingDecision.NO_TARGET
    if artifact_size < target_size_bytes:
        return PaddingDecision.PAD
    if artifact_size == target_size_bytes:
        return PaddingDecision.EXACT_MATCH
    return PaddingDecision.ALREADY_OVER_TARGET


def pad_file(
    path: Union[str, Path],
    pad: int,
    *,
    chunk_size: int = PADDING_CHUNK_SIZE,
    filler: bytes = PADDING_FILLER,
) -> int:
    """
    Append ``pad`` filler bytes to ``path`` in chunks of at most ``chunk_size``.

    Returns:
        Number of bytes appended

    Raises:
        PaddingIOError: If the file cannot be opened, written or closed
    """
    if pad <= 0:
        return 0
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    if len(filler) != 1:
        raise ValueError("filler must be a single byte")

    buffer = filler * chunk_size
    remaining = pad
    try:
        with open(path, "ab") as handle:
            while remaining > 0:
                chunk = min(remaining, chunk_size)
                handle.write(buffer[:chunk])
                remaining -= chunk
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as exc:
        raise PaddingIOError(f"Unable to pad {path}. Error: {exc}") from exc
    return pad


class SizeReconciler:
    """Measure a finished artifact and pad it to the requested size."""

    def __init__(
        self,
        *,
        chunk_size: int = PADDING_CHUNK_SIZE,
        filler: bytes = PADDING_FILLER,
    ) -> None:
        self.chunk_size = chunk_size
        self.filler = filler

    def reconcile(
        self,
        signal: FinishSignal,
        target_size_bytes: Optional[Number] = None,
    ) -> ReconcileResult:
        """
        Consume ``signal`` and bring the artifact up to ``target_size_bytes``.

        Without a target nothing is measured. A target at or below the current
        size leaves the file untouched; a larger one appends filler bytes.
        """
        finished = signal.consume()
        if target_size_bytes is None:
            return ReconcileResult(decision=PaddingDecision.NO_TARGET)

        if target_size_bytes < 0:
            LOGGER.warning(
                "Negative target size %s is ambiguous; treating it as already exceeded.",
                target_size_bytes,
            )

        path = finished.path
        try:
            current_size = os.stat(path).st_size
        except OSError as exc:
            raise PaddingIOError(f"Unable to stat {path}. Error: {exc}") from exc

        decision = decide_padding(current_size, target_size_bytes)
        appended = 0
        if decision is PaddingDecision.PAD:
            pad = math.ceil(target_size_bytes) - current_size
            appended = pad_file(path, pad, chunk_size=self.chunk_size, filler=self.filler)
            LOGGER.info(
                "Appended %d bytes to match target size of %s bytes.",
                appended,
                target_size_bytes,
            )
        elif decision is PaddingDecision.ALREADY_OVER_TARGET:
            LOGGER.warning(OVER_TARGET_WARNING)
        else:
            LOGGER.debug("Artifact %s already matches the target size.", path)

        return ReconcileResult(
            decision=decision,
            initial_size=current_size,
            final_size=current_size + appended,
            bytes_appended=appended,
            target_size_bytes=target_size_bytes,
        )
