"""Output stream with a single-shot finish signal."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .exceptions import DocumentStateError, StreamOpenError, StreamWriteError
from .types import StreamFinished

LOGGER = logging.getLogger(__name__)

Opener = Callable[..., BinaryIO]


class FinishSignal:
    """
    Completion notification fired once the stream is durably written.

    The signal can be fired exactly once and consumed exactly once; the size
    reconciler consumes it before it measures the file.
    """

    def __init__(self) -> None:
        self._payload: Optional[StreamFinished] = None
        self._consumed = False

    @property
    def fired(self) -> bool:
        return self._payload is not None

    @property
    def consumed(self) -> bool:
        return self._consumed

    def fire(self, payload: StreamFinished) -> None:
        if self._payload is not None:
            raise DocumentStateError("Finish signal has already fired.")
        self._payload = payload

    def consume(self) -> StreamFinished:
        if self._payload is None:
            raise DocumentStateError("Output stream has not finished writing.")
        if self._consumed:
            raise DocumentStateError("Finish signal has already been consumed.")
        self._consumed = True
        return self._payload


class OutputStream:
    """Binary write stream around the output file."""

    def __init__(self, path: Path, *, opener: Opener = open) -> None:
        self.path = Path(path)
        self.finished = FinishSignal()
        self._bytes_written = 0
        try:
            self._handle: Optional[BinaryIO] = opener(self.path, "wb")
        except OSError as exc:
            raise StreamOpenError(f"Unable to open output stream: {self.path}. Error: {exc}") from exc

    @property
    def name(self) -> str:
        return str(self.path)

    @property
    def closed(self) -> bool:
        return self._handle is None

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    def write(self, data: bytes) -> int:
        if self._handle is None:
            raise DocumentStateError("Output stream is closed.")
        try:
            written = self._handle.write(data)
        except OSError as exc:
            raise StreamWriteError(f"Failed writing to {self.path}. Error: {exc}") from exc
        if written is None:
            written = len(data)
        self._bytes_written += written
        return written

    def flush(self) -> None:
        if self._handle is None:
            return
        try:
            self._handle.flush()
        except OSError as exc:
            raise StreamWriteError(f"Failed flushing {self.path}. Error: {exc}") from exc

    def close(self) -> FinishSignal:
        """Flush, sync and close the file, then fire the finish signal."""
        if self._handle is None:
            raise DocumentStateError("Output stream is closed.")
        handle, self._handle = self._handle, None
        try:
            handle.flush()
            os.fsync(handle.fileno())
        except OSError as exc:
            handle.close()
            raise StreamWriteError(f"Failed flushing {self.path}. Error: {exc}") from exc
        try:
            handle.close()
        except OSError as exc:
            raise StreamWriteError(f"Failed closing {self.path}. Error: {exc}") from exc

        LOGGER.debug("Stream finished: %s (%d bytes)", self.path, self._bytes_written)
        self.finished.fire(StreamFinished(path=self.path, bytes_written=self._bytes_written))
        return self.finished

    def abort(self) -> None:
        """Close the file without firing the finish signal."""
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError:
            LOGGER.debug("Ignoring close failure while aborting %s", self.path)

    def __enter__(self) -> "OutputStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()
