"""Read-only, bounded input layer for file-format identification.

Identification only ever looks at the head of a file, so this module reads
at most :data:`MAX_BYTES` bytes from a source and hands them over as one
contiguous buffer.  Sources may be filesystem paths or binary streams
(anything with a ``read`` method: open files, :class:`io.BytesIO`, sockets
wrapped with ``makefile("rb")``...).

Key guarantees:
    - Files are opened with O_RDONLY; nothing is ever written.
    - The returned buffer holds the first N bytes of the source,
      ``0 <= N <= limit``, with nothing skipped or reordered.
    - Short sources yield short buffers; truncation is never an error.
    - Every failure is an :class:`OSError` (missing file, directory,
      permission denied, read error).
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_BYTES: int = 36_870
"""Largest number of bytes ever read from a source.  Every signature offset
lies inside this window."""

Source = str | os.PathLike[str] | BinaryIO


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _check_limit(limit: int) -> int:
    if not 0 <= limit <= MAX_BYTES:
        raise ValueError(f"limit must be between 0 and {MAX_BYTES}, got {limit}")
    return limit


def validate_source_path(path: str | os.PathLike[str]) -> Path:
    """Validate that *path* names something readable as a byte stream.

    Parameters
    ----------
    path:
        Filesystem path to validate.

    Returns
    -------
    Path
        The fully-resolved :class:`pathlib.Path`.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist (including dangling symlinks).
    IsADirectoryError
        If *path* resolves to a directory.
    """
    p = Path(path)

    if not p.exists():
        raise FileNotFoundError(f"Source path does not exist: {p}")

    resolved = p.resolve(strict=True)

    # Stat the resolved target so symlinks to directories are caught too.
    st = resolved.stat()
    if stat.S_ISDIR(st.st_mode):
        raise IsADirectoryError(f"Source path is a directory: {resolved}")

    logger.debug("Validated source path: %s (size=%d bytes)", resolved, st.st_size)
    return resolved


# ---------------------------------------------------------------------------
# SafeReader
# ---------------------------------------------------------------------------


class SafeReader:
    """Read-only file reader that only ever reads the head of a file.

    Usage::

        with SafeReader("/uploads/photo") as reader:
            head = reader.read_head()
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path: Path = validate_source_path(path)
        self._fd: int = -1
        self._size: int = 0
        self._closed: bool = True

    # -- context manager ----------------------------------------------------

    def __enter__(self) -> SafeReader:
        self._open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    # -- internal open / close ----------------------------------------------

    def _open(self) -> None:
        """Open the file read-only via a low-level OS descriptor."""
        if not self._closed:
            return
        self._fd = os.open(str(self._path), os.O_RDONLY)
        self._size = os.fstat(self._fd).st_size
        self._closed = False
        logger.debug("Opened source (fd=%d): %s (%d bytes)", self._fd, self._path, self._size)

    def close(self) -> None:
        """Close the underlying file descriptor if it is still open."""
        if self._closed:
            return
        os.close(self._fd)
        logger.debug("Closed source (fd=%d): %s", self._fd, self._path)
        self._fd = -1
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("SafeReader is not open; use it as a context manager")

    # -- public API ---------------------------------------------------------

    @property
    def path(self) -> Path:
        """Return the resolved source path."""
        return self._path

    def get_size(self) -> int:
        """Return the size reported by the OS when the file was opened.

        Pipes and character devices report 0 even though they can be read.
        """
        self._ensure_open()
        return self._size

    def read_head(self, limit: int = MAX_BYTES) -> bytes:
        """Read up to *limit* bytes from the start of the file.

        The OS may return fewer bytes than requested on a single read, so
        reads are repeated until *limit* bytes are collected or EOF is hit.

        Raises
        ------
        ValueError
            If *limit* is outside ``0..MAX_BYTES``.
        OSError
            If the underlying read fails.
        """
        self._ensure_open()
        _check_limit(limit)

        chunks: list[bytes] = []
        remaining = limit
        while remaining > 0:
            data = os.read(self._fd, remaining)
            if not data:
                break
            chunks.append(data)
            remaining -= len(data)

        head = b"".join(chunks)
        logger.debug(
            "read_head: requested=%d actual=%d file=%s", limit, len(head), self._path
        )
        return head

    def __repr__(self) -> str:
        state = "open" if not self._closed else "closed"
        return f"<SafeReader path={self._path!r} state={state}>"


# ---------------------------------------------------------------------------
# Streams and the generic entry point
# ---------------------------------------------------------------------------


def read_stream_head(stream: BinaryIO, limit: int = MAX_BYTES) -> bytes:
    """Read up to *limit* bytes from the current position of *stream*.

    The stream is not closed or rewound.  Text streams are rejected with a
    :class:`TypeError` because they cannot yield raw bytes.
    """
    _check_limit(limit)

    chunks: list[bytes] = []
    remaining = limit
    while remaining > 0:
        data = stream.read(remaining)
        if not data:
            break
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(
                f"stream must be opened in binary mode, read() returned "
                f"{type(data).__name__}"
            )
        chunks.append(bytes(data[:remaining]))
        remaining -= len(chunks[-1])

    head = b"".join(chunks)
    logger.debug("read_stream_head: requested=%d actual=%d", limit, len(head))
    return head


def read_head(source: Source, limit: int = MAX_BYTES) -> bytes:
    """Return the first ``min(limit, len(source))`` bytes of *source*.

    Parameters
    ----------
    source:
        A filesystem path (``str`` or :class:`os.PathLike`) or a binary
        stream with a ``read`` method.
    limit:
        Maximum number of bytes to read.  Must lie in ``0..MAX_BYTES``.

    Raises
    ------
    OSError
        If the source cannot be opened or read.
    ValueError
        If *limit* is out of range.
    """
    _check_limit(limit)

    if hasattr(source, "read"):
        return read_stream_head(source, limit)

    with SafeReader(source) as reader:
        return reader.read_head(limit)
