"""Identify file formats from their leading bytes.

Two entry points cover the core use:

    classify(data)            classify an in-memory buffer; never fails.
    classify_source(source)   read at most MAX_BYTES from a path or binary
                              stream, then classify.  Only I/O errors
                              propagate.

On top of those, :func:`identify_path` and :func:`identify_paths` produce
:class:`IdentifyResult` records (format, catalog entry, bytes read, error)
for the command-line tool and for batch use.  They never raise for I/O
problems; failures are recorded on the result instead.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fileformat.common.safe_io import MAX_BYTES, Source, read_head
from fileformat.common.signatures import DEFAULT_FORMAT, FormatId, RuleTable

from .catalog import FormatInfo, lookup
from .rules import RULES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core entry points
# ---------------------------------------------------------------------------


def classify(data: bytes | bytearray | memoryview, table: RuleTable = RULES) -> FormatId:
    """Return the format of *data*, or the ``application/octet-stream``
    default when no rule matches.

    Any buffer is accepted, including an empty one.  Only the first
    ``table.window`` bytes can influence the result.
    """
    return table.classify(data)


def classify_source(
    source: Source,
    limit: int = MAX_BYTES,
    table: RuleTable = RULES,
) -> FormatId:
    """Read the head of *source* and classify it.

    Parameters
    ----------
    source:
        Filesystem path or binary stream.
    limit:
        Maximum number of bytes to read (``0..MAX_BYTES``).

    Raises
    ------
    OSError
        If the source cannot be opened or read.  Content never causes an
        error.
    """
    head = read_head(source, limit)
    result = table.classify(head)
    logger.debug("Classified %r (%d bytes) as %s", source, len(head), result)
    return result


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class IdentifyConfig:
    """Options for identifying files on disk.

    Attributes
    ----------
    max_bytes:
        Number of leading bytes read from each file.  Lowering it below the
        rule table's window can only turn matches into the default result.
    recursive:
        Descend into sub-directories when a directory is given.
    include_hidden:
        Also identify entries whose name starts with a dot.
    follow_symlinks:
        Follow symbolic links to directories while walking.  Symlinks to
        files are always identified through their target.
    """

    max_bytes: int = MAX_BYTES
    recursive: bool = False
    include_hidden: bool = False
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.max_bytes <= MAX_BYTES:
            raise ValueError(
                f"max_bytes must be between 0 and {MAX_BYTES}, got {self.max_bytes}"
            )


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class IdentifyResult:
    """Outcome of identifying a single path."""

    path: Path
    format_id: FormatId
    info: FormatInfo
    bytes_read: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the file could be read (whatever its format)."""
        return self.error is None

    @property
    def recognized(self) -> bool:
        """True when a rule matched, i.e. the result is not the default."""
        return self.ok and self.format_id != DEFAULT_FORMAT

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "media_type": self.format_id.media_type,
            "extension": self.format_id.extension,
            "name": self.info.name,
            "short_name": self.info.short_name,
            "kind": self.info.kind.value,
            "bytes_read": self.bytes_read,
            "error": self.error,
        }


# ---------------------------------------------------------------------------
# Path identification
# ---------------------------------------------------------------------------


def identify_path(
    path: str | os.PathLike[str],
    config: IdentifyConfig | None = None,
    table: RuleTable = RULES,
) -> IdentifyResult:
    """Identify one file.  I/O failures are recorded, not raised."""
    config = config or IdentifyConfig()
    p = Path(path)

    try:
        head = read_head(p, config.max_bytes)
    except OSError as exc:
        logger.warning("Cannot read %s: %s", p, exc)
        return IdentifyResult(
            path=p,
            format_id=DEFAULT_FORMAT,
            info=lookup(DEFAULT_FORMAT),
            bytes_read=0,
            error=str(exc),
        )

    format_id = table.classify(head)
    logger.debug("%s: %s (%d bytes read)", p, format_id, len(head))
    return IdentifyResult(
        path=p,
        format_id=format_id,
        info=lookup(format_id),
        bytes_read=len(head),
    )


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _walk(
    directory: Path,
    config: IdentifyConfig,
    visited: set[tuple[int, int]],
) -> Iterator[Path]:
    try:
        st = directory.stat()
        entries = sorted(directory.iterdir())
    except OSError as exc:
        logger.warning("Cannot list %s: %s", directory, exc)
        return

    # (st_dev, st_ino) of every directory already listed in this walk.
    key = (st.st_dev, st.st_ino)
    if key in visited:
        logger.debug("Skipping already visited directory %s", directory)
        return
    visited.add(key)

    for entry in entries:
        if not config.include_hidden and _is_hidden(entry):
            continue
        if entry.is_dir():
            if not config.recursive:
                continue
            if entry.is_symlink() and not config.follow_symlinks:
                logger.debug("Skipping symlinked directory %s", entry)
                continue
            yield from _walk(entry, config, visited)
        else:
            yield entry


def iter_paths(
    paths: Iterable[str | os.PathLike[str]],
    config: IdentifyConfig | None = None,
) -> Iterator[Path]:
    """Expand *paths* into the files to identify.

    Directories are listed in sorted order (recursively when
    ``config.recursive`` is set).  Paths given explicitly are always
    yielded, even hidden or missing ones, so that errors get reported.
    """
    config = config or IdentifyConfig()
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            yield from _walk(p, config, set())
        else:
            yield p


def identify_paths(
    paths: Iterable[str | os.PathLike[str]],
    config: IdentifyConfig | None = None,
    table: RuleTable = RULES,
) -> list[IdentifyResult]:
    """Identify every file named by, or found under, *paths*."""
    config = config or IdentifyConfig()
    results = [identify_path(p, config, table) for p in iter_paths(paths, config)]
    logger.info(
        "Identified %d file(s): %d recognized, %d unreadable",
        len(results),
        sum(1 for r in results if r.recognized),
        sum(1 for r in results if not r.ok),
    )
    return results
