"""File streamer: resolve a path and copy its bytes to a sink."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

from . import DEFAULT_BUFFER_SIZE, copy_stream
from .errors import CannotOpenError, IsDirectoryError, NotFoundError

logger = logging.getLogger(__name__)


def resolve_link(path: str) -> str:
    """Follow a symbolic link exactly one level.

    A relative target is taken relative to the link's own directory. If the
    link cannot be read the link path itself is returned; opening it will
    report the problem.
    """
    try:
        target = os.readlink(path)
    except OSError:
        return path
    return os.path.join(os.path.dirname(path), target)


def stream(
    path: str | Path, output, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> None:
    """Copy the content of the file at ``path`` to ``output``.

    Args:
        path: Relative or absolute path to a regular file or a symbolic link.
        output: Binary sink with a ``write(bytes)`` method.
        buffer_size: Chunk size used for the copy.

    Raises:
        NotFoundError: If the path's metadata cannot be read.
        IsDirectoryError: If the path is a directory.
        CannotOpenError: If the (link-resolved) path cannot be opened.
        WriteFailureError: If the sink rejects a write. Leading bytes may
            already have been written.
        ReadFailureError: If reading the opened file fails.
    """
    src = os.path.normpath(os.fspath(path))

    try:
        info = os.lstat(src)
    except OSError:
        raise NotFoundError(f"{src}: No such file or directory") from None

    if stat.S_ISDIR(info.st_mode):
        name = os.path.basename(src) or src
        raise IsDirectoryError(f"{name}: Is a directory")

    if stat.S_ISLNK(info.st_mode):
        src = resolve_link(src)
        logger.debug("Followed symbolic link %s -> %s", path, src)

    try:
        f = open(src, "rb")
    except OSError:
        raise CannotOpenError(f"cannot open {src}") from None

    with f:
        written = copy_stream(f, output, buffer_size)
    logger.debug("Copied %d bytes from %s", written, src)


def stream_stdin(
    stdin: BinaryIO, output, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> None:
    """Copy standard input verbatim to ``output``."""
    written = copy_stream(stdin, output, buffer_size)
    logger.debug("Copied %d bytes from standard input", written)
