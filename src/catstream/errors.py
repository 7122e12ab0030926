"""Error types raised while streaming files.

The message of every error is what the CLI prints after the program name,
e.g. ``cat: notes.txt: No such file or directory``.
"""

from __future__ import annotations


class CatError(Exception):
    """Base class for per-file failures; processing continues with the next file."""


class NotFoundError(CatError):
    """The path's metadata could not be read."""


class IsDirectoryError(CatError):
    """The path names a directory."""


class CannotOpenError(CatError):
    """The (possibly link-resolved) path could not be opened for reading."""


class WriteFailureError(CatError):
    """The output sink rejected a write. Wraps the sink's own error."""


class ReadFailureError(CatError):
    """Reading an already opened source failed."""


class OutputClosedError(WriteFailureError):
    """The reader at the other end of the output pipe went away."""
