"""Concatenate files to standard output, the way Unix ``cat`` does."""

from __future__ import annotations

from typing import BinaryIO

from .errors import OutputClosedError, ReadFailureError, WriteFailureError

DEFAULT_BUFFER_SIZE = 32 * 1024


def _write_failure(e: BaseException) -> WriteFailureError:
    if isinstance(e, BrokenPipeError):
        return OutputClosedError(str(e))
    return WriteFailureError(str(e))


def copy_stream(src: BinaryIO, dst, buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """Copy every byte from ``src`` to ``dst`` until end of file.

    Each chunk is passed on as soon as it is read: ``read1`` is used when the
    source has it, and the sink is flushed after every chunk when it has a
    ``flush`` method.

    Args:
        src: Binary stream to read from.
        dst: Sink with a ``write(bytes)`` method.
        buffer_size: Maximum number of bytes read per call.

    Returns:
        Total number of bytes written.

    Raises:
        ReadFailureError: If reading ``src`` fails.
        OutputClosedError: If the reading end of the sink's pipe is gone.
        WriteFailureError: If the sink raises, or accepts only part of a
            chunk. Bytes already accepted stay in the sink.
    """
    read = getattr(src, "read1", src.read)
    flush = getattr(dst, "flush", None)

    written = 0
    while True:
        try:
            chunk = read(buffer_size)
        except OSError as e:
            raise ReadFailureError(str(e)) from e
        if not chunk:
            return written

        try:
            n = dst.write(chunk)
            if flush is not None:
                flush()
        except (OSError, EOFError, ValueError) as e:
            raise _write_failure(e) from e
        # Plain file-like objects return None from write()
        if n is None:
            n = len(chunk)
        written += n
        if n < len(chunk):
            raise WriteFailureError("short write")
