"""Line-oriented reading from a buffered binary stream."""

import io

from .errors import FontIOError, NotEnoughData


def peekable(stream):
    """Return a stream supporting peek(), wrapping it if needed."""
    if hasattr(stream, "peek"):
        return stream
    return io.BufferedReader(stream)


def has_data(source) -> bool:
    """Check whether any unread bytes remain in the source."""
    try:
        return len(source.peek(1)) > 0
    except OSError as exc:
        raise FontIOError(f"failed to read font data: {exc}") from exc


def read_line(source, lenient: bool = False) -> bytes:
    """
    Read one line and strip its terminator (\\r\\n or \\n).

    In strict mode a line without terminator raises NotEnoughData. In
    lenient mode the end of the stream is accepted as a terminator, as long
    as at least one byte was read.
    """
    try:
        line = source.readline()
    except OSError as exc:
        raise FontIOError(f"failed to read font data: {exc}") from exc

    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    if lenient and line:
        return line
    raise NotEnoughData("unexpected end of font data")
