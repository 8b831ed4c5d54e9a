"""Trailing CR/LF trimming on raw bytes.

Only 0x0D and 0x0A count. A trailing run may mix them in any order,
so b"foo\\r\\n\\r" trims to b"foo".
"""

from __future__ import annotations

CRLF = b"\r\n"


def count_trailing_crlf(data: bytes | bytearray | memoryview, end: int | None = None) -> int:
    """Count the CR and LF bytes at the end of data[:end].

    Stops at the first byte that is neither CR nor LF, or at the start.

    Examples:
        >>> count_trailing_crlf(b"foo\\r\\n\\r")
        3
        >>> count_trailing_crlf(b"\\n\\n")
        2
        >>> count_trailing_crlf(b"foo\\r\\n", end=3)
        0
    """
    # Released on exit so a bytearray argument can be resized afterwards
    with memoryview(data) as view:
        pos = len(view) if end is None else len(range(len(view))[:end])
        count = 0
        while pos > 0 and view[pos - 1] in (0x0D, 0x0A):
            pos -= 1
            count += 1
    return count


def trim_crlf(data: bytes | bytearray) -> bytes:
    """Return data without its trailing CR/LF run.

    Trimming is idempotent: trim_crlf(trim_crlf(x)) == trim_crlf(x).
    """
    return bytes(data).rstrip(CRLF)


__all__ = ["CRLF", "count_trailing_crlf", "trim_crlf"]
