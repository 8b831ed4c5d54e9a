"""Hex/ASCII dump of byte buffers for diagnostics.

Same layout as the debug dump in curl's docs/examples/debug.c: a header
with the size in decimal and hex, then one row per 16 bytes with the
offset, the hex bytes and the printable characters. With nohex=True rows
hold 64 characters and a CR LF pair starts a new row.

Example:
    >>> print(dump("buf", b"foo\\r\\n"), end="")
    buf, 0000000005 bytes (0x00000005)
    0000: 66 6f 6f 0d 0a                                  foo..
"""

from __future__ import annotations

_WIDTH = 0x10
_WIDTH_NOHEX = 0x40


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x80 else "."


def dump(text: str, data: bytes | bytearray | memoryview, *, nohex: bool = False) -> str:
    """Render data as a dump string, one line per row.

    Args:
        text: Label for the header line
        data: Bytes to dump
        nohex: Omit the hex column and break rows at CR LF

    Returns:
        The dump, newline-terminated
    """
    data = bytes(data)
    size = len(data)
    width = _WIDTH_NOHEX if nohex else _WIDTH
    lines = [f"{text}, {size:010d} bytes (0x{size:08x})"]

    i = 0
    while i < size:
        row = [f"{i:04x}: "]
        if not nohex:
            for c in range(width):
                row.append(f"{data[i + c]:02x} " if i + c < size else "   ")

        next_row = i + width
        for c in range(min(width, size - i)):
            # CR LF ends the row; skip past it
            if nohex and i + c + 1 < size and data[i + c] == 0x0D and data[i + c + 1] == 0x0A:
                next_row = i + c + 2
                break
            row.append(_printable(data[i + c]))
            # Check again so a CR LF right at the row width doesn't add a blank row
            if nohex and i + c + 2 < size and data[i + c + 1] == 0x0D and data[i + c + 2] == 0x0A:
                next_row = i + c + 3
                break

        lines.append("".join(row))
        i = next_row

    return "\n".join(lines) + "\n"


__all__ = ["dump"]
