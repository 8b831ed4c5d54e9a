"""AppendBuffer: an owned, growable byte buffer for repeated appends.

The buffer distinguishes "null" (no content yet) from "empty" (zero bytes).
Append functions never mutate the stored bytes in place: they build the new
content separately and hand it over with commit(), so a failed append
leaves both the content and the storage object untouched.

Thread Safety:
    Not thread-safe. One buffer is meant for one caller at a time.

"""

from __future__ import annotations

from appendfmt.config import get_append_config
from appendfmt.dump import dump as dump_bytes


class AppendBuffer:
    """Growable byte string that may also be null.

    Usage:
            >>> from appendfmt import AppendBuffer, append_sep_format
            >>> buf = AppendBuffer()
            >>> buf.is_null
            True
            >>> append_sep_format(buf, "; ", "%s", "foo")
            3
            >>> append_sep_format(buf, "; ", "%s", "bar")
            8
            >>> buf.getvalue()
            b'foo; bar'

    """

    __slots__ = ("_data",)

    def __init__(self, initial: bytes | bytearray | str | None = None) -> None:
        """Initialize buffer.

        Args:
            initial: Starting content. None means a null buffer; str is
                encoded with the active AppendConfig encoding.
        """
        self._data: bytearray | None
        if initial is None:
            self._data = None
        elif isinstance(initial, str):
            config = get_append_config()
            self._data = bytearray(initial.encode(config.encoding, config.errors))
        else:
            self._data = bytearray(initial)

    @property
    def is_null(self) -> bool:
        """True until the buffer holds content, even empty content."""
        return self._data is None

    def getvalue(self) -> bytes | None:
        """Return a copy of the content, or None for a null buffer."""
        if self._data is None:
            return None
        return bytes(self._data)

    def view(self) -> memoryview:
        """Return a read-only view of the content (empty for null)."""
        if self._data is None:
            return memoryview(b"")
        return memoryview(self._data).toreadonly()

    def text(self, encoding: str | None = None, errors: str = "strict") -> str | None:
        """Decode the content, or None for a null buffer."""
        if self._data is None:
            return None
        return self._data.decode(encoding or get_append_config().encoding, errors)

    def commit(self, data: bytearray) -> int:
        """Replace the content with data, taking ownership of it.

        Returns:
            New content length
        """
        self._data = data
        return len(data)

    def clear(self) -> AppendBuffer:
        """Reset to the null state.

        Returns:
            self for method chaining
        """
        self._data = None
        return self

    def dump(self, text: str = "buffer", *, nohex: bool = False) -> str:
        """Hex/ASCII dump of the content for diagnostics."""
        return dump_bytes(text, self.view(), nohex=nohex)

    def __len__(self) -> int:
        """Return content length in bytes (0 for null)."""
        return 0 if self._data is None else len(self._data)

    def __bool__(self) -> bool:
        """Return True if the buffer holds at least one byte."""
        return bool(self._data)

    def __bytes__(self) -> bytes:
        return b"" if self._data is None else bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AppendBuffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray)):
            return self._data is not None and self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._data is None:
            return "AppendBuffer(None)"
        return f"AppendBuffer({bytes(self._data)!r})"
