"""printf-style rendering of a format and its arguments to bytes.

Rendering uses Python's bytes ``%`` operator (PEP 461), so the usual
conversions work: ``%s``, ``%d``, ``%x``, ``%5.2f``, ``%c``, ``%%``, ``%*d``
and ``%(name)s`` with a single mapping argument. str formats and str
arguments are encoded first with the active AppendConfig encoding, so
``%s`` accepts both str and bytes.

Arguments are captured into a tuple once and rendered once; there is no
separate measuring pass whose length could disagree with the render.

Example:
    >>> render(b"_%s_", ("qux",))
    b'_qux_'
    >>> render("%d items", (3,))
    b'3 items'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from appendfmt.config import get_append_config
from appendfmt.errors import AllocationError, FormatError


def to_bytes(value: str | bytes | bytearray | memoryview, encoding: str, errors: str) -> bytes:
    """Encode str, copy bytes-like values.

    Raises:
        FormatError: If a str cannot be encoded, or value is not text at all
    """
    if isinstance(value, str):
        try:
            return value.encode(encoding, errors)
        except (UnicodeError, LookupError) as exc:
            raise FormatError(f"cannot encode {value!r} as {encoding}") from exc
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise FormatError(f"expected str or bytes, got {type(value).__name__}")


def _encode_arg(value: Any, encoding: str, errors: str) -> Any:
    # bytes % only takes bytes-like objects for %s
    if isinstance(value, str):
        return to_bytes(value, encoding, errors)
    return value


def capture_args(args: tuple[Any, ...], encoding: str, errors: str) -> tuple[Any, ...] | Mapping[Any, Any]:
    """Freeze arguments for rendering.

    A single Mapping argument is kept as a mapping so ``%(name)s`` works;
    anything else becomes a tuple of positional arguments. str keys are
    encoded too, since bytes ``%`` looks names up as bytes.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return {
            _encode_arg(k, encoding, errors): _encode_arg(v, encoding, errors)
            for k, v in args[0].items()
        }
    return tuple(_encode_arg(a, encoding, errors) for a in args)


def render(
    format: str | bytes,
    args: tuple[Any, ...] = (),
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> bytes:
    """Render format with args to bytes.

    Args:
        format: printf-style format, str or bytes
        args: Positional arguments, or a 1-tuple holding a mapping
        encoding: Codec for str values (default: active AppendConfig)
        errors: Codec error handler (default: active AppendConfig)

    Returns:
        The rendered bytes

    Raises:
        FormatError: Bad specifier, wrong argument count or type, or text
            that cannot be encoded
        AllocationError: Out of memory while rendering
    """
    if encoding is None or errors is None:
        config = get_append_config()
        encoding = encoding or config.encoding
        errors = errors or config.errors

    fmt = to_bytes(format, encoding, errors)
    captured = capture_args(args, encoding, errors)

    # A format without arguments is still interpreted, so b"100%%" renders
    # as b"100%" and a stray b"%" is an error, as with printf.
    try:
        return fmt % captured
    except MemoryError as exc:
        raise AllocationError(len(fmt)) from exc
    except (TypeError, ValueError, KeyError, OverflowError) as exc:
        raise FormatError(f"cannot render format {fmt!r}: {exc}") from exc


__all__ = ["capture_args", "render", "to_bytes"]
