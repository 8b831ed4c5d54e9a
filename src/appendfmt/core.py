"""Append a separator and formatted data to a buffer.

    append_format(buf, "%s", "foo")
    append_sep_format(buf, "; ", "%s", "foo")
    append_rm_crlfs_format(buf, "%s", "asdf")
    append_rm_crlfs_sep_format(buf, "; ", "%s", "asdf")

The separator is skipped when the buffer is null or empty, or when the
rendered text is empty. SEP_IF_BUFFER_EMPTY and SEP_IF_FORMAT_EMPTY
override each half of that rule.

Pass None instead of a buffer to get the length the result would have,
without writing anything.

Success returns the new content length. Failure raises an
AppendFormatError subclass and leaves the buffer as it was; the new content
is built in a scratch bytearray and committed only after every step has
succeeded. append_status() offers the integer contract instead: the length
on success, -1 for format/allocation/overflow errors, -2 for bad flags.
"""

from __future__ import annotations

from typing import Any

from appendfmt.buffer import AppendBuffer
from appendfmt.config import get_append_config
from appendfmt.errors import AllocationError, AppendFormatError, LengthOverflowError
from appendfmt.flags import AppendFlags, validate_flags
from appendfmt.formatting import render, to_bytes
from appendfmt.trim import count_trailing_crlf
from appendfmt.utils.logger import get_logger

logger = get_logger(__name__)

Separator = str | bytes | bytearray | None


def separator_included(sep: Separator, buffer_empty: bool, rendered_empty: bool, flags: int) -> bool:
    """Apply the separator-suppression rule.

    Included only if a separator was given, the buffer has content (or
    SEP_IF_BUFFER_EMPTY), and the rendered text is non-empty (or
    SEP_IF_FORMAT_EMPTY).
    """
    return (
        sep is not None
        and (not buffer_empty or bool(flags & AppendFlags.SEP_IF_BUFFER_EMPTY))
        and (not rendered_empty or bool(flags & AppendFlags.SEP_IF_FORMAT_EMPTY))
    )


def append_flags_sep_format(
    buffer: AppendBuffer | None,
    flags: int,
    sep: Separator,
    format: str | bytes,
    *args: Any,
) -> int:
    """Append sep and the rendered format to buffer.

    Args:
        buffer: Buffer to append to, or None to only compute the length
        flags: AppendFlags (or int bitmask)
        sep: Separator, or None for no separator
        format: printf-style format, str or bytes
        *args: Format arguments (or one mapping for %(name)s formats)

    Returns:
        New content length (or, if buffer is None, the length it would have)

    Raises:
        InvalidFlagsError: Unrecognized flags; checked before anything else
        FormatError: The format could not be rendered
        LengthOverflowError: Result would exceed AppendConfig.max_length
        AllocationError: Out of memory building the result

    """
    flags = validate_flags(flags)
    config = get_append_config()

    rendered = render(format, args, encoding=config.encoding, errors=config.errors)
    old = buffer.view() if buffer is not None else memoryview(b"")
    oldlen = len(old)

    if separator_included(sep, oldlen == 0, not rendered, flags):
        sep_bytes = to_bytes(sep, config.encoding, config.errors)  # type: ignore[arg-type]
    else:
        sep_bytes = b""

    # One extra byte for the terminator a C caller would need
    required = oldlen + len(sep_bytes) + len(rendered) + 1
    if required > config.max_length:
        logger.debug("append of %d bytes exceeds limit %d", required, config.max_length)
        raise LengthOverflowError(required, config.max_length)

    keep = oldlen
    if flags & AppendFlags.TRIM_CRLF_BEFORE and oldlen:
        keep -= count_trailing_crlf(old)

    try:
        scratch = bytearray(keep + len(sep_bytes) + len(rendered))
    except MemoryError as exc:
        logger.debug("allocation of %d bytes failed", required)
        raise AllocationError(required) from exc

    pos = keep
    scratch[:pos] = old[:keep]
    scratch[pos : pos + len(sep_bytes)] = sep_bytes
    pos += len(sep_bytes)
    scratch[pos:] = rendered

    if flags & AppendFlags.TRIM_CRLF_AFTER and scratch:
        trailing = count_trailing_crlf(scratch)
        if trailing:
            del scratch[-trailing:]

    if buffer is None:
        return len(scratch)
    return buffer.commit(scratch)


def append_sep_format(buffer: AppendBuffer | None, sep: Separator, format: str | bytes, *args: Any) -> int:
    """Same as append_flags_sep_format() with no flags."""
    return append_flags_sep_format(buffer, AppendFlags.NONE, sep, format, *args)


def append_rm_crlfs_sep_format(
    buffer: AppendBuffer | None, sep: Separator, format: str | bytes, *args: Any
) -> int:
    """Same as append_sep_format() but trims trailing CR/LF before and after."""
    return append_flags_sep_format(buffer, AppendFlags.TRIM_CRLF_BOTH, sep, format, *args)


def append_format(buffer: AppendBuffer | None, format: str | bytes, *args: Any) -> int:
    """Same as append_flags_sep_format() with no flags and no separator."""
    return append_flags_sep_format(buffer, AppendFlags.NONE, None, format, *args)


def append_rm_crlfs_format(buffer: AppendBuffer | None, format: str | bytes, *args: Any) -> int:
    """Same as append_format() but trims trailing CR/LF before and after."""
    return append_flags_sep_format(buffer, AppendFlags.TRIM_CRLF_BOTH, None, format, *args)


def append_status(
    buffer: AppendBuffer | None,
    flags: int,
    sep: Separator,
    format: str | bytes,
    *args: Any,
) -> int:
    """append_flags_sep_format() with an integer result instead of exceptions.

    Returns:
        New length on success, -1 on a format, allocation or overflow
        error, -2 on unrecognized flags. The buffer is unchanged on failure.
    """
    try:
        return append_flags_sep_format(buffer, flags, sep, format, *args)
    except AppendFormatError as exc:
        logger.debug("append failed with status %d: %s", exc.code, exc)
        return exc.code


__all__ = [
    "append_flags_sep_format",
    "append_format",
    "append_rm_crlfs_format",
    "append_rm_crlfs_sep_format",
    "append_sep_format",
    "append_status",
    "separator_included",
]
