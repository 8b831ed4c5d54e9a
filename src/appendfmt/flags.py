"""Option flags for append operations.

Flags are independent bits and combine with ``|``. Unknown bits are rejected
before anything else happens, so a caller passing a flag from a newer version
gets an error instead of a silently different result.

Example:
    >>> from appendfmt.flags import AppendFlags
    >>> flags = AppendFlags.TRIM_CRLF_BEFORE | AppendFlags.SEP_IF_FORMAT_EMPTY
    >>> AppendFlags.TRIM_CRLF_BEFORE in flags
    True
"""

from __future__ import annotations

from enum import IntFlag

from appendfmt.errors import InvalidFlagsError


class AppendFlags(IntFlag):
    """Options accepted by append_flags_sep_format().

    Attributes:
        TRIM_CRLF_BEFORE: Remove all trailing CR and LF from the buffer
            before appending to it
        TRIM_CRLF_AFTER: Remove all trailing CR and LF from the buffer
            after appending to it
        SEP_IF_BUFFER_EMPTY: Append the separator even if the buffer is
            null or empty before the append
        SEP_IF_FORMAT_EMPTY: Append the separator even if the rendered
            text is empty
        TRIM_CRLF_BOTH: TRIM_CRLF_BEFORE | TRIM_CRLF_AFTER
        SEP_ALWAYS: SEP_IF_BUFFER_EMPTY | SEP_IF_FORMAT_EMPTY
        ALL: Every recognized flag. Grows as flags are added.

    """

    NONE = 0
    TRIM_CRLF_BEFORE = 1 << 0
    TRIM_CRLF_AFTER = 1 << 1
    SEP_IF_BUFFER_EMPTY = 1 << 2
    SEP_IF_FORMAT_EMPTY = 1 << 3

    TRIM_CRLF_BOTH = TRIM_CRLF_BEFORE | TRIM_CRLF_AFTER
    SEP_ALWAYS = SEP_IF_BUFFER_EMPTY | SEP_IF_FORMAT_EMPTY
    ALL = TRIM_CRLF_BOTH | SEP_ALWAYS


# Plain int: ~ on an IntFlag member only inverts within the defined bits
_KNOWN_BITS = int(AppendFlags.ALL)


def validate_flags(flags: int) -> AppendFlags:
    """Check flags against the recognized set.

    Args:
        flags: AppendFlags value or plain int bitmask

    Returns:
        The same bits as an AppendFlags

    Raises:
        InvalidFlagsError: If flags is not an int, is negative, or carries
            bits outside AppendFlags.ALL

    """
    # bool is an int subclass; True would silently mean TRIM_CRLF_BEFORE
    if not isinstance(flags, int) or isinstance(flags, bool):
        raise InvalidFlagsError(flags)
    bits = int(flags)
    unknown = bits & ~_KNOWN_BITS
    if bits < 0 or unknown:
        raise InvalidFlagsError(bits, unknown=unknown)
    return AppendFlags(bits)


__all__ = [
    "AppendFlags",
    "validate_flags",
]
