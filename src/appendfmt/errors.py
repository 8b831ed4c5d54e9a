"""Exception classes for appendfmt.

Every failure of an append leaves the buffer exactly as it was. Each
exception carries the negative status code returned by append_status(),
so callers that prefer integer results can map between the two.
"""

from __future__ import annotations

from typing import Any

# Status codes of the integer return contract
STATUS_ERROR = -1
STATUS_INVALID_FLAGS = -2


class AppendFormatError(Exception):
    """Base exception for all appendfmt errors.

    Subclass this for specific error categories.
    """

    code: int = STATUS_ERROR


class InvalidFlagsError(AppendFormatError):
    """Unrecognized option flags.

    Raised before the buffer, separator or format are looked at.
    """

    code = STATUS_INVALID_FLAGS

    def __init__(self, flags: Any, unknown: int | None = None) -> None:
        """Initialize invalid flags error.

        Args:
            flags: The flags value that was passed
            unknown: Bits outside the recognized set (None if flags is
                not an int at all)
        """
        self.flags = flags
        self.unknown = unknown

        if unknown is None:
            message = f"flags must be an int, got {type(flags).__name__}"
        else:
            message = f"unrecognized flags {unknown:#x} in {flags!r}"
        super().__init__(message)


class FormatError(AppendFormatError):
    """Error rendering the format and its arguments.

    Raised for bad conversion specifiers, wrong argument count or type,
    and text that cannot be encoded. The underlying exception is chained
    as __cause__.
    """

    pass


class AllocationError(AppendFormatError):
    """The new buffer content could not be allocated."""

    def __init__(self, size: int) -> None:
        """Initialize allocation error.

        Args:
            size: Number of bytes that were requested
        """
        self.size = size
        super().__init__(f"unable to allocate {size} bytes")


class LengthOverflowError(AppendFormatError, OverflowError):
    """The appended result would exceed the configured length bound.

    Also an OverflowError, so generic overflow handlers catch it.
    """

    def __init__(self, required: int, limit: int) -> None:
        """Initialize length overflow error.

        Args:
            required: Size the result would need, terminator included
            limit: Configured maximum (AppendConfig.max_length)
        """
        self.required = required
        self.limit = limit
        super().__init__(f"required size {required} exceeds limit {limit}")


__all__ = [
    "STATUS_ERROR",
    "STATUS_INVALID_FLAGS",
    "AllocationError",
    "AppendFormatError",
    "FormatError",
    "InvalidFlagsError",
    "LengthOverflowError",
]
