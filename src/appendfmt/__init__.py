"""
appendfmt — append a separator and formatted data to a byte buffer

Builds up a message piece by piece with printf-style formats, putting a
separator only between pieces that are actually there, and optionally
stripping trailing CR/LF on the way. A failed append never changes the
buffer. Zero runtime dependencies.

Quick Start:
    >>> from appendfmt import AppendBuffer, append_sep_format
    >>> buf = AppendBuffer()
    >>> append_sep_format(buf, "; ", "%s", "foo")
    3
    >>> append_sep_format(buf, "; ", "_%s_", "qux")
    10
    >>> buf.getvalue()
    b'foo; _qux_'

    >>> # Trim trailing CR/LF before and after
    >>> from appendfmt import append_rm_crlfs_sep_format
    >>> buf = AppendBuffer(b"status: ok\\r\\n")
    >>> append_rm_crlfs_sep_format(buf, ", ", "code %d\\r\\n", 200)
    20
    >>> buf.getvalue()
    b'status: ok, code 200'

Integer Results:
    >>> from appendfmt import append_status
    >>> append_status(buf, 0x80000000, None, "")
    -2
"""

from appendfmt.buffer import AppendBuffer
from appendfmt.config import (
    INT32_MAX,
    AppendConfig,
    append_config_context,
    get_append_config,
    reset_append_config,
    set_append_config,
)
from appendfmt.core import (
    append_flags_sep_format,
    append_format,
    append_rm_crlfs_format,
    append_rm_crlfs_sep_format,
    append_sep_format,
    append_status,
    separator_included,
)
from appendfmt.dump import dump
from appendfmt.errors import (
    STATUS_ERROR,
    STATUS_INVALID_FLAGS,
    AllocationError,
    AppendFormatError,
    FormatError,
    InvalidFlagsError,
    LengthOverflowError,
)
from appendfmt.flags import AppendFlags, validate_flags
from appendfmt.formatting import render
from appendfmt.trim import count_trailing_crlf, trim_crlf

__version__ = "0.1.0"

__all__ = [
    # Buffer
    "AppendBuffer",
    # Append operations
    "append_flags_sep_format",
    "append_format",
    "append_rm_crlfs_format",
    "append_rm_crlfs_sep_format",
    "append_sep_format",
    "append_status",
    "separator_included",
    # Flags
    "AppendFlags",
    "validate_flags",
    # Config
    "INT32_MAX",
    "AppendConfig",
    "append_config_context",
    "get_append_config",
    "reset_append_config",
    "set_append_config",
    # Errors
    "STATUS_ERROR",
    "STATUS_INVALID_FLAGS",
    "AllocationError",
    "AppendFormatError",
    "FormatError",
    "InvalidFlagsError",
    "LengthOverflowError",
    # Helpers
    "count_trailing_crlf",
    "dump",
    "render",
    "trim_crlf",
    "__version__",
]
