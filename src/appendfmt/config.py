"""ContextVar-based append configuration.

Provides context-local configuration using Python's ContextVars (PEP 567).
The append functions read the active config on every call; nothing is
cached between calls.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so setting a config in one thread never changes another thread's appends.

Usage:
    import sys

    from appendfmt import append_format
    from appendfmt.config import (
        AppendConfig,
        append_config_context,
        reset_append_config,
        set_append_config,
    )

    # Allow results longer than the 32-bit signed bound
    with append_config_context(AppendConfig(max_length=sys.maxsize)):
        append_format(buf, b"%s", big)

    # Render str formats as Latin-1 instead of UTF-8
    set_append_config(AppendConfig(encoding="latin-1"))
    try:
        append_format(buf, "caf\xe9")
    finally:
        reset_append_config()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Largest value of a 32-bit signed int; the size bound inherited from C callers
INT32_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class AppendConfig:
    """Immutable append configuration.

    Attributes:
        max_length: Upper bound on the size an append may require, counting
            one byte for the terminator. Defaults to INT32_MAX so results stay
            representable as a 32-bit signed length.
        encoding: Codec for str formats, separators and %s arguments
        errors: Codec error handler ("strict" turns bad text into FormatError)

    """

    max_length: int = INT32_MAX
    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self) -> None:
        if self.max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {self.max_length}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AppendConfig":
        """Create AppendConfig from dictionary.

        Only includes keys that are valid AppendConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                AppendConfig attribute names.

        Returns:
            New AppendConfig instance with values from dict.

        Example:
            >>> config = AppendConfig.from_dict({
            ...     "max_length": 4096,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_length
            4096

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AppendConfig = AppendConfig()

_append_config: ContextVar[AppendConfig] = ContextVar(
    "append_config",
    default=_DEFAULT_CONFIG,
)


def get_append_config() -> AppendConfig:
    """Get current append configuration (context-local).

    Returns:
        The active AppendConfig for this thread/context.

    """
    return _append_config.get()


def set_append_config(config: AppendConfig) -> None:
    """Set append configuration for current context.

    Args:
        config: AppendConfig instance to use for this context.

    """
    _append_config.set(config)


def reset_append_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _append_config.set(_DEFAULT_CONFIG)


@contextmanager
def append_config_context(config: AppendConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: AppendConfig to use within the context.

    Yields:
        None

    Example:
        >>> with append_config_context(AppendConfig(max_length=16)):
        ...     append_format(buf, b"%s", b"x" * 32)  # LengthOverflowError
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _append_config.get()
    _append_config.set(config)
    try:
        yield
    finally:
        _append_config.set(previous)


__all__ = [
    "INT32_MAX",
    "AppendConfig",
    "append_config_context",
    "get_append_config",
    "reset_append_config",
    "set_append_config",
]
