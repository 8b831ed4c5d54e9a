"""Error-path tests.

Every failing append must leave the buffer exactly as it was: same
content, same storage object.
"""

import pytest

from appendfmt import (
    STATUS_ERROR,
    STATUS_INVALID_FLAGS,
    AllocationError,
    AppendBuffer,
    AppendConfig,
    AppendFlags,
    AppendFormatError,
    FormatError,
    InvalidFlagsError,
    LengthOverflowError,
    append_config_context,
    append_flags_sep_format,
    append_format,
    append_status,
)


def _assert_untouched(buf: AppendBuffer, storage: object, content: bytes | None) -> None:
    assert buf._data is storage
    assert buf.getvalue() == content


# =========================================================================
# Invalid flags
# =========================================================================


class TestInvalidFlags:
    """Unrecognized flags are rejected before anything else."""

    def test_high_bit(self) -> None:
        buf = AppendBuffer(b"foo")
        storage = buf._data
        with pytest.raises(InvalidFlagsError) as exc_info:
            append_flags_sep_format(buf, 0x80000000, "; ", "bar")
        assert exc_info.value.unknown == 0x80000000
        _assert_untouched(buf, storage, b"foo")

    def test_next_unassigned_bit(self) -> None:
        with pytest.raises(InvalidFlagsError):
            append_flags_sep_format(None, int(AppendFlags.ALL) + 1, None, "")

    def test_negative(self) -> None:
        with pytest.raises(InvalidFlagsError):
            append_flags_sep_format(None, -1, None, "")

    @pytest.mark.parametrize("flags", [True, "1", 1.0, None])
    def test_not_an_int(self, flags) -> None:
        with pytest.raises(InvalidFlagsError) as exc_info:
            append_flags_sep_format(None, flags, None, "")
        assert exc_info.value.unknown is None

    def test_checked_before_format(self) -> None:
        """A broken format is not looked at when the flags are bad."""
        with pytest.raises(InvalidFlagsError):
            append_flags_sep_format(None, 0x100, None, "%")

    def test_null_buffer_stays_null(self) -> None:
        buf = AppendBuffer()
        with pytest.raises(InvalidFlagsError):
            append_flags_sep_format(buf, 0x40, None, "bar")
        assert buf.is_null

    def test_status_code(self) -> None:
        assert append_status(None, 0x80000000, None, "") == STATUS_INVALID_FLAGS == -2

    def test_message_names_bits(self) -> None:
        err = InvalidFlagsError(0x30, unknown=0x30)
        assert "0x30" in str(err)


# =========================================================================
# Format errors
# =========================================================================


class TestFormatErrors:
    """Formats that cannot be rendered."""

    @pytest.mark.parametrize(
        ("format", "args"),
        [
            ("%s", ()),
            ("%d", ("x",)),
            ("100%", ()),
            ("%s %s", ("a",)),
            ("bar", ("unused",)),
            ("%(name)s", ({"other": "x"},)),
            (b"%s", (object(),)),
        ],
    )
    def test_bad_format_raises(self, format, args) -> None:
        buf = AppendBuffer(b"foo\r\n")
        storage = buf._data
        with pytest.raises(FormatError):
            append_flags_sep_format(buf, AppendFlags.ALL, "; ", format, *args)
        _assert_untouched(buf, storage, b"foo\r\n")

    def test_cause_is_chained(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            append_format(None, "%d", "x")
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_unencodable_text(self) -> None:
        buf = AppendBuffer(b"foo")
        with append_config_context(AppendConfig(encoding="ascii")):
            with pytest.raises(FormatError) as exc_info:
                append_format(buf, "caf\xe9")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
        assert buf.getvalue() == b"foo"

    def test_unencodable_separator(self) -> None:
        buf = AppendBuffer(b"foo")
        with append_config_context(AppendConfig(encoding="ascii")):
            with pytest.raises(FormatError):
                append_flags_sep_format(buf, 0, "•", "bar")
        assert buf.getvalue() == b"foo"

    def test_status_code(self) -> None:
        buf = AppendBuffer(b"foo")
        assert append_status(buf, 0, None, "%s") == STATUS_ERROR == -1
        assert buf.getvalue() == b"foo"


# =========================================================================
# Length overflow
# =========================================================================


class TestLengthOverflow:
    """Results above AppendConfig.max_length are refused."""

    def test_exceeds_limit(self) -> None:
        buf = AppendBuffer(b"foo")
        storage = buf._data
        # 3 + 2 + 3 + 1 terminator = 9
        with append_config_context(AppendConfig(max_length=8)):
            with pytest.raises(LengthOverflowError) as exc_info:
                append_flags_sep_format(buf, 0, "; ", "bar")
        assert exc_info.value.required == 9
        assert exc_info.value.limit == 8
        _assert_untouched(buf, storage, b"foo")

    def test_exactly_at_limit(self) -> None:
        buf = AppendBuffer(b"foo")
        with append_config_context(AppendConfig(max_length=9)):
            assert append_flags_sep_format(buf, 0, "; ", "bar") == 8

    def test_limit_counts_untrimmed_length(self) -> None:
        """The bound applies before trimming shortens the result."""
        buf = AppendBuffer(b"foo\r\n")
        with append_config_context(AppendConfig(max_length=7)):
            with pytest.raises(LengthOverflowError):
                append_flags_sep_format(buf, AppendFlags.TRIM_CRLF_BOTH, None, "b\n")
        assert buf.getvalue() == b"foo\r\n"

    def test_default_limit_is_int32(self) -> None:
        assert AppendConfig().max_length == 2**31 - 1

    def test_is_builtin_overflow_error(self) -> None:
        err = LengthOverflowError(10, 5)
        assert isinstance(err, OverflowError)
        assert isinstance(err, AppendFormatError)

    def test_status_code(self) -> None:
        with append_config_context(AppendConfig(max_length=2)):
            assert append_status(None, 0, None, "abc") == -1


# =========================================================================
# Allocation failure
# =========================================================================


class TestAllocationFailure:
    """MemoryError while building the result."""

    @pytest.fixture
    def no_memory(self, monkeypatch):
        def fail(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr("appendfmt.core.bytearray", fail, raising=False)

    def test_raises_allocation_error(self, no_memory) -> None:
        buf = AppendBuffer(b"foo\r\n")
        storage = buf._data
        with pytest.raises(AllocationError) as exc_info:
            append_flags_sep_format(buf, AppendFlags.TRIM_CRLF_BEFORE, "; ", "bar")
        assert exc_info.value.size == 11
        assert isinstance(exc_info.value.__cause__, MemoryError)
        _assert_untouched(buf, storage, b"foo\r\n")

    def test_status_code(self, no_memory) -> None:
        buf = AppendBuffer(b"foo")
        assert append_status(buf, 0, None, "bar") == -1
        assert buf.getvalue() == b"foo"


class TestHierarchy:
    """All errors share a base class and carry a status code."""

    @pytest.mark.parametrize(
        ("err", "code"),
        [
            (InvalidFlagsError(0x10, unknown=0x10), -2),
            (FormatError("bad"), -1),
            (AllocationError(10), -1),
            (LengthOverflowError(10, 5), -1),
        ],
    )
    def test_codes(self, err: AppendFormatError, code: int) -> None:
        assert isinstance(err, AppendFormatError)
        assert err.code == code
