"""Exception hierarchy and message formatting tests."""

import pytest

from string_builder.errors import (
    ConfigError,
    EncodingError,
    FragmentValueError,
    StringBuilderError,
    UnsupportedFragmentError,
)

# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    """Every package error is catchable as StringBuilderError."""

    @pytest.mark.parametrize(
        ("error_cls", "builtin"),
        [
            (EncodingError, ValueError),
            (UnsupportedFragmentError, TypeError),
            (FragmentValueError, ValueError),
            (ConfigError, ValueError),
        ],
    )
    def test_subclasses(self, error_cls: type, builtin: type) -> None:
        assert issubclass(error_cls, StringBuilderError)
        assert issubclass(error_cls, builtin)

    def test_encoding_error_is_not_unicode_error(self) -> None:
        assert not issubclass(EncodingError, UnicodeError)


# =========================================================================
# EncodingError construction and formatting
# =========================================================================


class TestEncodingErrorFormatting:
    """EncodingError carries the failing range and formats it."""

    def test_attributes(self) -> None:
        err = EncodingError("utf-8", b"ab\x80", 2, 3, "invalid start byte")
        assert err.encoding == "utf-8"
        assert err.data == b"ab\x80"
        assert err.start == 2
        assert err.end == 3
        assert err.reason == "invalid start byte"

    def test_message(self) -> None:
        err = EncodingError("utf-8", b"ab\x80", 2, 3, "invalid start byte")
        assert str(err) == "'utf-8' cannot decode bytes [80] at offset 2: invalid start byte"

    def test_message_multi_byte_range(self) -> None:
        err = EncodingError("utf-16-le", b"\x00\xd8\x41", 0, 2, "illegal encoding")
        assert "[00 d8]" in str(err)

    def test_from_decode_error(self) -> None:
        try:
            b"ok\xc3".decode("utf-8")
        except UnicodeDecodeError as exc:
            err = EncodingError.from_decode_error(exc)
        else:
            pytest.fail("expected UnicodeDecodeError")

        assert err.start == 2
        assert err.data == b"ok\xc3"
        assert err.reason == "unexpected end of data"


class TestOtherErrors:
    """Messages of the programming-error classes."""

    def test_unsupported_fragment_message(self) -> None:
        err = UnsupportedFragmentError(float)
        assert err.fragment_type is float
        assert str(err) == "Cannot append fragment of type 'float'"

    def test_config_error_message(self) -> None:
        err = ConfigError("encoding", "unknown encoding 'x'")
        assert err.option == "encoding"
        assert str(err) == "Option 'encoding': unknown encoding 'x'"
