"""Exception classes for string_builder.

Accumulation itself never fails. The only runtime error a caller must
handle is EncodingError, raised when the buffer is read back as text.
The remaining classes signal programming mistakes (wrong fragment type,
bad configuration).
"""

from __future__ import annotations


class StringBuilderError(Exception):
    """Base exception for all string_builder errors.

    Subclass this for specific error categories.
    """

    pass


class EncodingError(StringBuilderError, ValueError):
    """Accumulated bytes are not valid text under the builder's encoding.

    Raised by Builder.finalize_as_text(). The raw bytes are still
    available through Builder.finalize_as_bytes().
    """

    def __init__(
        self,
        encoding: str,
        data: bytes,
        start: int,
        end: int,
        reason: str,
    ) -> None:
        """Initialize encoding error with the failing byte range.

        Args:
            encoding: Codec name the buffer was decoded with
            data: The full buffer that failed to decode
            start: Offset of the first invalid byte (0-indexed)
            end: Offset just past the invalid range
            reason: Codec-provided description of the failure
        """
        self.encoding = encoding
        self.data = data
        self.start = start
        self.end = end
        self.reason = reason

        offending = data[start:end].hex(" ")
        super().__init__(
            f"'{encoding}' cannot decode bytes [{offending}] at offset {start}: {reason}"
        )

    @classmethod
    def from_decode_error(cls, exc: UnicodeDecodeError) -> EncodingError:
        """Build from the codec's UnicodeDecodeError."""
        return cls(
            encoding=exc.encoding,
            data=bytes(exc.object),
            start=exc.start,
            end=exc.end,
            reason=exc.reason,
        )


class UnsupportedFragmentError(StringBuilderError, TypeError):
    """Value of a type that has no registered byte conversion.

    Register a converter with register_fragment() or implement the
    ByteFragment protocol to make a type appendable.
    """

    def __init__(self, fragment_type: type) -> None:
        self.fragment_type = fragment_type
        super().__init__(
            f"Cannot append fragment of type '{fragment_type.__qualname__}'"
        )


class FragmentValueError(StringBuilderError, ValueError):
    """Fragment of a supported type whose value has no byte form.

    Raised for integer fragments outside 0..255.
    """

    pass


class ConfigError(StringBuilderError, ValueError):
    """Invalid builder configuration."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending BuilderConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
