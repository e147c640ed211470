"""Builder for O(n) text accumulation from mixed fragments.

Appends the byte form of each fragment to a single bytearray and decodes
once at the end. bytearray growth is amortized, so n appends cost O(n)
total copying instead of the O(n²) of repeated str concatenation.

Validation happens only when the buffer is read back as text. Fragments
that are not valid text on their own (raw bytes, half of a multi-byte
character) are accepted; whether the whole buffer decodes is decided by
finalize_as_text().

Thread Safety:
Builder instances are meant to be owned by one caller.
No internal locking.

"""

from __future__ import annotations

from collections.abc import Iterable

from string_builder.config import BuilderConfig, get_builder_config
from string_builder.errors import EncodingError
from string_builder.fragments import to_bytes
from string_builder.utils.logger import get_logger

logger = get_logger(__name__)


class Builder:
    """Growable text builder accepting str, bytes, single bytes and characters.

    Usage:
            >>> b = Builder()
            >>> b.append("it").append(" ").append(b"works").append(ord("!"))
            Builder(len=9, encoding='utf-8')
            >>> b.finalize_as_text()
            'it works!'

    Thread Safety:
        Not synchronized. Share across threads only behind a lock.

    """

    __slots__ = ("_buffer", "_config")

    def __init__(self, config: BuilderConfig | None = None) -> None:
        """Initialize an empty Builder.

        Args:
            config: Configuration to use (defaults to the active context config)
        """
        self._buffer = bytearray()
        self._config = config if config is not None else get_builder_config()

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def encoding(self) -> str:
        return self._config.encoding

    def append(self, fragment: object) -> Builder:
        """Append a fragment to the builder.

        Args:
            fragment: str, bytes-like, int in 0..255, or any registered type

        Returns:
            self for method chaining
        """
        self._buffer += to_bytes(fragment, self._config.encoding)
        return self

    def extend(self, fragments: Iterable[object]) -> Builder:
        """Append multiple fragments in iteration order.

        Args:
            fragments: Iterable of fragments

        Returns:
            self for method chaining
        """
        encoding = self._config.encoding
        for fragment in fragments:
            self._buffer += to_bytes(fragment, encoding)
        return self

    def len(self) -> int:
        """Return the number of bytes accumulated so far."""
        return len(self._buffer)

    def is_empty(self) -> bool:
        return not self._buffer

    def finalize_as_text(self) -> str:
        """Decode the accumulated bytes as text.

        The buffer is left untouched; further appends continue after it.

        Returns:
            The decoded text

        Raises:
            EncodingError: The buffer is not valid under the builder's encoding
        """
        try:
            return self._buffer.decode(self._config.encoding)
        except UnicodeDecodeError as exc:
            logger.debug(
                "Buffer of %d bytes failed to decode as %s at offset %d: %s",
                len(self._buffer),
                exc.encoding,
                exc.start,
                exc.reason,
            )
            raise EncodingError.from_decode_error(exc) from exc

    def try_finalize_as_text(self) -> str | EncodingError:
        """Decode the accumulated bytes, returning the error instead of raising.

        Example:
            >>> result = Builder().append(b"\\x80").try_finalize_as_text()
            >>> isinstance(result, EncodingError)
            True
        """
        try:
            return self.finalize_as_text()
        except EncodingError as exc:
            return exc

    def finalize_as_bytes(self) -> bytes:
        """Return a copy of the raw accumulated bytes. Never fails."""
        return bytes(self._buffer)

    def clear(self) -> Builder:
        """Discard all accumulated bytes.

        Returns:
            self for method chaining
        """
        self._buffer.clear()
        return self

    def __len__(self) -> int:
        """Return number of bytes (not characters)."""
        return len(self._buffer)

    def __bool__(self) -> bool:
        """Return True if any bytes have been appended."""
        return bool(self._buffer)

    def __repr__(self) -> str:
        return f"Builder(len={len(self._buffer)}, encoding={self._config.encoding!r})"
