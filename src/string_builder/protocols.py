"""Protocols for string_builder.

Defines the contract a user type implements to become appendable
without registering a converter.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteFragment(Protocol):
    """Protocol for objects that know their own byte representation.

    Example:
        >>> class Tag:
        ...     def __init__(self, name: str) -> None:
        ...         self.name = name
        ...
        ...     def to_bytes(self, encoding: str) -> bytes:
        ...         return f"<{self.name}>".encode(encoding)
        >>> Builder().append(Tag("p")).finalize_as_text()
        '<p>'

    """

    def to_bytes(self, encoding: str) -> bytes:
        """Return the bytes to append.

        Args:
            encoding: The builder's text encoding, for text-backed types.

        Must not fail and must not have side effects.
        """
        ...
