"""Fragment-to-bytes conversion.

Every value appended to a Builder passes through to_bytes(), a single
dispatch function keyed on the fragment's type. Built-in conversions:

- str: encoded with the builder's encoding. A one-character str is the
  single-character case (1-4 bytes under UTF-8).
- bytes, bytearray, memoryview: copied as-is, no validation.
- int in 0..255: a single raw byte.
- anything implementing ByteFragment: its own to_bytes(encoding).

New kinds are added with register_fragment() and never require changes
to Builder:

    >>> @register_fragment(Path)
    ... def _path_to_bytes(path: Path, encoding: str) -> bytes:
    ...     return os.fsencode(path)

"""

from __future__ import annotations

from collections.abc import Callable
from functools import singledispatch
from typing import TypeVar

from string_builder.config import DEFAULT_ENCODING
from string_builder.errors import FragmentValueError, UnsupportedFragmentError
from string_builder.protocols import ByteFragment

T = TypeVar("T")

# Lone surrogates still produce bytes; finalize_as_text() rejects them.
_TEXT_ERRORS = "surrogatepass"


@singledispatch
def _convert(fragment: object, encoding: str) -> bytes:
    if isinstance(fragment, ByteFragment):
        return bytes(fragment.to_bytes(encoding))
    raise UnsupportedFragmentError(type(fragment))


@_convert.register
def _(fragment: str, encoding: str) -> bytes:
    return fragment.encode(encoding, _TEXT_ERRORS)


@_convert.register(bytes)
@_convert.register(bytearray)
@_convert.register(memoryview)
def _(fragment: bytes | bytearray | memoryview, encoding: str) -> bytes:
    return bytes(fragment)


@_convert.register
def _(fragment: int, encoding: str) -> bytes:
    # bool is an int subclass but never a meaningful byte
    if isinstance(fragment, bool):
        raise UnsupportedFragmentError(bool)
    if not 0 <= fragment <= 0xFF:
        raise FragmentValueError(f"Byte fragment must be in 0..255, got {fragment}")
    return bytes((fragment,))


def to_bytes(fragment: object, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Convert a fragment to the bytes a Builder would append.

    Args:
        fragment: Any supported fragment value
        encoding: Text encoding for str fragments

    Returns:
        An independent bytes copy of the fragment's byte representation

    Raises:
        UnsupportedFragmentError: No conversion is registered for the type
        FragmentValueError: int fragment outside 0..255

    Examples:
        >>> to_bytes("it")
        b'it'
        >>> to_bytes("Æ")
        b'\\xc3\\x86'
        >>> to_bytes(0x80)
        b'\\x80'
    """
    return _convert(fragment, encoding)


def register_fragment(cls: type) -> Callable[[Callable[[T, str], bytes]], Callable[[T, str], bytes]]:
    """Register a byte conversion for ``cls`` and its subclasses.

    The decorated function receives ``(fragment, encoding)`` and must
    return bytes without side effects. Registering a type that already
    has a converter replaces it.

    Example:
        >>> @register_fragment(Decimal)
        ... def _decimal_to_bytes(value: Decimal, encoding: str) -> bytes:
        ...     return str(value).encode(encoding)
    """

    def decorator(func: Callable[[T, str], bytes]) -> Callable[[T, str], bytes]:
        _convert.register(cls, func)
        return func

    return decorator


def is_fragment(value: object) -> bool:
    """Return True if ``value`` is of a kind to_bytes() can convert.

    Checks the type only; an int outside 0..255 still reports True.
    """
    impl = _convert.dispatch(type(value))
    if impl is _convert.dispatch(object):
        return isinstance(value, ByteFragment)
    return not isinstance(value, bool)


__all__ = [
    "is_fragment",
    "register_fragment",
    "to_bytes",
]
