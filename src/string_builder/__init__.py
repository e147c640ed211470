"""
string_builder — Incremental text building from mixed fragments

Append text, raw bytes, single bytes and characters to one buffer without
converting them first, then read the result back as validated text or as
raw bytes.

Quick Start:
    >>> from string_builder import Builder
    >>> b = Builder()
    >>> b.append("it").append(" ").append("works!")
    Builder(len=9, encoding='utf-8')
    >>> b.finalize_as_text()
    'it works!'

    >>> # Invalid text is only detected when reading back
    >>> b.append(b"\\x80")
    Builder(len=10, encoding='utf-8')
    >>> b.finalize_as_text()
    Traceback (most recent call last):
        ...
    string_builder.errors.EncodingError: 'utf-8' cannot decode bytes [80] at offset 9: invalid start byte
    >>> b.finalize_as_bytes()
    b'it works!\\x80'

Custom Fragments:
    >>> from string_builder import register_fragment
    >>>
    >>> @register_fragment(Path)
    ... def _path_to_bytes(path, encoding):
    ...     return os.fsencode(path)

Installation:
    pip install string-builder       # zero runtime dependencies
"""

from string_builder.builder import Builder
from string_builder.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from string_builder.errors import (
    ConfigError,
    EncodingError,
    FragmentValueError,
    StringBuilderError,
    UnsupportedFragmentError,
)
from string_builder.fragments import is_fragment, register_fragment, to_bytes
from string_builder.protocols import ByteFragment

__version__ = "0.1.0"


def build(*fragments: object, config: BuilderConfig | None = None) -> str:
    """Concatenate fragments into validated text in one call.

    Args:
        *fragments: Fragments appended in order
        config: Optional BuilderConfig (defaults to the active context config)

    Returns:
        The decoded text

    Raises:
        EncodingError: The concatenated bytes are not valid text

    Example:
        >>> build("\\u00c6", "nima")
        'Ænima'
        >>> build(b"\\xc3", b"\\x86")  # split multi-byte character
        'Æ'
    """
    return Builder(config).extend(fragments).finalize_as_text()


__all__ = [
    "Builder",
    "BuilderConfig",
    "ByteFragment",
    "ConfigError",
    "EncodingError",
    "FragmentValueError",
    "StringBuilderError",
    "UnsupportedFragmentError",
    "__version__",
    "build",
    "builder_config_context",
    "get_builder_config",
    "is_fragment",
    "register_fragment",
    "reset_builder_config",
    "set_builder_config",
    "to_bytes",
]
