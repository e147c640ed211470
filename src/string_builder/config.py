"""ContextVar-based builder configuration.

Provides context-local defaults using Python's ContextVars (PEP 567).
A Builder snapshots the active config when it is created, so changing
the config later never affects builders that already exist.

Usage:
    from string_builder.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(encoding="utf-16-le")):
        builder = Builder()  # encodes and decodes as UTF-16-LE

"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from string_builder.errors import ConfigError

DEFAULT_ENCODING = "utf-8"

# Canonical codec names (codecs.lookup(...).name) that encode any str,
# lone surrogates included via "surrogatepass", without a per-fragment BOM.
UNICODE_ENCODINGS = frozenset(
    {"utf-8", "utf-16-le", "utf-16-be", "utf-32-le", "utf-32-be"}
)


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        encoding: Codec used to encode text fragments and to validate the
            buffer in finalize_as_text(). Normalized to the codec's
            canonical name.

    """

    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        try:
            info = codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError("encoding", f"unknown encoding {self.encoding!r}") from None
        if info.name not in UNICODE_ENCODINGS:
            raise ConfigError(
                "encoding",
                f"{self.encoding!r} cannot represent every character; "
                f"use one of {', '.join(sorted(UNICODE_ENCODINGS))}",
            )
        object.__setattr__(self, "encoding", info.name)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> BuilderConfig:
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> BuilderConfig.from_dict({"encoding": "UTF8", "other": 1}).encoding
            'utf-8'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get the active builder configuration for this context."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for the current context.

    Only affects the current thread's context.
    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to the module-level default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with builder_config_context(BuilderConfig(encoding="UTF-16LE")):
        ...     get_builder_config().encoding
        'utf-16-le'

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "DEFAULT_ENCODING",
    "UNICODE_ENCODINGS",
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
