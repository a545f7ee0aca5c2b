"""ContextVar-based builder configuration for katas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The facade functions in katas.builder read the active config on each call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from katas.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(strict_combinators=True)):
        combine(element("a"), ">>", element("b"))  # raises InvalidCombinatorError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        strict_combinators: Reject combinators other than ' ', '>', '+', '~'
            in combine(). Off by default: any value is accepted as given.

    """

    strict_combinators: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "strict_combinators": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_combinators
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get current builder configuration (thread-local)."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

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
        >>> with builder_config_context(BuilderConfig(strict_combinators=True)):
        ...     get_builder_config().strict_combinators
        True
        >>> get_builder_config().strict_combinators
        False

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
