"""Ambient culture and global application state."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path

from .culture import DEFAULT_LOCALE, Culture, get_culture
from .protocols import FormatProvider

# Unset means DEFAULT_LOCALE; each thread and asyncio task sees its own value
_current_culture: ContextVar[Culture | None] = ContextVar("current_culture", default=None)


class _Context:
    """Application context for managing global state."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


# Singleton instance
_context = _Context()


def get_config_path() -> Path | None:
    """Get the global config path."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Set the global config path."""
    _context.config_path = path


def get_current_culture() -> Culture:
    """Get the ambient culture for the current thread or task."""
    culture = _current_culture.get()
    return culture if culture is not None else get_culture(DEFAULT_LOCALE)


def set_current_culture(culture: Culture | str | None) -> None:
    """Replace the ambient culture.

    Args:
        culture: A Culture, a locale name, or None to fall back to the default
    """
    if isinstance(culture, str):
        culture = get_culture(culture)
    _current_culture.set(culture)


@contextmanager
def use_culture(culture: Culture | str) -> Iterator[Culture]:
    """Temporarily replace the ambient culture, restoring it on exit."""
    resolved = get_culture(culture) if isinstance(culture, str) else culture
    token = _current_culture.set(resolved)
    try:
        yield resolved
    finally:
        _current_culture.reset(token)


def resolve_culture(provider: FormatProvider | None) -> Culture:
    """Find the culture that a provider stands for.

    A Culture is used as-is. Any other provider is asked for its Culture;
    when it has none, or no provider is given, the ambient culture is used.
    """
    if isinstance(provider, Culture):
        return provider
    if provider is not None:
        culture = provider.get_format(Culture)
        if isinstance(culture, Culture):
            return culture
    return get_current_culture()
