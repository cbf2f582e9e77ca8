"""Protocol definitions for the formatting system."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class FormatProvider(Protocol):
    """Protocol for objects that supply formatting services by type."""

    def get_format(self, format_type: type) -> object | None:
        """Return an object providing formatting services for a type.

        Args:
            format_type: Type that formatting services are requested for

        Returns:
            Formatting object, or None if this provider has none for the type
        """
        ...


class CustomFormatter(Protocol):
    """Protocol for formatters that take over rendering of a value."""

    def format(self, format: str | None, arg: object, provider: FormatProvider | None) -> str:  # noqa: A002
        """Render a value using a format code and a locale source.

        Args:
            format: Format code (may be None)
            arg: Value to render
            provider: Provider used as the locale source

        Returns:
            Rendered text
        """
        ...


@runtime_checkable
class Formattable(Protocol):
    """Protocol for values with their own format-aware rendering."""

    def to_string(
        self, format: str | None = None, provider: FormatProvider | None = None  # noqa: A002
    ) -> str:
        """Render the value using a format code and a locale source."""
        ...
