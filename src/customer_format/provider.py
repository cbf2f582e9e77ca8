"""Format provider adding composite format codes for customers."""

from __future__ import annotations

import builtins

from .context import get_current_culture
from .logger import get_logger
from .models import Customer
from .protocols import FormatProvider, Formattable

logger = get_logger()

NAME_PHONE_FORMAT = "NP"
NAME_REVENUE_FORMAT = "NR"

COMPOSITE_FORMATS = (NAME_PHONE_FORMAT, NAME_REVENUE_FORMAT)


class CustomerFormatProvider:
    """Format provider and custom formatter for Customer.

    Wraps a parent provider (normally a Culture). Capability queries for
    Customer are answered with this provider; all others go to the parent.
    When formatting a customer, the composite codes "NP" and "NR" are
    handled here and every other code is passed on to
    Customer.format_fields() with the parent as the locale source.
    """

    def __init__(self, parent: FormatProvider | None = None) -> None:
        """Initialize the provider.

        Args:
            parent: Provider to fall back on; defaults to the ambient culture
                at construction time
        """
        self.parent: FormatProvider = parent if parent is not None else get_current_culture()

    @classmethod
    def supported_formats(cls) -> tuple[str, ...]:
        """Composite codes followed by the codes Customer handles itself."""
        return COMPOSITE_FORMATS + Customer.supported_formats()

    def get_format(self, format_type: type) -> object | None:
        if format_type is Customer:
            return self
        return self.parent.get_format(format_type)

    def format(self, format: str | None, arg: object, provider: FormatProvider | None) -> str:  # noqa: A002
        """Render a value, adding composite codes for customers.

        Args:
            format: Format code; None is treated as ""
            arg: Value to render
            provider: Locale source; the parent is used when None

        Returns:
            Rendered text

        Raises:
            UnsupportedFormatError: If neither this provider nor Customer
                recognizes the code
        """
        if not isinstance(arg, Customer):
            return self._format_other(format, arg)

        return self._format_customer(format or "", arg, provider or self.parent)

    def _format_customer(self, format: str, customer: Customer, provider: FormatProvider) -> str:  # noqa: A002
        code = format.upper()

        if code == NAME_PHONE_FORMAT:
            logger.dispatch(f"Composite format '{format}' handled by provider")
            return f"Name: {customer.name}, Phone: {customer.contact_phone}"
        if code == NAME_REVENUE_FORMAT:
            logger.dispatch(f"Composite format '{format}' handled by provider")
            return f"Name: {customer.name}, Revenue: {customer.formatted_revenue(provider)}"

        logger.dispatch(f"Format '{format}' passed back to Customer")
        return customer.format_fields(format, provider)

    def _format_other(self, format: str | None, arg: object) -> str:  # noqa: A002
        if isinstance(arg, Formattable):
            return arg.to_string(format, get_current_culture())
        if arg is None:
            return ""
        try:
            return builtins.format(arg, format or "")
        except TypeError:
            # object.__format__ rejects any non-empty spec
            return str(arg)

    def __repr__(self) -> str:
        return f"CustomerFormatProvider(parent={self.parent!r})"
