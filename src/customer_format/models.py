"""Data models for customer formatting."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .context import get_current_culture, resolve_culture
from .exceptions import InvalidRangeError, NullArgumentError, UnsupportedFormatError, ValidationError
from .logger import dispatch_enabled, get_logger
from .protocols import FormatProvider

logger = get_logger()

NAME_FORMAT = "N"
PHONE_FORMAT = "P"
REVENUE_FORMAT = "R"
ALL_FORMAT = "NPR"
GENERAL_FORMAT = "G"

CUSTOMER_FORMATS = (GENERAL_FORMAT, ALL_FORMAT, NAME_FORMAT, PHONE_FORMAT, REVENUE_FORMAT)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Go through str so 0.1 stays 0.1 rather than its binary expansion
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValidationError(f"Argument revenue must be a number, got {value!r}") from e


@dataclass(frozen=True)
class Customer:
    """A customer record with locale-aware string representations.

    Format codes (case-insensitive):
    - "N" - name
    - "P" - contact phone
    - "R" - revenue as currency
    - "NPR" or "G" - all three fields (the default)

    A format provider whose get_format(Customer) returns a custom formatter
    takes over rendering entirely; see CustomerFormatProvider.
    """

    name: str
    contact_phone: str
    revenue: Decimal

    def __post_init__(self) -> None:
        if not self.name:
            raise NullArgumentError("name")
        if not self.contact_phone:
            raise NullArgumentError("contact_phone")
        if self.revenue is None:
            raise NullArgumentError("revenue")

        revenue = _to_decimal(self.revenue)
        if not revenue.is_finite():
            raise InvalidRangeError(f"Argument revenue must be a finite number, got {revenue}")
        if revenue < 0:
            raise InvalidRangeError(f"Argument {revenue} cannot be negative")
        object.__setattr__(self, "revenue", revenue)

    @classmethod
    def supported_formats(cls) -> tuple[str, ...]:
        """Format codes understood by format_fields()."""
        return CUSTOMER_FORMATS

    def to_string(
        self,
        format: str | FormatProvider | None = None,  # noqa: A002
        provider: FormatProvider | None = None,
    ) -> str:
        """Render the customer using a format code and a format provider.

        A provider may be passed in place of the format code, in which case
        the general format is used. Without a provider the ambient culture
        is read once and used for the whole call.

        Args:
            format: Format code; None or "" means "G"
            provider: Format provider or Culture used as the locale source

        Returns:
            Rendered text

        Raises:
            UnsupportedFormatError: If no renderer recognizes the format code
        """
        if provider is None and format is not None and not isinstance(format, str):
            format, provider = None, format  # noqa: A001

        current_format = format or GENERAL_FORMAT

        if provider is None:
            return self.format_fields(current_format, get_current_culture())

        formatter = provider.get_format(type(self))
        if formatter is not None and callable(getattr(formatter, "format", None)):
            if dispatch_enabled():
                logger.dispatch(
                    f"Customer format '{current_format}' delegated to {type(formatter).__name__}"
                )
            return formatter.format(current_format, self, provider)  # type: ignore[attr-defined]

        return self.format_fields(current_format, provider)

    def format_fields(self, format: str, provider: FormatProvider | None = None) -> str:  # noqa: A002
        """Render the fields selected by one of the customer's own format codes.

        Cooperating format providers call this for any code they do not
        handle themselves.

        Raises:
            UnsupportedFormatError: If the code is not one of CUSTOMER_FORMATS
        """
        code = format.upper()
        logger.debug(f"Dispatching customer format '{format}'")

        if code == NAME_FORMAT:
            return f"Name: {self.name}"
        if code == PHONE_FORMAT:
            return f"Phone: {self.contact_phone}"
        if code == REVENUE_FORMAT:
            return f"Revenue: {self.formatted_revenue(provider)}"
        if code in (ALL_FORMAT, GENERAL_FORMAT):
            return (
                f"Name: {self.name}, Phone: {self.contact_phone}, "
                f"Revenue: {self.formatted_revenue(provider)}"
            )
        raise UnsupportedFormatError(format)

    def formatted_revenue(self, provider: FormatProvider | None = None) -> str:
        """Revenue as currency in the provider's culture (ambient if none)."""
        return resolve_culture(provider).format_currency(self.revenue)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)
