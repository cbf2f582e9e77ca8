"""Locale-aware customer formatting with pluggable format providers."""

from customer_format.context import (
    get_current_culture,
    resolve_culture,
    set_current_culture,
    use_culture,
)
from customer_format.culture import Culture, get_culture
from customer_format.exceptions import (
    ConfigError,
    CustomerFormatError,
    InvalidRangeError,
    NullArgumentError,
    UnsupportedFormatError,
    ValidationError,
)
from customer_format.models import Customer
from customer_format.protocols import CustomFormatter, FormatProvider, Formattable
from customer_format.provider import CustomerFormatProvider

__all__ = [
    "ConfigError",
    "Culture",
    "CustomFormatter",
    "Customer",
    "CustomerFormatError",
    "CustomerFormatProvider",
    "FormatProvider",
    "Formattable",
    "InvalidRangeError",
    "NullArgumentError",
    "UnsupportedFormatError",
    "ValidationError",
    "get_culture",
    "get_current_culture",
    "resolve_culture",
    "set_current_culture",
    "use_culture",
]
