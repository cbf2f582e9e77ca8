"""Locale authorities backed by Babel."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import get_territory_currencies, parse_pattern

from .exceptions import ConfigError

DEFAULT_LOCALE = "en_US"

# Revenue is always shown with exactly two fraction digits, whatever the currency
CURRENCY_FRACTION_DIGITS = 2
CURRENCY_QUANTUM = Decimal("0.01")


@dataclass(frozen=True)
class Culture:
    """A locale plus the currency used when formatting money in it.

    A Culture is itself a format provider: it answers capability queries for
    Culture with itself and declines everything else.
    """

    locale: Locale
    currency: str

    @property
    def name(self) -> str:
        """Locale identifier, e.g. 'en_US'."""
        return str(self.locale)

    def get_format(self, format_type: type) -> object | None:
        return self if format_type is Culture else None

    def format_currency(self, amount: Decimal) -> str:
        """Format an amount as currency with two fraction digits.

        Symbol placement, grouping and decimal separator follow the locale's
        standard currency pattern.
        """
        # Midpoints round away from zero; Babel alone would round half to even
        amount = amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
        # Locale data holds shared pattern objects, so work on a copy
        pattern = copy.copy(parse_pattern(self.locale.currency_formats["standard"]))
        pattern.frac_prec = (CURRENCY_FRACTION_DIGITS, CURRENCY_FRACTION_DIGITS)
        return pattern.apply(amount, self.locale, currency=self.currency, currency_digits=False)

    def __str__(self) -> str:
        return self.name


def _default_currency(locale: Locale) -> str:
    if not locale.territory:
        raise ConfigError(
            f"Cannot infer a currency for locale '{locale}' without a territory; "
            "specify the currency explicitly"
        )
    currencies = get_territory_currencies(locale.territory)
    if not currencies:
        raise ConfigError(f"No currency in use for territory '{locale.territory}'")
    return currencies[0]


@lru_cache(maxsize=64)
def get_culture(name: str, currency: str | None = None) -> Culture:
    """Look up a Culture by locale name.

    Accepts both 'en_US' and 'en-US' spellings. Results are cached, so
    repeated lookups return the same instance.

    Args:
        name: Locale identifier
        currency: Optional ISO 4217 code overriding the territory's currency

    Returns:
        The Culture for the locale

    Raises:
        ConfigError: If the locale is unknown or has no inferable currency
    """
    try:
        locale = Locale.parse(name.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigError(f"Unknown locale: {name}") from e

    return Culture(locale=locale, currency=(currency or _default_currency(locale)).upper())
