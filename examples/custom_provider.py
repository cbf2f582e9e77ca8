"""Example of a user-defined format provider for customers.

This file demonstrates how to:
- Add your own composite format codes on top of CustomerFormatProvider
- Keep every built-in code working by passing unknown codes along
- Choose the locale per call or through the ambient culture

Usage:
    python examples/custom_provider.py
"""

from __future__ import annotations

from customer_format import (
    Customer,
    CustomerFormatProvider,
    FormatProvider,
    get_culture,
    use_culture,
)


class ContactCardProvider(CustomerFormatProvider):
    """Adds a multi-line "CARD" code; everything else behaves as usual."""

    def format(self, format: str | None, arg: object, provider: FormatProvider | None) -> str:  # noqa: A002
        if isinstance(arg, Customer) and (format or "").upper() == "CARD":
            revenue = arg.formatted_revenue(provider or self.parent)
            return f"{arg.name}\n  tel: {arg.contact_phone}\n  revenue: {revenue}"
        return super().format(format, arg, provider)


def main() -> None:
    customer = Customer("Jeffrey Richter", "+1 (425) 555-0100", 1000000)

    print(customer)
    print(f"{customer:N}")
    print(customer.to_string("NR", CustomerFormatProvider(get_culture("en_GB"))))

    card_provider = ContactCardProvider(get_culture("en_US"))
    print(customer.to_string("CARD", card_provider))
    print(customer.to_string("NP", card_provider))

    with use_culture("en_GB"):
        print(customer.to_string("R"))


if __name__ == "__main__":
    main()
