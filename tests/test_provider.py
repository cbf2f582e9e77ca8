"""Tests for CustomerFormatProvider."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from customer_format.context import use_culture
from customer_format.culture import Culture, get_culture
from customer_format.exceptions import UnsupportedFormatError
from customer_format.models import Customer
from customer_format.protocols import FormatProvider
from customer_format.provider import COMPOSITE_FORMATS, CustomerFormatProvider

DEFAULT_STRING_RESULT = "Name: Jeffrey Richter, Phone: +1 (425) 555-0100, Revenue: $1,000,000.00"


class RecordingProvider:
    """Provider that records capability queries and answers with a fixed object."""

    def __init__(self, answer: object | None = None) -> None:
        self.answer = answer
        self.queries: list[type] = []

    def get_format(self, format_type: type) -> object | None:
        self.queries.append(format_type)
        return self.answer


class Temperature:
    """A value with its own format-aware rendering."""

    def __init__(self, degrees: float) -> None:
        self.degrees = degrees

    def to_string(self, format: str | None = None, provider: FormatProvider | None = None) -> str:  # noqa: A002
        culture = provider if isinstance(provider, Culture) else None
        suffix = culture.name if culture else "?"
        return f"{self.degrees}{format or ''}@{suffix}"


class TestCapabilityQuery:
    """Test get_format()."""

    def test_returns_self_for_customer(self, us_culture: Culture) -> None:
        """Test that the provider answers for the Customer type."""
        provider = CustomerFormatProvider(us_culture)
        assert provider.get_format(Customer) is provider

    def test_forwards_other_types_to_parent(self) -> None:
        """Test that other queries reach the parent unchanged."""
        parent = RecordingProvider(answer="parent-answer")
        provider = CustomerFormatProvider(parent)
        assert provider.get_format(Decimal) == "parent-answer"
        assert parent.queries == [Decimal]

    def test_forwards_culture_query(self, uk_culture: Culture) -> None:
        """Test that a culture parent answers the Culture query."""
        provider = CustomerFormatProvider(uk_culture)
        assert provider.get_format(Culture) is uk_culture
        assert provider.get_format(str) is None

    def test_default_parent_is_ambient_culture(self) -> None:
        """Test that the parent defaults to the ambient culture at construction."""
        with use_culture("en_GB"):
            provider = CustomerFormatProvider()
        assert provider.parent is get_culture("en_GB")

    def test_default_parent_is_captured(self, customer: Customer) -> None:
        """Test that later ambient changes don't affect a constructed provider."""
        provider = CustomerFormatProvider()
        with use_culture("en_GB"):
            assert customer.to_string("R", provider) == "Revenue: $1,000,000.00"


class TestCompositeFormats:
    """Test composite codes through Customer.to_string()."""

    def test_name_phone(self, customer: Customer, us_culture: Culture) -> None:
        """Test the NP composite code."""
        provider = CustomerFormatProvider(us_culture)
        assert customer.to_string("NP", provider) == "Name: Jeffrey Richter, Phone: +1 (425) 555-0100"

    def test_name_revenue_us(self, customer: Customer, us_culture: Culture) -> None:
        """Test the NR composite code with a US parent."""
        provider = CustomerFormatProvider(us_culture)
        assert customer.to_string("NR", provider) == "Name: Jeffrey Richter, Revenue: $1,000,000.00"

    def test_name_revenue_uk(self, customer: Customer, uk_culture: Culture) -> None:
        """Test the NR composite code with a UK parent."""
        provider = CustomerFormatProvider(uk_culture)
        assert customer.to_string("NR", provider) == "Name: Jeffrey Richter, Revenue: £1,000,000.00"

    def test_composite_case_insensitive(self, customer: Customer, us_culture: Culture) -> None:
        """Test that composite codes ignore case."""
        provider = CustomerFormatProvider(us_culture)
        assert customer.to_string("np", provider) == customer.to_string("NP", provider)

    def test_composite_formats_listed(self) -> None:
        """Test the advertised code list."""
        assert COMPOSITE_FORMATS == ("NP", "NR")
        assert CustomerFormatProvider.supported_formats()[:2] == COMPOSITE_FORMATS
        assert set(Customer.supported_formats()) <= set(CustomerFormatProvider.supported_formats())


class TestFallbackToCustomer:
    """Test that non-composite codes behave as without a provider."""

    @pytest.mark.parametrize(
        ("format_code", "expected"),
        [
            ("N", "Name: Jeffrey Richter"),
            ("P", "Phone: +1 (425) 555-0100"),
            ("R", "Revenue: £1,000,000.00"),
        ],
    )
    def test_single_fields(
        self, customer: Customer, uk_culture: Culture, format_code: str, expected: str
    ) -> None:
        """Test single-field codes through the provider."""
        provider = CustomerFormatProvider(uk_culture)
        assert customer.to_string(format_code, provider) == expected

    @pytest.mark.parametrize("format_code", [None, "", "G", "NPR"])
    def test_general(self, customer: Customer, us_culture: Culture, format_code: str | None) -> None:
        """Test that the general format survives the round trip through the provider."""
        provider = CustomerFormatProvider(us_culture)
        assert customer.to_string(format_code, provider) == DEFAULT_STRING_RESULT

    def test_provider_only(self, customer: Customer, us_culture: Culture) -> None:
        """Test passing only the provider."""
        assert customer.to_string(CustomerFormatProvider(us_culture)) == DEFAULT_STRING_RESULT

    def test_unsupported_code(self, customer: Customer, us_culture: Culture) -> None:
        """Test that unknown codes fail the same way as without a provider."""
        provider = CustomerFormatProvider(us_culture)
        with pytest.raises(UnsupportedFormatError, match="The format string A is not supported"):
            customer.to_string("A", provider)

    def test_matches_direct_rendering(self, customer: Customer, uk_culture: Culture) -> None:
        """Test that the provider adds codes without changing existing ones."""
        provider = CustomerFormatProvider(uk_culture)
        for code in Customer.supported_formats():
            assert customer.to_string(code, provider) == customer.to_string(code, uk_culture)


class TestFormatDirect:
    """Test calling CustomerFormatProvider.format() directly."""

    def test_customer_with_explicit_provider(self, customer: Customer, us_culture: Culture) -> None:
        """Test that an explicit provider is the locale source."""
        provider = CustomerFormatProvider(us_culture)
        result = provider.format("NR", customer, get_culture("en_GB"))
        assert result == "Name: Jeffrey Richter, Revenue: £1,000,000.00"

    def test_customer_falls_back_to_parent(self, customer: Customer, uk_culture: Culture) -> None:
        """Test that a missing provider argument means the parent."""
        provider = CustomerFormatProvider(uk_culture)
        assert provider.format("R", customer, None) == "Revenue: £1,000,000.00"

    def test_empty_code_is_not_general(self, customer: Customer, us_culture: Culture) -> None:
        """Test that the provider does not map None or "" to the general format."""
        provider = CustomerFormatProvider(us_culture)
        with pytest.raises(UnsupportedFormatError):
            provider.format(None, customer, None)
        with pytest.raises(UnsupportedFormatError):
            provider.format("", customer, None)

    def test_none_value(self, us_culture: Culture) -> None:
        """Test that None renders as an empty string."""
        provider = CustomerFormatProvider(us_culture)
        assert provider.format("NP", None, None) == ""

    def test_plain_value(self, us_culture: Culture) -> None:
        """Test that values without a format spec render as str()."""
        provider = CustomerFormatProvider(us_culture)
        assert provider.format(None, 42, None) == "42"
        assert provider.format(None, "text", None) == "text"

    def test_float_uses_format_spec(self, us_culture: Culture) -> None:
        """Test that built-in values are rendered with the given format spec."""
        provider = CustomerFormatProvider(us_culture)
        assert provider.format(".2f", 3.14159, None) == "3.14"
        assert provider.format(",.2f", Decimal("1234.5"), None) == "1,234.50"

    def test_date_uses_format_spec(self, us_culture: Culture) -> None:
        """Test that dates honour strftime-style format specs."""
        provider = CustomerFormatProvider(us_culture)
        assert provider.format("%Y/%m/%d", date(2024, 3, 9), None) == "2024/03/09"

    def test_object_without_format_support_uses_str(self, us_culture: Culture) -> None:
        """Test that objects rejecting a format spec fall back to str()."""

        class Badge:
            def __str__(self) -> str:
                return "badge"

        provider = CustomerFormatProvider(us_culture)
        assert provider.format("NP", Badge(), None) == "badge"

    def test_invalid_spec_for_builtin_value(self, us_culture: Culture) -> None:
        """Test that a spec the value cannot apply is an error, not silently dropped."""
        provider = CustomerFormatProvider(us_culture)
        with pytest.raises(ValueError):
            provider.format("NP", 42, None)

    def test_formattable_value_uses_ambient_culture(self, uk_culture: Culture) -> None:
        """Test that format-aware values get the format and the ambient culture."""
        provider = CustomerFormatProvider(uk_culture)
        assert provider.format("C", Temperature(21.5), uk_culture) == "21.5C@en_US"

    def test_customer_query_ignored_by_recording_parent(self, customer: Customer) -> None:
        """Test that the Customer query is answered without asking the parent."""
        parent = RecordingProvider()
        provider = CustomerFormatProvider(parent)
        assert customer.to_string("NP", provider) == "Name: Jeffrey Richter, Phone: +1 (425) 555-0100"
        assert Customer not in parent.queries


class TestForeignProviders:
    """Test Customer with providers other than Culture and CustomerFormatProvider."""

    def test_declining_provider_uses_ambient_culture(self, customer: Customer) -> None:
        """Test that a provider answering None leaves rendering to the customer."""
        provider = RecordingProvider()
        with use_culture("en_GB"):
            assert customer.to_string("R", provider) == "Revenue: £1,000,000.00"
        assert Customer in provider.queries

    def test_custom_formatter_takes_over(self, customer: Customer) -> None:
        """Test that any custom formatter receives the normalized format."""

        class Shouting:
            def format(self, format: str | None, arg: object, provider: object) -> str:  # noqa: A002
                assert isinstance(arg, Customer)
                return f"{format}:{arg.name.upper()}"

        provider = RecordingProvider(answer=Shouting())
        assert customer.to_string(provider) == "G:JEFFREY RICHTER"
        assert customer.to_string("zz", provider) == "zz:JEFFREY RICHTER"
