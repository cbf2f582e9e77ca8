"""Pytest configuration and fixtures for customer_format tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from customer_format.culture import Culture, get_culture
from customer_format.context import use_culture
from customer_format.logger import reset_logger
from customer_format.models import Customer

EN_US = "en_US"
EN_GB = "en_GB"

DEFAULT_STRING_RESULT = "Name: Jeffrey Richter, Phone: +1 (425) 555-0100, Revenue: $1,000,000.00"


@pytest.fixture(autouse=True)
def us_ambient_culture() -> Iterator[Culture]:
    """Pin the ambient culture to en_US for every test."""
    with use_culture(EN_US) as culture:
        yield culture


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Reset the package logger after each test."""
    yield
    reset_logger()


@pytest.fixture
def customer() -> Customer:
    """The customer used throughout the formatting tests."""
    return Customer("Jeffrey Richter", "+1 (425) 555-0100", 1000000)


@pytest.fixture
def us_culture() -> Culture:
    return get_culture(EN_US)


@pytest.fixture
def uk_culture() -> Culture:
    return get_culture(EN_GB)
