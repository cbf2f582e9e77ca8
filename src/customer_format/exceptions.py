"""Custom exceptions for customer formatting."""


class CustomerFormatError(Exception):
    """Base exception for all customer formatting errors."""

    pass


class ValidationError(CustomerFormatError, ValueError):
    """Raised when a customer is constructed from invalid values."""

    pass


class NullArgumentError(ValidationError):
    """Raised when a required argument is missing."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument {argument} cannot be null")
        self.argument = argument


class InvalidRangeError(ValidationError):
    """Raised when a numeric argument is outside its allowed range."""

    pass


class UnsupportedFormatError(CustomerFormatError, ValueError):
    """Raised when a format code is not recognized."""

    def __init__(self, format_code: str) -> None:
        super().__init__(f"The format string {format_code} is not supported")
        self.format_code = format_code


class ConfigError(CustomerFormatError):
    """Raised when configuration or locale lookup fails."""

    pass
