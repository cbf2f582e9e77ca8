"""Configuration loader for customer formatting.

The config file (customer_format.yaml) sets the ambient locale used by the
command line and whether rendering goes through CustomerFormatProvider.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .culture import DEFAULT_LOCALE, Culture, get_culture
from .exceptions import ConfigError

DEFAULT_CONFIG_FILENAME = "customer_format.yaml"


class FormatConfig(BaseModel):
    """Settings for rendering customers."""

    locale: str = DEFAULT_LOCALE
    currency: str | None = None  # ISO 4217 override; None = territory's currency
    use_provider: bool = True  # Render through CustomerFormatProvider

    @field_validator("currency")
    @classmethod
    def _check_currency(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if len(value) != 3 or not value.isalpha():  # noqa: PLR2004 - ISO 4217 codes are 3 letters
            raise ValueError(f"Invalid currency code: '{value}'")
        return value.upper()

    def culture(self) -> Culture:
        """Resolve the configured locale and currency to a Culture."""
        return get_culture(self.locale, self.currency)


def load_config(config_path: Path | str) -> FormatConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to customer_format.yaml

    Returns:
        FormatConfig with defaults for any omitted keys

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If config is invalid or names an unknown locale
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {config_path}")

    try:
        config = FormatConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    # Fail on unknown locales at load time rather than on first render
    config.culture()
    return config


def find_config(explicit_path: Path | None) -> FormatConfig:
    """Load the explicit config, else ./customer_format.yaml, else defaults."""
    if explicit_path is not None:
        return load_config(explicit_path)

    default_path = Path(DEFAULT_CONFIG_FILENAME)
    if default_path.exists():
        return load_config(default_path)
    return FormatConfig()
