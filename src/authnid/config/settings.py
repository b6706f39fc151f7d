"""
Environment-driven settings for the authn ID connector.

Reads the connector's text configuration surface from ``AUTHNID_*``
environment variables (or a ``.env`` file) and turns it into the immutable
DerivationConfig used by the connector.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..features.derivation.entities.config import (
    DEFAULT_MINIMUM_INPUT_LENGTH,
    DerivationConfig,
    build_configuration,
    trim_or_none,
)


class AuthnIdSettings(BaseSettings):
    """Connector settings as configuration text."""

    model_config = SettingsConfigDict(
        env_prefix="AUTHNID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    connector_id: str = Field(default="authnid", description="Connector identifier")
    src_attribute_names: str = Field(description="Comma-separated source attribute names")
    dest_attribute_name: str = Field(description="Attribute receiving the authn ID")
    prefix_salt: str = Field(default="", description="Salt prepended to the input")
    postfix_salt: str = Field(default="", description="Salt appended to the input")
    min_input_length: int = Field(
        default=DEFAULT_MINIMUM_INPUT_LENGTH, ge=1, description="Minimum pre-salt input length"
    )
    skip_calculation: str = Field(default="", description="Bypass rules as name=value pairs")
    skip_calculation_src: Optional[str] = Field(default=None, description="Bypass source attribute")

    @field_validator("src_attribute_names", "dest_attribute_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    def to_config(self) -> DerivationConfig:
        """Build the immutable derivation configuration.

        Environment text is trimmed the same way as the element text surface.
        """
        return build_configuration(
            source_attribute_names=self.src_attribute_names,
            destination_attribute_name=trim_or_none(self.dest_attribute_name),
            prefix_salt=trim_or_none(self.prefix_salt),
            postfix_salt=trim_or_none(self.postfix_salt),
            minimum_input_length=self.min_input_length,
            bypass_rules=self.skip_calculation,
            bypass_source_attribute_name=trim_or_none(self.skip_calculation_src),
        )


@lru_cache()
def get_settings() -> AuthnIdSettings:
    """Get cached settings instance."""
    return AuthnIdSettings()
