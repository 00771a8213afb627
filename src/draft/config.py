"""Configuration using Pydantic Settings.

Values are read from ``DRAFT_*`` environment variables (or a ``.env`` file)
and only affect how schemes are exported, never how they are recorded.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NameConvention(str, Enum):
    SNAKE_CASE = "snake_case"
    CAMEL_CASE = "camel_case"
    AS_IS = "as_is"


class MockStrategy(str, Enum):
    # replay the values observed in the examples
    EXAMPLE = "example"
    # generate fresh values from field-name heuristics
    SMART = "smart"


class Settings(BaseSettings):
    """Central draft configuration."""

    name_convention: NameConvention = Field(
        default=NameConvention.SNAKE_CASE,
        description="Key style used for catalogued field names",
    )
    mock_strategy: MockStrategy = Field(
        default=MockStrategy.EXAMPLE,
        description="How exported cases rebuild their example payloads",
    )
    mock_seed: int = Field(
        default=0,
        description="Seed for the smart mock generator",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ERROR)",
    )

    model_config = SettingsConfigDict(
        env_prefix="DRAFT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
