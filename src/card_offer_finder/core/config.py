"""Configuration settings for Card Offer Finder."""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmptyQueryPolicy(StrEnum):
    """What the suggestion list shows once the search input is cleared."""

    CLEAR = "clear"
    RESET = "reset"


class OfferMatchMode(StrEnum):
    """How a selected card is matched against a dataset row."""

    TOKEN = "token"
    SUBSTRING = "substring"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    @staticmethod
    def _resolve_location(base: str | None, location: str) -> str:
        """Join a dataset location onto the configured base, if any."""
        if not base or "://" in location or Path(location).is_absolute():
            return location
        if "://" in base:
            return f"{base.rstrip('/')}/{location.lstrip('/')}"
        return str(Path(base) / location)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Datasets
    dataset_base: str | None = Field(
        default=None,
        description=(
            "Directory or base URL that relative dataset locations "
            "are resolved against"
        ),
    )
    swiggy_dataset: str = Field(
        default="Swiggy.csv",
        description="Location of the Swiggy offers CSV (path or URL)",
    )
    zomato_dataset: str = Field(
        default="Zomato.csv",
        description="Location of the Zomato offers CSV (path or URL)",
    )

    cards_column: str = Field(
        default="Applicable to Credit cards",
        description="Header of the column listing applicable credit cards",
    )
    offer_column: str = Field(
        default="Offer",
        description="Header of the column holding the offer description",
    )
    coupon_column: str = Field(
        default="Coupon code",
        description="Header of the column holding the coupon code",
    )

    # Search behaviour
    empty_query_policy: EmptyQueryPolicy = Field(
        default=EmptyQueryPolicy.CLEAR,
        description=(
            "'clear' hides everything on empty input, "
            "'reset' lists all cards"
        ),
    )
    show_no_match_while_typing: bool = Field(
        default=False,
        description=(
            "Show the no-match message while typing instead of on submit"
        ),
    )
    offer_match_mode: OfferMatchMode = Field(
        default=OfferMatchMode.TOKEN,
        description=(
            "'token' matches parsed card names exactly, "
            "'substring' matches the raw cards field"
        ),
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for fetching URL datasets",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level name; unknown names fall back to INFO",
    )
    log_console: bool = Field(
        default=True,
        description="Print log records to the console",
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def check_timeout_positive(cls, value: float) -> float:
        """Reject non-positive timeouts."""
        if value <= 0:
            msg = "http_timeout_seconds must be positive"
            raise ValueError(msg)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def merchant_datasets(self) -> list[tuple[str, str]]:
        """Return (merchant, location) pairs in card-list load order."""
        return [
            (
                "Swiggy",
                self._resolve_location(self.dataset_base, self.swiggy_dataset),
            ),
            (
                "Zomato",
                self._resolve_location(self.dataset_base, self.zomato_dataset),
            ),
        ]


@lru_cache
def get_settings() -> Settings:
    """Get application settings singleton (cached)."""
    return Settings()
