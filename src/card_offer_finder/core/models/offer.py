"""Data models for merchant offer datasets and card lookups."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_card_name(raw: str) -> str:
    """Strip the parenthetical annotation and surrounding whitespace.

    "HDFC Millennia (Visa)" -> "HDFC Millennia"
    """
    return raw.strip().split("(", 1)[0].strip()


def split_card_names(field: str) -> list[str]:
    """Split a comma separated cards field into normalized card names."""
    names = (normalize_card_name(part) for part in field.split(","))
    return [name for name in names if name]


class OfferRow(BaseModel):
    """One row of a merchant offers dataset."""

    model_config = ConfigDict(frozen=True)

    applicable_cards: str = Field(
        default="",
        description="Comma separated card names, optionally annotated",
    )
    offer: str = Field(default="", description="Offer description")
    coupon_code: str = Field(default="", description="Coupon code")

    @field_validator("applicable_cards", "offer", "coupon_code", mode="before")
    @classmethod
    def blank_to_empty(cls, value: Any) -> str:
        """Treat missing cells as empty strings."""
        if value is None:
            return ""
        # pandas hands back float('nan') for empty cells of untyped columns
        if isinstance(value, float) and value != value:
            return ""
        return str(value)

    @property
    def card_names(self) -> list[str]:
        """Normalized card names this row applies to."""
        return split_card_names(self.applicable_cards)

    def to_offer(self) -> "Offer":
        """Project the row onto its offer/coupon pair."""
        return Offer(offer=self.offer, coupon=self.coupon_code)


class Offer(BaseModel):
    """An offer description paired with its coupon code."""

    model_config = ConfigDict(frozen=True)

    offer: str
    coupon: str


class MerchantOffers(BaseModel):
    """Offers from one merchant dataset for a selected card."""

    merchant: str
    offers: list[Offer] = Field(default_factory=list)


class OfferLookup(BaseModel):
    """Offers across all merchant datasets for one card."""

    card: str
    merchants: list[MerchantOffers] = Field(default_factory=list)
    failed: bool = Field(
        default=False,
        description="True if the datasets could not be read",
    )

    @property
    def has_offers(self) -> bool:
        """Whether any merchant has at least one offer."""
        return any(merchant.offers for merchant in self.merchants)

    def offers_for(self, merchant: str) -> list[Offer]:
        """Offers for the named merchant, empty if unknown."""
        for entry in self.merchants:
            if entry.merchant == merchant:
                return entry.offers
        return []
