"""Services for Card Offer Finder."""

from card_offer_finder.services.card_catalog import (
    CardCatalog,
    CardCatalogLoader,
)
from card_offer_finder.services.offer_resolver import OfferResolver
from card_offer_finder.services.search_filter import CardSearchFilter
from card_offer_finder.services.search_session import SearchSession


__all__ = [
    "CardCatalog",
    "CardCatalogLoader",
    "CardSearchFilter",
    "OfferResolver",
    "SearchSession",
]
