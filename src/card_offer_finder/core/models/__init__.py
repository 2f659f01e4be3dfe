"""Data models for Card Offer Finder."""

from card_offer_finder.core.models.offer import (
    MerchantOffers,
    Offer,
    OfferLookup,
    OfferRow,
    normalize_card_name,
    split_card_names,
)
from card_offer_finder.core.models.search_view import (
    NO_MATCH_MESSAGE,
    NO_OFFERS_MESSAGE,
    SearchView,
    SessionPhase,
)


__all__ = [
    "NO_MATCH_MESSAGE",
    "NO_OFFERS_MESSAGE",
    "MerchantOffers",
    "Offer",
    "OfferLookup",
    "OfferRow",
    "SearchView",
    "SessionPhase",
    "normalize_card_name",
    "split_card_names",
]
