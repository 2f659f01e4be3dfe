"""State snapshot of an interactive card search."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from card_offer_finder.core.models.offer import OfferLookup


NO_OFFERS_MESSAGE = "No offers found for this card."
NO_MATCH_MESSAGE = "No matching credit card found."


class SessionPhase(StrEnum):
    """Where the search is in its Idle -> Typing -> Selected flow."""

    IDLE = "idle"
    TYPING = "typing"
    NO_MATCH = "no_match"
    SELECTED = "selected"
    DISPLAYED = "displayed"
    NO_OFFERS = "no_offers"


class SearchView(BaseModel):
    """Immutable snapshot of what the search widget shows."""

    model_config = ConfigDict(frozen=True)

    phase: SessionPhase = SessionPhase.IDLE
    query: str = ""
    suggestions: list[str] = Field(default_factory=list)
    selected_card: str | None = None
    lookup: OfferLookup | None = None
    message: str | None = None
