"""Interactive search session: the state behind the card search widget."""

from card_offer_finder.clients.dataset_client import DatasetClient
from card_offer_finder.core.config import EmptyQueryPolicy, Settings
from card_offer_finder.core.logger import get_logger
from card_offer_finder.core.models import (
    NO_MATCH_MESSAGE,
    NO_OFFERS_MESSAGE,
    SearchView,
    SessionPhase,
)
from card_offer_finder.services.card_catalog import (
    CardCatalog,
    CardCatalogLoader,
)
from card_offer_finder.services.offer_resolver import OfferResolver
from card_offer_finder.services.search_filter import CardSearchFilter


logger = get_logger(__name__)


class SearchSession:
    """Drives a search through Idle -> Typing -> Selected -> Displayed/NoOffers.

    Every selection takes a sequence number. Offers that arrive after a
    newer selection, or after the input was cleared, are dropped.
    """

    def __init__(
        self,
        loader: CardCatalogLoader,
        resolver: OfferResolver,
        empty_query_policy: EmptyQueryPolicy = EmptyQueryPolicy.CLEAR,
        show_no_match_while_typing: bool = False,
    ) -> None:
        """Initialize search session.

        Args:
            loader: Loads the card catalog on mount.
            resolver: Resolves offers for a selected card.
            empty_query_policy: What the list shows once input is cleared.
            show_no_match_while_typing: Report "no match" while typing
                rather than only on submit.
        """
        self._loader = loader
        self._resolver = resolver
        self._empty_query_policy = empty_query_policy
        self._show_no_match_while_typing = show_no_match_while_typing
        self._catalog = CardCatalog()
        self._filter = CardSearchFilter(self._catalog, empty_query_policy)
        self._mounted = False
        self._sequence = 0
        self._view = SearchView()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: DatasetClient | None = None,
    ) -> "SearchSession":
        """Wire a session from application settings."""
        if client is None:
            client = DatasetClient.from_settings(settings)
        datasets = settings.merchant_datasets
        return cls(
            loader=CardCatalogLoader(
                client, [location for _, location in datasets]
            ),
            resolver=OfferResolver(
                client, datasets, match_mode=settings.offer_match_mode
            ),
            empty_query_policy=settings.empty_query_policy,
            show_no_match_while_typing=settings.show_no_match_while_typing,
        )

    @property
    def catalog(self) -> CardCatalog:
        return self._catalog

    @property
    def view(self) -> SearchView:
        return self._view

    async def mount(self) -> CardCatalog:
        """Load the card catalog once and list every card."""
        if self._mounted:
            return self._catalog

        self._catalog = await self._loader.load()
        self._filter = CardSearchFilter(self._catalog, self._empty_query_policy)
        self._mounted = True
        self._view = SearchView(suggestions=list(self._catalog.names))
        return self._catalog

    def type(self, text: str) -> SearchView:
        """Handle a keystroke: refresh the suggestions for `text`."""
        suggestions = self._filter.filter(text)

        if CardSearchFilter.is_empty(text):
            # Clearing the input drops the selection and any pending lookup.
            self._sequence += 1
            self._view = SearchView(
                phase=SessionPhase.IDLE,
                query=text,
                suggestions=suggestions,
            )
            return self._view

        # A selection without offers keeps its message while the user types.
        message = None
        lookup = self._view.lookup
        if not suggestions and self._show_no_match_while_typing:
            message = NO_MATCH_MESSAGE
        elif lookup is not None and not lookup.has_offers:
            message = NO_OFFERS_MESSAGE

        self._view = self._view.model_copy(
            update={
                "phase": SessionPhase.TYPING,
                "query": text,
                "suggestions": suggestions,
                "message": message,
            }
        )
        return self._view

    async def select(self, card: str) -> SearchView:
        """Pick a card from the suggestions and resolve its offers."""
        self._sequence += 1
        sequence = self._sequence
        self._view = SearchView(
            phase=SessionPhase.SELECTED,
            query=card,
            selected_card=card,
        )

        lookup = await self._resolver.resolve(card)
        if sequence != self._sequence:
            logger.debug("[SESSION] Dropping stale offers for %s", card)
            return self._view

        if lookup.has_offers:
            phase, message = SessionPhase.DISPLAYED, None
        else:
            phase, message = SessionPhase.NO_OFFERS, NO_OFFERS_MESSAGE

        self._view = self._view.model_copy(
            update={"phase": phase, "lookup": lookup, "message": message}
        )
        return self._view

    async def submit(self, text: str) -> SearchView:
        """Validate typed text against the full catalog, then select it."""
        card = self._catalog.find(text)
        if card is None:
            self._sequence += 1
            logger.info("[SESSION] No card named %r", text)
            self._view = SearchView(
                phase=SessionPhase.NO_MATCH,
                query=text,
                message=NO_MATCH_MESSAGE,
            )
            return self._view
        return await self.select(card)
