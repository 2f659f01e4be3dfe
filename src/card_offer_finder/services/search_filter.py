"""Incremental prefix filter over the card catalog."""

from card_offer_finder.core.config import EmptyQueryPolicy
from card_offer_finder.services.card_catalog import CardCatalog


class CardSearchFilter:
    """Narrows the card catalog as the user types."""

    def __init__(
        self,
        catalog: CardCatalog,
        empty_query_policy: EmptyQueryPolicy = EmptyQueryPolicy.CLEAR,
    ) -> None:
        """Initialize search filter.

        Args:
            catalog: Cards to search.
            empty_query_policy: What an empty query returns.
        """
        self._catalog = catalog
        self._empty_query_policy = empty_query_policy
        self._lowered = [(name.lower(), name) for name in catalog]

    @staticmethod
    def is_empty(query: str) -> bool:
        """Whitespace-only input counts as empty."""
        return not query.strip()

    def filter(self, query: str) -> list[str]:
        """Return catalog names starting with `query`, ignoring case.

        Args:
            query: Raw input text.

        Returns:
            Matching names in catalog order. For an empty query, nothing
            under the clear policy or every name under the reset policy.
        """
        if self.is_empty(query):
            if self._empty_query_policy is EmptyQueryPolicy.RESET:
                return list(self._catalog.names)
            return []

        prefix = query.lower()
        return [
            name
            for lowered, name in self._lowered
            if lowered.startswith(prefix)
        ]
