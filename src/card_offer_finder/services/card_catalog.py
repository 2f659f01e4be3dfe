"""Card catalog: the deduplicated list of card names across all datasets."""

from collections.abc import Iterable, Iterator

from card_offer_finder.clients.dataset_client import (
    DatasetClient,
    DatasetError,
)
from card_offer_finder.core.logger import get_logger
from card_offer_finder.core.models import OfferRow


logger = get_logger(__name__)


def extract_card_names(rows: Iterable[OfferRow]) -> list[str]:
    """Collect card names from dataset rows, duplicates included."""
    names: list[str] = []
    for row in rows:
        names.extend(row.card_names)
    return names


def unique_in_order(*groups: Iterable[str]) -> list[str]:
    """Union of several name lists, keeping first-seen order."""
    # dict preserves insertion order
    seen: dict[str, None] = {}
    for group in groups:
        for name in group:
            seen.setdefault(name, None)
    return list(seen)


class CardCatalog:
    """Immutable, ordered collection of known card names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = tuple(unique_in_order(names))
        self._by_casefold: dict[str, str] = {}
        for name in self._names:
            self._by_casefold.setdefault(name.casefold(), name)

    @classmethod
    def from_datasets(cls, datasets: Iterable[list[OfferRow]]) -> "CardCatalog":
        """Build a catalog from per-merchant dataset rows."""
        return cls(
            unique_in_order(*(extract_card_names(rows) for rows in datasets))
        )

    @property
    def names(self) -> tuple[str, ...]:
        """Card names in first-seen order."""
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def find(self, text: str) -> str | None:
        """Return the catalog spelling of `text`, matched case-insensitively."""
        return self._by_casefold.get(text.strip().casefold())


class CardCatalogLoader:
    """Loads the card catalog from the merchant datasets."""

    def __init__(self, client: DatasetClient, locations: list[str]) -> None:
        """Initialize loader.

        Args:
            client: Dataset client used to fetch the CSV files.
            locations: Dataset locations, in the order names are collected.
        """
        self._client = client
        self._locations = locations

    async def load(self) -> CardCatalog:
        """Fetch every dataset concurrently and build the catalog.

        Failures are logged and produce an empty catalog.
        """
        try:
            datasets = await self._client.fetch_many(self._locations)
        except DatasetError:
            logger.exception("[CATALOG] Error fetching or parsing datasets")
            return CardCatalog()

        catalog = CardCatalog.from_datasets(datasets)
        logger.info(
            "[CATALOG] Loaded %d unique card names from %d datasets",
            len(catalog),
            len(datasets),
        )
        return catalog
