"""Offer resolution: find every merchant offer that applies to a card."""

import logging

from card_offer_finder.clients.dataset_client import (
    DatasetClient,
    DatasetError,
)
from card_offer_finder.core.config import OfferMatchMode
from card_offer_finder.core.logger import async_log_with_context
from card_offer_finder.core.models import (
    MerchantOffers,
    OfferLookup,
    OfferRow,
)


def row_matches(row: OfferRow, card: str, mode: OfferMatchMode) -> bool:
    """Check whether a dataset row applies to `card`.

    Args:
        row: Dataset row.
        card: Selected card name.
        mode: TOKEN compares against the parsed card names; SUBSTRING
            searches the raw cards field, so "HDFC" also hits
            "HDFC Millennia".

    Returns:
        True if the row's offer applies to the card.
    """
    if not card:
        return False
    if mode is OfferMatchMode.SUBSTRING:
        return card in row.applicable_cards
    return card in row.card_names


def filter_offers(
    merchant: str,
    rows: list[OfferRow],
    card: str,
    mode: OfferMatchMode = OfferMatchMode.TOKEN,
) -> MerchantOffers:
    """Project the rows of one dataset that apply to `card`."""
    return MerchantOffers(
        merchant=merchant,
        offers=[row.to_offer() for row in rows if row_matches(row, card, mode)],
    )


class OfferResolver:
    """Cross-references a card against every merchant dataset."""

    def __init__(
        self,
        client: DatasetClient,
        merchant_datasets: list[tuple[str, str]],
        match_mode: OfferMatchMode = OfferMatchMode.TOKEN,
    ) -> None:
        """Initialize offer resolver.

        Args:
            client: Dataset client used to fetch the CSV files.
            merchant_datasets: (merchant, location) pairs.
            match_mode: How rows are matched against the card.
        """
        self._client = client
        self._merchant_datasets = merchant_datasets
        self._match_mode = match_mode

    @property
    def merchants(self) -> list[str]:
        return [merchant for merchant, _ in self._merchant_datasets]

    @async_log_with_context(operation="offers")
    async def _fetch_and_filter(
        self, card: str, logger: logging.LoggerAdapter
    ) -> OfferLookup:
        datasets = await self._client.fetch_many(
            [location for _, location in self._merchant_datasets]
        )
        merchants = [
            filter_offers(merchant, rows, card, self._match_mode)
            for (merchant, _), rows in zip(
                self._merchant_datasets, datasets, strict=True
            )
        ]
        logger.info(
            "[OFFERS] %s: %s",
            card,
            ", ".join(f"{m.merchant}={len(m.offers)}" for m in merchants),
        )
        return OfferLookup(card=card, merchants=merchants)

    async def resolve(self, card: str) -> OfferLookup:
        """Re-read every dataset and collect the offers for `card`.

        Args:
            card: Confirmed card name.

        Returns:
            Offers per merchant. When the datasets cannot be read the
            lookup is empty and flagged as failed.
        """
        try:
            return await self._fetch_and_filter(card)
        except DatasetError:
            # Already logged with its traceback by _fetch_and_filter.
            return OfferLookup(
                card=card,
                merchants=[
                    MerchantOffers(merchant=merchant)
                    for merchant in self.merchants
                ],
                failed=True,
            )
