"""Clients for external data sources."""

from card_offer_finder.clients.dataset_client import (
    DatasetClient,
    DatasetError,
)


__all__ = [
    "DatasetClient",
    "DatasetError",
]
