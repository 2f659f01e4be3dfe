"""Client for fetching merchant offer datasets from disk or over HTTP."""

import asyncio
import io
from pathlib import Path

import httpx
import pandas as pd

from card_offer_finder.core.config import Settings
from card_offer_finder.core.logger import get_logger
from card_offer_finder.core.models import OfferRow


logger = get_logger(__name__)


class DatasetError(Exception):
    """Raised when a dataset cannot be fetched or parsed."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"{location}: {reason}")
        self.location = location
        self.reason = reason


class DatasetClient:
    """Fetches CSV offer datasets and parses them into OfferRow models."""

    def __init__(
        self,
        cards_column: str = "Applicable to Credit cards",
        offer_column: str = "Offer",
        coupon_column: str = "Coupon code",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize dataset client.

        Args:
            cards_column: Header of the applicable cards column.
            offer_column: Header of the offer description column.
            coupon_column: Header of the coupon code column.
            timeout: Timeout in seconds for HTTP fetches.
            transport: Optional httpx transport, used by tests.
        """
        self._columns = {
            cards_column: "applicable_cards",
            offer_column: "offer",
            coupon_column: "coupon_code",
        }
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatasetClient":
        """Build a client from application settings."""
        return cls(
            cards_column=settings.cards_column,
            offer_column=settings.offer_column,
            coupon_column=settings.coupon_column,
            timeout=settings.http_timeout_seconds,
        )

    @staticmethod
    def _is_url(location: str) -> bool:
        return location.startswith(("http://", "https://"))

    async def _read_text(
        self, location: str, http_client: httpx.AsyncClient
    ) -> str:
        """Read the raw CSV text behind a location.

        Raises:
            DatasetError: If the file or URL cannot be read or decoded.
        """
        if self._is_url(location):
            try:
                response = await http_client.get(location)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as error:
                raise DatasetError(location, str(error)) from error
            return response.text.lstrip("\ufeff")

        try:
            return await asyncio.to_thread(
                Path(location).read_text, encoding="utf-8-sig"
            )
        except (OSError, UnicodeError) as error:
            raise DatasetError(location, str(error)) from error

    def parse_rows(
        self, text: str, location: str = "<memory>"
    ) -> list[OfferRow]:
        """Parse CSV text with a header row into OfferRow models.

        Args:
            text: CSV content.
            location: Where the text came from, for error messages.

        Returns:
            One OfferRow per non-blank data row, in file order.

        Raises:
            DatasetError: If the CSV is empty, malformed, or lacks a
                required column.
        """
        try:
            frame = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as error:
            raise DatasetError(location, f"unreadable CSV: {error}") from error

        frame.columns = [str(column).strip() for column in frame.columns]
        missing = [column for column in self._columns if column not in frame]
        if missing:
            msg = f"missing column(s) {', '.join(missing)}"
            raise DatasetError(location, msg)

        frame = frame[list(self._columns)].rename(columns=self._columns)
        records = frame.to_dict(orient="records")
        return [OfferRow(**record) for record in records]

    async def fetch_rows(
        self,
        location: str,
        http_client: httpx.AsyncClient | None = None,
    ) -> list[OfferRow]:
        """Fetch and parse a single dataset.

        Args:
            location: Local path or http(s) URL of the CSV.
            http_client: Optional shared client for URL locations.

        Returns:
            Parsed dataset rows.
        """
        if http_client is None:
            async with self._http_client() as owned_client:
                return await self.fetch_rows(location, owned_client)

        text = await self._read_text(location, http_client)
        rows = self.parse_rows(text, location)
        logger.debug("[DATASET] Parsed %d rows from %s", len(rows), location)
        return rows

    async def fetch_many(self, locations: list[str]) -> list[list[OfferRow]]:
        """Fetch several datasets concurrently and join the results.

        Args:
            locations: Dataset locations.

        Returns:
            Parsed rows per location, in the order given.

        Raises:
            DatasetError: If any dataset fails.
        """
        async with self._http_client() as http_client:
            return list(
                await asyncio.gather(
                    *(
                        self.fetch_rows(location, http_client)
                        for location in locations
                    )
                )
            )

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        )
