"""Command line entry point for Card Offer Finder."""

import argparse
import asyncio
import sys

from card_offer_finder.core.config import Settings, get_settings
from card_offer_finder.core.logger import get_logger, setup_logging
from card_offer_finder.services.offer_panels import render_view
from card_offer_finder.services.search_session import SearchSession


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the card-offers command."""
    parser = argparse.ArgumentParser(
        prog="card-offers",
        description="Find Swiggy and Zomato offers for a credit card.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("cards", help="List every known card name")

    search = commands.add_parser("search", help="Suggest cards by prefix")
    search.add_argument("query", help="Start of a card name")

    offers = commands.add_parser("offers", help="Show offers for a card")
    offers.add_argument("card", help="Full card name (case-insensitive)")

    return parser


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Run one CLI command.

    Args:
        args: Parsed command line arguments.
        settings: Application settings.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        session = SearchSession.from_settings(settings)
        catalog = await session.mount()
        if not catalog:
            logger.error("[MAIN] No card names loaded; check the datasets")
            return 1

        if args.command == "cards":
            print("\n".join(catalog.names))
            return 0

        if args.command == "search":
            view = session.type(args.query)
        else:
            view = await session.submit(args.card)

        print(render_view(view))
        return 0

    except Exception:
        logger.exception("[MAIN] Command %s failed", args.command)
        return 1


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the card-offers console script."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    logger.debug("[MAIN] Running %s", args.command)

    exit_code = asyncio.run(run_command(args, settings))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
