"""Plain-text rendering of the search widget."""

from card_offer_finder.core.models import Offer, OfferLookup, SearchView


TITLE = "Offers on Zomato and Swiggy"
DEFAULT_PANEL_ORDER = ("Zomato", "Swiggy")


def format_offer(offer: Offer) -> str:
    """Format one offer card."""
    return f"  Offer: {offer.offer}\n  Coupon Code: {offer.coupon}"


def format_panels(
    lookup: OfferLookup,
    panel_order: tuple[str, ...] = DEFAULT_PANEL_ORDER,
) -> list[str]:
    """Format one panel per merchant that has offers.

    Merchants named in `panel_order` come first, the rest follow in
    lookup order. Merchants without offers get no panel.
    """
    known = [m.merchant for m in lookup.merchants]
    ordered = [name for name in panel_order if name in known]
    ordered += [name for name in known if name not in ordered]

    panels = []
    for merchant in ordered:
        offers = lookup.offers_for(merchant)
        if not offers:
            continue
        body = "\n\n".join(format_offer(offer) for offer in offers)
        panels.append(f"Offers on {merchant}\n{body}")
    return panels


def render_view(
    view: SearchView,
    panel_order: tuple[str, ...] = DEFAULT_PANEL_ORDER,
    title: str | None = TITLE,
) -> str:
    """Render a search view as the text a user would see."""
    sections: list[str] = []
    if title:
        sections.append(title)
    if view.query:
        sections.append(f"Search: {view.query}")
    if view.suggestions:
        sections.append("\n".join(f"- {card}" for card in view.suggestions))
    if view.message:
        sections.append(view.message)
    if view.lookup is not None:
        sections.extend(format_panels(view.lookup, panel_order))
    return "\n\n".join(sections)
