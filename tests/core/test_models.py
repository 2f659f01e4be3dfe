"""Tests for offer data models."""

from __future__ import annotations

from card_offer_finder.core.models import (
    MerchantOffers,
    Offer,
    OfferLookup,
    OfferRow,
    normalize_card_name,
    split_card_names,
)


def test_normalize_card_name_strips_annotation_and_whitespace() -> None:
    assert normalize_card_name("  HDFC Millennia (Visa) ") == "HDFC Millennia"
    assert normalize_card_name("Axis Ace") == "Axis Ace"
    assert normalize_card_name("SBI (Elite) (2024)") == "SBI"


def test_split_card_names_example_row() -> None:
    assert split_card_names("HDFC Millennia (Visa), ICICI Amazon Pay") == [
        "HDFC Millennia",
        "ICICI Amazon Pay",
    ]


def test_split_card_names_drops_empty_entries() -> None:
    assert split_card_names("A, ,B,,(note only)") == ["A", "B"]
    assert split_card_names("") == []


def test_offer_row_blank_cells_become_empty_strings() -> None:
    row = OfferRow(applicable_cards=None, offer=float("nan"), coupon_code=None)

    assert row.applicable_cards == ""
    assert row.offer == ""
    assert row.coupon_code == ""
    assert row.card_names == []


def test_offer_row_projects_offer() -> None:
    row = OfferRow(
        applicable_cards="Axis Ace",
        offer="20% off",
        coupon_code="ACE20",
    )

    assert row.to_offer() == Offer(offer="20% off", coupon="ACE20")


def test_offer_lookup_has_offers_and_offers_for() -> None:
    offer = Offer(offer="Free delivery", coupon="FREE")
    lookup = OfferLookup(
        card="SBI Cashback",
        merchants=[
            MerchantOffers(merchant="Swiggy"),
            MerchantOffers(merchant="Zomato", offers=[offer]),
        ],
    )

    assert lookup.has_offers is True
    assert lookup.offers_for("Zomato") == [offer]
    assert lookup.offers_for("Swiggy") == []
    assert lookup.offers_for("Dineout") == []


def test_offer_lookup_without_offers() -> None:
    lookup = OfferLookup(
        card="Unknown",
        merchants=[MerchantOffers(merchant="Swiggy")],
    )

    assert lookup.has_offers is False
    assert lookup.failed is False
