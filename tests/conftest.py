"""Shared fixtures: small Swiggy and Zomato offer datasets."""

from __future__ import annotations

from pathlib import Path

import pytest

from card_offer_finder.core.config import Settings, get_settings


SWIGGY_CSV = """\
Applicable to Credit cards,Offer,Coupon code
"HDFC Millennia (Visa), ICICI Amazon Pay",10% off up to Rs 100,HDFC10
HDFC Millennia Plus,15% off on orders above Rs 300,MPLUS15
SBI Cashback,Flat Rs 75 off,SBI75
"""

ZOMATO_CSV = """\
Applicable to Credit cards,Offer,Coupon code
"ICICI Amazon Pay (Rupay), Axis Ace",20% off up to Rs 120,AXISICICI20
SBI Cashback (all variants),Free delivery,SBIFREE
"""

ALL_CARDS = [
    "HDFC Millennia",
    "ICICI Amazon Pay",
    "HDFC Millennia Plus",
    "SBI Cashback",
    "Axis Ace",
]


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    (tmp_path / "Swiggy.csv").write_text(SWIGGY_CSV, encoding="utf-8")
    (tmp_path / "Zomato.csv").write_text(ZOMATO_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(dataset_dir: Path) -> Settings:
    return Settings(dataset_base=str(dataset_dir))


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    get_settings.cache_clear()


@pytest.fixture
def swiggy_csv() -> str:
    return SWIGGY_CSV


@pytest.fixture
def zomato_csv() -> str:
    return ZOMATO_CSV


@pytest.fixture
def all_cards() -> list[str]:
    return list(ALL_CARDS)
