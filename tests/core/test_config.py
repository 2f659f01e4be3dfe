"""Tests for configuration settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from card_offer_finder.core.config import (
    EmptyQueryPolicy,
    OfferMatchMode,
    Settings,
    get_settings,
)


def test_defaults_match_reference_widget() -> None:
    settings = Settings()

    assert settings.cards_column == "Applicable to Credit cards"
    assert settings.offer_column == "Offer"
    assert settings.coupon_column == "Coupon code"
    assert settings.empty_query_policy is EmptyQueryPolicy.CLEAR
    assert settings.offer_match_mode is OfferMatchMode.TOKEN
    assert settings.show_no_match_while_typing is False
    assert settings.merchant_datasets == [
        ("Swiggy", "Swiggy.csv"),
        ("Zomato", "Zomato.csv"),
    ]


def test_merchant_datasets_resolve_against_directory(tmp_path: Path) -> None:
    settings = Settings(dataset_base=str(tmp_path))

    assert settings.merchant_datasets == [
        ("Swiggy", str(tmp_path / "Swiggy.csv")),
        ("Zomato", str(tmp_path / "Zomato.csv")),
    ]


def test_merchant_datasets_resolve_against_url() -> None:
    settings = Settings(
        dataset_base="https://cdn.example.com/data/",
        zomato_dataset="zomato/latest.csv",
    )

    assert settings.merchant_datasets == [
        ("Swiggy", "https://cdn.example.com/data/Swiggy.csv"),
        ("Zomato", "https://cdn.example.com/data/zomato/latest.csv"),
    ]


def test_absolute_locations_ignore_base(tmp_path: Path) -> None:
    absolute = str(tmp_path / "elsewhere.csv")
    settings = Settings(
        dataset_base="https://cdn.example.com/data",
        swiggy_dataset=absolute,
        zomato_dataset="https://other.example.com/z.csv",
    )

    assert settings.merchant_datasets == [
        ("Swiggy", absolute),
        ("Zomato", "https://other.example.com/z.csv"),
    ]


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(ValidationError, match="must be positive"):
        Settings(http_timeout_seconds=0)


def test_policies_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("EMPTY_QUERY_POLICY", "reset")
    monkeypatch.setenv("OFFER_MATCH_MODE", "substring")
    monkeypatch.setenv("SHOW_NO_MATCH_WHILE_TYPING", "true")

    settings = get_settings()

    assert settings.empty_query_policy is EmptyQueryPolicy.RESET
    assert settings.offer_match_mode is OfferMatchMode.SUBSTRING
    assert settings.show_no_match_while_typing is True


def test_get_settings_is_cached() -> None:
    first = get_settings()
    second = get_settings()

    assert first is second


def test_logging_options_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_CONSOLE", "false")

    settings = get_settings()

    assert settings.log_level == "debug"
    assert settings.log_console is False
