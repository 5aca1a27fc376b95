"""Tests for price catalog operations."""

import math

import pytest

from app.services.catalog import (
    DEFAULT_PACKAGES,
    add_entry,
    new_catalog,
    parse_price,
    remove_entry,
    set_price,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", 12.5),
        (" 7 ", 7.0),
        (42, 42.0),
        (3.25, 3.25),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("12abc", 0.0),
        ("nan", 0.0),
        (math.inf, 0.0),
        ("-5", 0.0),
        (True, 0.0),
    ],
)
def test_parse_price_falls_back_to_zero(raw, expected) -> None:
    assert parse_price(raw) == expected


def test_parse_price_custom_default() -> None:
    assert parse_price("oops", default=1.5) == 1.5


def test_new_catalog_uses_default_packages_in_order() -> None:
    catalog = new_catalog()

    assert list(catalog) == list(DEFAULT_PACKAGES)
    assert catalog["starter"] == 99
    assert catalog["hosting12Month"] == 6


def test_set_price_updates_only_named_entry() -> None:
    catalog = {"starter": 99.0, "pro": 199.0}

    updated = set_price(catalog, "pro", "250")

    assert updated == {"starter": 99.0, "pro": 250.0}
    assert catalog == {"starter": 99.0, "pro": 199.0}


def test_set_price_invalid_text_degrades_to_zero() -> None:
    assert set_price({"starter": 99.0}, "starter", "ninety")["starter"] == 0.0


def test_set_price_on_unknown_name_is_noop() -> None:
    catalog = {"starter": 99.0}

    assert set_price(catalog, " ", "5") == {"starter": 99.0}
    assert set_price(catalog, "agency", "5") == {"starter": 99.0}


def test_add_entry_appends_at_zero() -> None:
    updated = add_entry({"starter": 99.0}, "agency")

    assert list(updated.items()) == [("starter", 99.0), ("agency", 0.0)]


def test_add_existing_entry_keeps_value() -> None:
    catalog = {"starter": 99.0}

    assert add_entry(catalog, "starter") == {"starter": 99.0}


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_blank_entry_is_noop(name) -> None:
    assert add_entry({"starter": 99.0}, name) == {"starter": 99.0}


def test_remove_entry() -> None:
    assert remove_entry({"starter": 99.0, "pro": 199.0}, "pro") == {"starter": 99.0}


def test_remove_missing_entry_is_noop() -> None:
    catalog = {"starter": 99.0}

    assert remove_entry(catalog, "missing") == catalog
