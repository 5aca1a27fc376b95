"""Tests for the conversion engine and rounding helpers."""

import json

import pytest

from app.services.conversion import convert_price, convert_prices
from app.services.money import round2, round_whole
from app.services.presenter import clipboard_payload, render_result


def test_round2_half_away_from_zero() -> None:
    assert round2(1.005) == 1.01
    assert round2(2.675) == 2.68
    assert round2(10) == 10.0


def test_round_whole_half_away_from_zero() -> None:
    assert round_whole(87.6) == 88
    assert round_whole(2.5) == 3
    assert round_whole(87.4) == 87
    assert isinstance(round_whole(1.2), int)


def test_end_to_end_without_rounding() -> None:
    result = convert_prices({"starter": 100}, ["EUR"], {"EUR": 0.9}, False)

    assert result == {"USD": {"starter": 100}, "EUR": {"starter": 90}}


def test_end_to_end_with_rounding() -> None:
    result = convert_prices({"starter": 100}, ["EUR"], {"EUR": 0.876}, True)

    assert result["EUR"]["starter"] == 88


@pytest.mark.parametrize("round_numbers", [False, True])
def test_base_entry_is_verbatim_catalog(round_numbers) -> None:
    catalog = {"starter": 99.99, "pro": 0.333}

    result = convert_prices(catalog, ["EUR"], {"EUR": 0.9}, round_numbers)

    assert result["USD"] == catalog
    assert result["USD"] is not catalog


def test_each_price_uses_rounding_policy() -> None:
    catalog = {"starter": 99.0, "pro": 199.0, "business": 299.0}
    rates = {"AED": 3.6725, "ARS": 970.5}

    plain = convert_prices(catalog, ["AED", "ARS"], rates, False)
    whole = convert_prices(catalog, ["AED", "ARS"], rates, True)

    for code, rate in rates.items():
        for name, price in catalog.items():
            assert plain[code][name] == round2(price * rate)
            assert whole[code][name] == round_whole(price * rate)


def test_unknown_currency_is_skipped() -> None:
    result = convert_prices({"starter": 10}, ["EUR", "XYZ"], {"EUR": 0.5}, False)

    assert "XYZ" not in result
    assert list(result) == ["USD", "EUR"]


def test_zero_rate_is_skipped() -> None:
    result = convert_prices({"starter": 10}, ["EUR"], {"EUR": 0}, False)

    assert result == {"USD": {"starter": 10}}


def test_requested_base_currency_stays_verbatim() -> None:
    result = convert_prices({"starter": 10.555}, ["USD"], {"USD": 1.0}, True)

    assert result == {"USD": {"starter": 10.555}}


def test_result_order_follows_requested_codes() -> None:
    rates = {"GBP": 0.8, "AED": 3.67, "EUR": 0.9}

    result = convert_prices({"starter": 1}, ["GBP", "AED", "EUR"], rates)

    assert list(result) == ["USD", "GBP", "AED", "EUR"]


def test_convert_price_rounds_hundredths_by_default() -> None:
    assert convert_price(99, 3.6725) == 363.58


def test_render_result_is_indented_and_ordered() -> None:
    result = {"USD": {"starter": 100}, "EUR": {"starter": 90.0}}

    text = render_result(result)

    assert text.startswith('{\n    "USD": {\n        "starter": 100')
    assert text.index('"USD"') < text.index('"EUR"')
    assert json.loads(text) == result


def test_render_result_writes_whole_numbers_without_fraction() -> None:
    result = convert_prices({"starter": 100.0, "pro": 12.5}, ["EUR"], {"EUR": 0.9}, False)

    text = render_result(result)

    assert '"starter": 100,' in text
    assert '"starter": 90,' in text
    assert '"pro": 11.25' in text
    assert ".0," not in text and ".0\n" not in text


def test_clipboard_payload_confirms_copy() -> None:
    payload = clipboard_payload({"USD": {"starter": 1}})

    assert payload["message"] == "Copied to clipboard!"
    assert json.loads(payload["text"]) == {"USD": {"starter": 1}}
