"""Tests for the num2words amount converter."""

from src.infrastructure.amount_words import Num2WordsAmountConverter


def test_convert_spells_whole_amount_with_currency() -> None:
    converter = Num2WordsAmountConverter()

    assert converter.convert(42, "en", "dollars") == "forty-two dollars"


def test_convert_spells_cents_after_currency() -> None:
    converter = Num2WordsAmountConverter()

    assert converter.convert("42.50", "en", "dollars") == (
        "forty-two dollars fifty"
    )


def test_convert_uses_requested_language() -> None:
    converter = Num2WordsAmountConverter()

    assert converter.convert(2, "fr", "francs") == "deux francs"


def test_convert_without_currency_name() -> None:
    assert Num2WordsAmountConverter().convert(7, "en", "") == "seven"
