"""Amount-to-words adapter backed by num2words."""

from decimal import ROUND_HALF_UP, Decimal

from num2words import num2words

from src.application.ports.amount_words import AmountToWordsPort
from src.utils.decimal_utils import coerce_decimal


class Num2WordsAmountConverter(AmountToWordsPort):
    """Spell amounts with num2words.

    The whole part is spelled and followed by the currency name; cents,
    when present, are spelled after the currency name.
    """

    def convert(self, value, language: str, currency_name: str) -> str:
        amount = coerce_decimal(value).quantize(
            Decimal("0.01"),
            rounding=ROUND_HALF_UP,
        )
        whole = int(amount)
        cents = int((abs(amount) - abs(whole)) * 100)
        parts = [num2words(whole, lang=language)]
        if currency_name:
            parts.append(currency_name)
        if cents:
            parts.append(num2words(cents, lang=language))
        return " ".join(parts)


__all__ = ["Num2WordsAmountConverter"]
