"""Display helpers for financial documents.

Every helper is a pure function of its inputs: currency amounts rendered
through a currency profile, debit/credit cells, percentages, chart of
accounts indentation and amounts spelled as words.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from markupsafe import Markup

from src.domain.constants import (
    DEBIT_CREDIT_CELL_CLASS,
    INDENTATION_STEP,
    NEGATIVE_AMOUNT_CLASS,
)
from src.domain.errors import ConfigurationError
from src.domain.models.currency import (
    DEFAULT_CURRENCY_PROFILES,
    CurrencyProfile,
    CurrencyProfiles,
)
from src.utils.decimal_utils import coerce_decimal, is_real_number

if TYPE_CHECKING:
    from src.application.ports.amount_words import AmountToWordsPort


def _quantum(precision: int) -> Decimal:
    return Decimal(1).scaleb(-precision)


def _round_half_up(value: Decimal, precision: int) -> Decimal:
    # Context precision must cover every digit of the rounded result.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        return value.quantize(_quantum(precision), rounding=ROUND_HALF_UP)


def _group_digits(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(
        digits[index:index + 3] for index in range(head, len(digits), 3)
    )
    return separator.join(groups)


def render_amount(value, profile: CurrencyProfile) -> str:
    """Render a numeric value with a currency profile.

    A negative sign is placed directly before the value, so a ``"%s%v"``
    profile with symbol ``$`` renders ``-3`` as ``"$-3"``.

    Args:
        value: Raw numeric value; malformed input is treated as zero.
        profile: Profile providing symbol, precision and separators.

    Returns:
        str: Formatted amount, e.g. ``"1.234,50 FC"``.
    """
    amount = coerce_decimal(value)
    precision = max(int(profile.precision), 0)
    rounded = _round_half_up(amount.copy_abs(), precision)
    whole, _, fraction = f"{rounded:f}".partition(".")
    number = _group_digits(whole, profile.thousand)
    if precision:
        number = f"{number}{profile.decimal}{fraction}"

    if amount < 0 and rounded != 0:
        number = f"-{number}"
    return profile.format.replace("%v", number).replace("%s", profile.symbol)


class FinanceFormatter:
    """Formatting helpers bound to a set of currency profiles.

    Args:
        profiles: Currency profiles selected by currency id.
        amount_to_words: Optional converter used by ``amount_to_words``.
    """

    def __init__(
        self,
        profiles: CurrencyProfiles = DEFAULT_CURRENCY_PROFILES,
        amount_to_words: AmountToWordsPort | None = None,
    ) -> None:
        self._profiles = profiles
        self._amount_to_words = amount_to_words

    @property
    def profiles(self) -> CurrencyProfiles:
        return self._profiles

    def format_currency(self, value=0, currency_id=None) -> str:
        """Format a monetary amount for the given currency id."""
        return render_amount(value, self._profiles.resolve(currency_id))

    def format_debit_credit(self, value=0, currency_id=None) -> Markup:
        """Render an amount as a table cell, negatives parenthesized.

        Args:
            value: Signed amount; malformed input is treated as zero.
            currency_id: Currency selector.

        Returns:
            Markup: ``<span>`` fragment safe to embed in templates.
        """
        amount = coerce_decimal(value)
        classes = [DEBIT_CREDIT_CELL_CLASS]
        if amount < 0:
            classes.append(NEGATIVE_AMOUNT_CLASS)
            magnitude = self.format_currency(amount.copy_abs(), currency_id)
            text = f"({magnitude})"
        else:
            text = self.format_currency(amount, currency_id)
        return Markup('<span class="{}">{}</span>').format(
            " ".join(classes),
            text,
        )

    @staticmethod
    def format_percentage(value=0, precision: int = 2) -> str:
        """Format a ratio as a percentage.

        Zero, missing and non-finite values all render as an empty string.

        Args:
            value: Ratio, ``0.1234`` meaning 12.34%.
            precision: Number of fractional digits.

        Returns:
            str: Percentage such as ``"12.34%"`` or ``""``.
        """
        if not value or not is_real_number(value):
            return ""
        ratio = Decimal(str(value))
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(ratio.as_tuple().digits))
            percent = ratio.scaleb(2)
        fixed = _round_half_up(percent, max(int(precision), 0))
        return f"{fixed:f}%"

    @staticmethod
    def indent_account(depth) -> int | float:
        """Return the indentation (px) of an account row at ``depth``."""
        number = coerce_decimal(depth)
        if not number:
            return 0
        indent = number * INDENTATION_STEP
        if indent == indent.to_integral_value():
            return int(indent)
        return float(indent)

    def amount_to_words(self, value, language, currency_name) -> str:
        """Spell an amount using the configured converter.

        Raises:
            ConfigurationError: If no converter was injected.
        """
        if self._amount_to_words is None:
            raise ConfigurationError("No amount-to-words converter configured")
        return self._amount_to_words.convert(value, language, currency_name)


_default_formatter = FinanceFormatter()


def format_currency(value=0, currency_id=None) -> str:
    return _default_formatter.format_currency(value, currency_id)


def format_debit_credit(value=0, currency_id=None) -> Markup:
    return _default_formatter.format_debit_credit(value, currency_id)


def format_percentage(value=0, precision: int = 2) -> str:
    return FinanceFormatter.format_percentage(value, precision)


def indent_account(depth) -> int | float:
    return FinanceFormatter.indent_account(depth)


__all__ = [
    "FinanceFormatter",
    "render_amount",
    "format_currency",
    "format_debit_credit",
    "format_percentage",
    "indent_account",
]
