"""Domain services package."""

from .formatting import (
    FinanceFormatter,
    format_currency,
    format_debit_credit,
    format_percentage,
    indent_account,
    render_amount,
)

__all__ = [
    "FinanceFormatter",
    "format_currency",
    "format_debit_credit",
    "format_percentage",
    "indent_account",
    "render_amount",
]
