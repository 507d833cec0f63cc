"""Jinja2 filters exposing the finance display helpers to templates."""

from jinja2 import Environment

from src.domain.services.formatting import FinanceFormatter


def register_finance_filters(
    env: Environment,
    formatter: FinanceFormatter | None = None,
) -> Environment:
    """Register finance filters on a Jinja2 environment.

    Filters: ``currency``, ``debcred``, ``percentage``, ``indentAccount``
    and ``numberToText``. ``debcred`` returns markup, so it is not escaped
    again under autoescape.

    Args:
        env: Environment to extend.
        formatter: Formatter to bind; defaults to the built-in profiles.

    Returns:
        Environment: The same environment, for chaining.
    """
    resolved = formatter or FinanceFormatter()
    env.filters.update(
        {
            "currency": resolved.format_currency,
            "debcred": resolved.format_debit_credit,
            "percentage": resolved.format_percentage,
            "indentAccount": resolved.indent_account,
            "numberToText": resolved.amount_to_words,
        }
    )
    return env


__all__ = ["register_finance_filters"]
