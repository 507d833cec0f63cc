"""CLI adapter spelling an amount as words."""

import argparse

from src.infrastructure.container import build_finance_formatter
from src.infrastructure.settings import FinanceSettings


def _build_parser(default_language: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Spell a monetary amount as words.",
    )
    parser.add_argument("value", help="Amount to spell, e.g. 1234.50")
    parser.add_argument(
        "--lang",
        default=default_language,
        help="num2words language code (default: %(default)s)",
    )
    parser.add_argument(
        "--currency",
        default="",
        help="Currency name appended after the whole part",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Print the spelled amount."""
    settings = FinanceSettings.from_env()
    args = _build_parser(settings.amount_words_language).parse_args(argv)
    formatter = build_finance_formatter(settings)
    print(formatter.amount_to_words(args.value, args.lang, args.currency))


if __name__ == "__main__":  # pragma: no cover
    main()
