"""Domain constants for finance display."""

# Pixels added per level of nesting in the chart of accounts.
INDENTATION_STEP = 40

ALTERNATE_CURRENCY_ID = 1

DEBIT_CREDIT_CELL_CLASS = "text-right"
NEGATIVE_AMOUNT_CLASS = "text-danger"

ACCOUNT_TYPE_COLUMNS = ("type", "translation_key")


__all__ = [
    "INDENTATION_STEP",
    "ALTERNATE_CURRENCY_ID",
    "DEBIT_CREDIT_CELL_CLASS",
    "NEGATIVE_AMOUNT_CLASS",
    "ACCOUNT_TYPE_COLUMNS",
]
