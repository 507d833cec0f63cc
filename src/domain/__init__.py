"""Domain package for business rules and core models."""

from .constants import INDENTATION_STEP
from .errors import (
    AccountTypeNotFoundError,
    ConfigurationError,
    FinanceError,
    NotFoundError,
)
from .models import (
    DEFAULT_CURRENCY_PROFILES,
    AccountTypeDetail,
    AccountTypeDTO,
    CurrencyProfile,
    CurrencyProfiles,
)
from .services import (
    FinanceFormatter,
    format_currency,
    format_debit_credit,
    format_percentage,
    indent_account,
)

__all__ = [
    "INDENTATION_STEP",
    "FinanceError",
    "NotFoundError",
    "AccountTypeNotFoundError",
    "ConfigurationError",
    "AccountTypeDTO",
    "AccountTypeDetail",
    "CurrencyProfile",
    "CurrencyProfiles",
    "DEFAULT_CURRENCY_PROFILES",
    "FinanceFormatter",
    "format_currency",
    "format_debit_credit",
    "format_percentage",
    "indent_account",
]
