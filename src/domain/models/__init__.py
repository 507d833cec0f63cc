"""Domain models package."""

from .accounts import AccountTypeDetail, AccountTypeDTO
from .currency import (
    DEFAULT_CURRENCY_PROFILES,
    CurrencyProfile,
    CurrencyProfiles,
)

__all__ = [
    "AccountTypeDTO",
    "AccountTypeDetail",
    "CurrencyProfile",
    "CurrencyProfiles",
    "DEFAULT_CURRENCY_PROFILES",
]
