"""Application ports package."""

from .account_types_repository import AccountTypesRepositoryPort
from .amount_words import AmountToWordsPort
from .database import DatabaseEnginePort

__all__ = [
    "AccountTypesRepositoryPort",
    "AmountToWordsPort",
    "DatabaseEnginePort",
]
