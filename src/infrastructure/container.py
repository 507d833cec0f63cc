"""Composition root for wiring infrastructure adapters."""

from src.application.ports.account_types_repository import (
    AccountTypesRepositoryPort,
)
from src.application.ports.amount_words import AmountToWordsPort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.account_types import AccountTypesUseCase
from src.domain.services.formatting import FinanceFormatter
from src.infrastructure.account_types_repository import (
    SqlAlchemyAccountTypesRepository,
)
from src.infrastructure.amount_words import Num2WordsAmountConverter
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_account_types_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountTypesRepositoryPort:
    """Return the account types repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountTypesRepository(resolved_db)


def build_account_types_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> AccountTypesUseCase:
    """Return the account types use case wired to SQLAlchemy storage."""
    return AccountTypesUseCase(
        build_account_types_repository(db_port),
        logger=get_app_logger(),
    )


def build_amount_words_converter() -> AmountToWordsPort:
    """Return the amount-to-words converter."""
    return Num2WordsAmountConverter()


def build_finance_formatter(
    settings: FinanceSettings | None = None,
) -> FinanceFormatter:
    """Return a formatter configured from settings."""
    resolved_settings = settings or FinanceSettings.from_env()
    return FinanceFormatter(
        profiles=resolved_settings.load_currency_profiles(),
        amount_to_words=build_amount_words_converter(),
    )


__all__ = [
    "build_database_adapter",
    "build_account_types_repository",
    "build_account_types_use_case",
    "build_amount_words_converter",
    "build_finance_formatter",
]
