"""Shared fixtures for the test suite."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.account_types_repository import (
    SqlAlchemyAccountTypesRepository,
)


class SqliteDatabasePort:
    """DatabaseEnginePort backed by a shared in-memory SQLite database."""

    def __init__(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    def get_finance_engine(self):
        return self.engine


@pytest.fixture
def sqlite_db_port() -> SqliteDatabasePort:
    port = SqliteDatabasePort()
    yield port
    port.engine.dispose()


@pytest.fixture
def account_types_repository(sqlite_db_port) -> SqlAlchemyAccountTypesRepository:
    repository = SqlAlchemyAccountTypesRepository(sqlite_db_port)
    repository.prepare_storage()
    return repository


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock()
