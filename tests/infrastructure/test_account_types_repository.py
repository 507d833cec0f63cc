"""Tests for the SQLAlchemy account types repository."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from src.domain.models.accounts import AccountTypeDetail, AccountTypeDTO
from src.infrastructure import account_types_repository as repository_module
from src.infrastructure.account_types_repository import (
    SqlAlchemyAccountTypesRepository,
    build_update_sql,
)


def test_prepare_storage_creates_table(sqlite_db_port) -> None:
    repository = SqlAlchemyAccountTypesRepository(sqlite_db_port)

    repository.prepare_storage()
    repository.prepare_storage()

    inspector = inspect(sqlite_db_port.engine)
    columns = {col["name"] for col in inspector.get_columns("account_type")}
    assert columns == {"id", "type", "translation_key"}


def test_insert_and_fetch_account_types(account_types_repository) -> None:
    """Rows come back in insertion order with generated ids."""
    first = account_types_repository.insert_account_type(
        {"type": "Asset", "translation_key": ""}
    )
    second = account_types_repository.insert_account_type(
        {"type": "Liability", "translation_key": "ACCOUNT.TYPES.LIABILITY"}
    )

    assert second != first
    assert account_types_repository.fetch_account_types() == [
        AccountTypeDTO(id=first, type="Asset", translation_key=""),
        AccountTypeDTO(
            id=second,
            type="Liability",
            translation_key="ACCOUNT.TYPES.LIABILITY",
        ),
    ]


def test_fetch_account_type_returns_none_for_unknown_id(
    account_types_repository,
) -> None:
    assert account_types_repository.fetch_account_type(123) is None


def test_fetch_account_type_returns_detail(account_types_repository) -> None:
    new_id = account_types_repository.insert_account_type({"type": "Income"})

    assert account_types_repository.fetch_account_type(new_id) == (
        AccountTypeDetail(id=new_id, type="Income")
    )


def test_insert_without_type_violates_storage_constraint(
    account_types_repository,
) -> None:
    with pytest.raises(IntegrityError):
        account_types_repository.insert_account_type({"translation_key": ""})


def test_update_rewrites_and_rereads(account_types_repository) -> None:
    new_id = account_types_repository.insert_account_type({"type": "Income"})

    result = account_types_repository.update_account_type(
        new_id,
        {"type": "Revenue"},
    )

    assert result == AccountTypeDetail(id=new_id, type="Revenue")
    assert account_types_repository.fetch_account_type(new_id) == result


def test_update_with_no_fields_only_rereads(account_types_repository) -> None:
    new_id = account_types_repository.insert_account_type({"type": "Income"})

    result = account_types_repository.update_account_type(new_id, {})

    assert result == AccountTypeDetail(id=new_id, type="Income")


def test_update_returns_none_for_unknown_id(account_types_repository) -> None:
    assert (
        account_types_repository.update_account_type(404, {"type": "Ghost"})
        is None
    )
    assert account_types_repository.fetch_account_types() == []


def test_delete_reports_affected_rows(account_types_repository) -> None:
    new_id = account_types_repository.insert_account_type({"type": "Expense"})

    assert account_types_repository.delete_account_type(new_id) is True
    assert account_types_repository.delete_account_type(new_id) is False
    assert account_types_repository.fetch_account_type(new_id) is None


def test_update_runs_in_a_single_transaction() -> None:
    """Update and re-read share one engine.begin() block."""
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.begin.return_value = context
    conn.execute.return_value.first.return_value = MagicMock(id=3, type="Cash")
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine

    repository = SqlAlchemyAccountTypesRepository(db_port)
    result = repository.update_account_type(3, {"type": "Cash"})

    assert result == AccountTypeDetail(id=3, type="Cash")
    engine.begin.assert_called_once()
    engine.connect.assert_not_called()
    assert conn.execute.call_count == 2
    assert (
        conn.execute.call_args_list[1].args[0]
        is repository_module.SELECT_ACCOUNT_TYPE_SQL
    )


def test_build_update_sql_rejects_unknown_columns() -> None:
    with pytest.raises(ValueError):
        build_update_sql(["type", "id"])


def test_build_update_sql_assigns_known_columns() -> None:
    statement = build_update_sql(["type", "translation_key"])

    assert str(statement) == (
        "UPDATE account_type SET type = :type, "
        "translation_key = :translation_key WHERE id = :id"
    )
