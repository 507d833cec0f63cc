"""SQLAlchemy-backed repository for account types."""

from typing import Any, Mapping

from sqlalchemy import Column, Integer, MetaData, String, Table, text

from src.application.ports.account_types_repository import (
    AccountTypesRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import ACCOUNT_TYPE_COLUMNS
from src.domain.models.accounts import AccountTypeDetail, AccountTypeDTO

metadata = MetaData()

account_type_table = Table(
    "account_type",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("type", String(35), nullable=False),
    Column("translation_key", String(35), nullable=True),
)

SELECT_ACCOUNT_TYPES_SQL = text(
    """
    SELECT id, type, translation_key
    FROM account_type
    """
)

SELECT_ACCOUNT_TYPE_SQL = text(
    """
    SELECT at.id, at.type
    FROM account_type AS at
    WHERE at.id = :id
    """
)

INSERT_ACCOUNT_TYPE_SQL = text(
    """
    INSERT INTO account_type (type, translation_key)
    VALUES (:type, :translation_key)
    RETURNING id
    """
)

DELETE_ACCOUNT_TYPE_SQL = text("DELETE FROM account_type WHERE id = :id")


def build_update_sql(columns: list[str]):
    """Build the UPDATE statement for a set of known columns.

    Args:
        columns: Columns to assign; each must be an account type column.

    Returns:
        TextClause: Parametrized UPDATE statement.
    """
    unknown = set(columns) - set(ACCOUNT_TYPE_COLUMNS)
    if unknown:
        raise ValueError(f"Unknown account type columns: {sorted(unknown)}")
    assignments = ", ".join(f"{column} = :{column}" for column in columns)
    return text(f"UPDATE account_type SET {assignments} WHERE id = :id")


class SqlAlchemyAccountTypesRepository(AccountTypesRepositoryPort):
    """Repository backed by SQLAlchemy for account types."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Create the account_type table when it does not exist."""
        engine = self._db_port.get_finance_engine()
        metadata.create_all(engine, tables=[account_type_table])

    def fetch_account_types(self) -> list[AccountTypeDTO]:
        """Return account types in storage order."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNT_TYPES_SQL).all()
        return [
            AccountTypeDTO(
                id=row.id,
                type=row.type,
                translation_key=row.translation_key,
            )
            for row in rows
        ]

    def fetch_account_type(
        self,
        account_type_id: int,
    ) -> AccountTypeDetail | None:
        """Return the account type with this id, if any."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_TYPE_SQL,
                {"id": account_type_id},
            ).first()
        if row is None:
            return None
        return AccountTypeDetail(id=row.id, type=row.type)

    def insert_account_type(self, values: Mapping[str, Any]) -> int:
        """Insert an account type and return the generated id."""
        params = {
            "type": values.get("type"),
            "translation_key": values.get("translation_key", ""),
        }
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            return conn.execute(INSERT_ACCOUNT_TYPE_SQL, params).scalar_one()

    def update_account_type(
        self,
        account_type_id: int,
        values: Mapping[str, Any],
    ) -> AccountTypeDetail | None:
        """Update and re-read an account type in a single transaction.

        Args:
            account_type_id: Id of the account type to update.
            values: Column values to assign.

        Returns:
            AccountTypeDetail | None: Stored account type, or None when the
            id is unknown.
        """
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            if values:
                conn.execute(
                    build_update_sql(list(values)),
                    {**values, "id": account_type_id},
                )
            row = conn.execute(
                SELECT_ACCOUNT_TYPE_SQL,
                {"id": account_type_id},
            ).first()
        if row is None:
            return None
        return AccountTypeDetail(id=row.id, type=row.type)

    def delete_account_type(self, account_type_id: int) -> bool:
        """Delete an account type; return False when nothing was deleted."""
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_ACCOUNT_TYPE_SQL,
                {"id": account_type_id},
            )
            deleted = result.rowcount
        return deleted > 0


__all__ = [
    "SqlAlchemyAccountTypesRepository",
    "account_type_table",
    "build_update_sql",
    "SELECT_ACCOUNT_TYPES_SQL",
    "SELECT_ACCOUNT_TYPE_SQL",
    "INSERT_ACCOUNT_TYPE_SQL",
    "DELETE_ACCOUNT_TYPE_SQL",
]
