"""Port for reading and writing account types."""

from typing import Any, Mapping, Protocol

from src.domain.models.accounts import AccountTypeDetail, AccountTypeDTO


class AccountTypesRepositoryPort(Protocol):
    """Port exposing storage access to account types."""

    def prepare_storage(self) -> None:
        """Ensure the account type table exists."""

    def fetch_account_types(self) -> list[AccountTypeDTO]:
        """Return every account type in storage order."""

    def fetch_account_type(
        self,
        account_type_id: int,
    ) -> AccountTypeDetail | None:
        """Return one account type, or None when the id is unknown."""

    def insert_account_type(self, values: Mapping[str, Any]) -> int:
        """Insert an account type and return its generated id."""

    def update_account_type(
        self,
        account_type_id: int,
        values: Mapping[str, Any],
    ) -> AccountTypeDetail | None:
        """Update then re-read an account type atomically.

        Returns None when the id is unknown.
        """

    def delete_account_type(self, account_type_id: int) -> bool:
        """Delete an account type; return False when the id is unknown."""


__all__ = ["AccountTypesRepositoryPort"]
