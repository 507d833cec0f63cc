"""Use case exposing CRUD operations on account types.

Caller payloads are free-form mappings: ``id`` is always discarded so a
record's identity can never be set or changed from the outside, and new
records always start with an empty ``translation_key``.
"""

from __future__ import annotations

from typing import Any, Mapping

from src.application.ports.account_types_repository import (
    AccountTypesRepositoryPort,
)
from src.domain.constants import ACCOUNT_TYPE_COLUMNS
from src.domain.errors import AccountTypeNotFoundError
from src.domain.models.accounts import AccountTypeDetail, AccountTypeDTO
from src.infrastructure.logging.logger import get_app_logger


def _writable_fields(payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the storable columns of a payload, without ``id``."""
    data = dict(payload or {})
    data.pop("id", None)
    return {
        column: data[column]
        for column in ACCOUNT_TYPE_COLUMNS
        if column in data
    }


class AccountTypesUseCase:
    """List, read, create, update and delete account types."""

    def __init__(
        self,
        repository: AccountTypesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Storage port for account types.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def list(self) -> list[AccountTypeDTO]:
        """Return every account type."""
        return self._repository.fetch_account_types()

    def detail(self, account_type_id: int) -> AccountTypeDetail:
        """Return one account type.

        Raises:
            AccountTypeNotFoundError: If no account type has this id.
        """
        account_type = self._repository.fetch_account_type(account_type_id)
        if account_type is None:
            raise AccountTypeNotFoundError(account_type_id)
        return account_type

    def create(self, payload: Mapping[str, Any] | None) -> int:
        """Create an account type and return its id.

        Args:
            payload: Caller-supplied fields; ``id`` is ignored.

        Returns:
            int: Generated id.
        """
        values = _writable_fields(payload)
        # TODO: let callers set translation_key once its use across the
        # ledger screens is designed.
        values["translation_key"] = ""
        account_type_id = self._repository.insert_account_type(values)
        self._logger.info(f"Created account type {account_type_id}")
        return account_type_id

    def update(
        self,
        account_type_id: int,
        payload: Mapping[str, Any] | None,
    ) -> AccountTypeDetail:
        """Apply a partial update and return the stored account type.

        Raises:
            AccountTypeNotFoundError: If no account type has this id.
        """
        values = _writable_fields(payload)
        account_type = self._repository.update_account_type(
            account_type_id,
            values,
        )
        if account_type is None:
            raise AccountTypeNotFoundError(account_type_id)
        changed = ", ".join(values) or "no fields"
        self._logger.info(
            f"Updated account type {account_type_id} ({changed})"
        )
        return account_type

    def remove(self, account_type_id: int) -> None:
        """Delete an account type.

        Raises:
            AccountTypeNotFoundError: If no account type has this id.
        """
        if not self._repository.delete_account_type(account_type_id):
            raise AccountTypeNotFoundError(account_type_id)
        self._logger.info(f"Deleted account type {account_type_id}")


__all__ = ["AccountTypesUseCase"]
