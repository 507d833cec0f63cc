"""Domain models for account type reference data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountTypeDTO:
    """Account type as returned by the list projection."""

    id: int
    type: str
    translation_key: str


@dataclass(frozen=True)
class AccountTypeDetail:
    """Account type as returned by lookups by id."""

    id: int
    type: str


__all__ = ["AccountTypeDTO", "AccountTypeDetail"]
