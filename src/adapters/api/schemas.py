"""Response schemas for the account types API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.accounts import AccountTypeDetail, AccountTypeDTO


class AccountTypeOut(BaseModel):
    """Account type as listed, with its translation key."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    translation_key: Optional[str] = Field(default="", alias="translationKey")

    @classmethod
    def from_dto(cls, dto: AccountTypeDTO) -> "AccountTypeOut":
        return cls(
            id=dto.id,
            type=dto.type,
            translation_key=dto.translation_key,
        )


class AccountTypeDetailOut(BaseModel):
    """Account type returned by lookups by id."""

    id: int
    type: str

    @classmethod
    def from_detail(cls, detail: AccountTypeDetail) -> "AccountTypeDetailOut":
        return cls(id=detail.id, type=detail.type)


class AccountTypeCreated(BaseModel):
    """Identifier of a newly created account type."""

    id: int


__all__ = ["AccountTypeOut", "AccountTypeDetailOut", "AccountTypeCreated"]
