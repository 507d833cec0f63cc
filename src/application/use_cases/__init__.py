"""Application use cases package."""

from .account_types import AccountTypesUseCase

__all__ = ["AccountTypesUseCase"]
