"""FastAPI dependency providers."""

from src.application.use_cases.account_types import AccountTypesUseCase
from src.infrastructure.container import build_account_types_use_case


def get_account_types_use_case() -> AccountTypesUseCase:
    """Return the account types use case for a request."""
    return build_account_types_use_case()


__all__ = ["get_account_types_use_case"]
