"""Domain error hierarchy."""


class FinanceError(Exception):
    """Base exception for finance errors."""


class NotFoundError(FinanceError):
    """Raised when a referenced entity does not exist."""


class AccountTypeNotFoundError(NotFoundError):
    """Raised when no account type matches the requested id."""

    def __init__(self, account_type_id) -> None:
        self.account_type_id = account_type_id
        super().__init__(
            f"Could not find an account type with id {account_type_id}."
        )


class ConfigurationError(FinanceError):
    """Raised when configuration is invalid or missing."""


__all__ = [
    "FinanceError",
    "NotFoundError",
    "AccountTypeNotFoundError",
    "ConfigurationError",
]
