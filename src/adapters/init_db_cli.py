"""CLI adapter creating the account type table in the finance database."""

from src.infrastructure.container import build_account_types_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the account_type table when missing."""
    logger = get_app_logger()
    repository = build_account_types_repository()
    repository.prepare_storage()
    logger.info("account_type table is ready.")
    print("Account type storage is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
