"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Optional

from src.domain.errors import ConfigurationError
from src.domain.models.currency import (
    DEFAULT_CURRENCY_PROFILES,
    CurrencyProfile,
    CurrencyProfiles,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for finance display helpers.

    Attributes:
        currency_profiles_file: Optional JSON file with extra currency
            profiles keyed by currency id.
        amount_words_language: Default language for spelled amounts.
    """

    currency_profiles_file: Optional[Path] = None
    amount_words_language: str = "en"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        raw_profiles = os.getenv("CURRENCY_PROFILES_FILE")
        language = os.getenv("AMOUNT_WORDS_LANGUAGE", "en").strip().lower()
        profiles_file = None
        if raw_profiles:
            profiles_file = Path(raw_profiles).expanduser().resolve()
        return cls(
            currency_profiles_file=profiles_file,
            amount_words_language=language or "en",
        )

    def load_currency_profiles(self, logger=None) -> CurrencyProfiles:
        """Return the built-in profiles merged with the configured file.

        Args:
            logger: Optional logger used for warnings.

        Returns:
            CurrencyProfiles: Profiles available to the formatter.

        Raises:
            ConfigurationError: If the file content is not a valid mapping
                of currency ids to profiles.
        """
        if self.currency_profiles_file is None:
            return DEFAULT_CURRENCY_PROFILES
        logger = logger or get_app_logger()
        path = self.currency_profiles_file
        if not path.exists():
            logger.warning(f"Currency profiles file does not exist at {path}")
            return DEFAULT_CURRENCY_PROFILES
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Currency profiles in {path} are not valid JSON: {exc}"
            ) from exc
        return DEFAULT_CURRENCY_PROFILES.merged(_parse_profiles(raw, path))


def _parse_profiles(raw, path: Path) -> dict[int, CurrencyProfile]:
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Currency profiles in {path} must be a JSON object"
        )
    profiles = {}
    for key, options in raw.items():
        try:
            currency_id = int(key)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid currency id {key!r} in {path}"
            ) from exc
        if not isinstance(options, dict):
            raise ConfigurationError(
                f"Currency profile {key!r} in {path} must be a JSON object"
            )
        try:
            profiles[currency_id] = CurrencyProfile(**options)
        except TypeError as exc:
            raise ConfigurationError(
                f"Invalid currency profile {key!r} in {path}: {exc}"
            ) from exc
    return profiles


__all__ = ["FinanceSettings"]
