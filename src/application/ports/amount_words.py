"""Port for spelling amounts as words."""

from typing import Protocol


class AmountToWordsPort(Protocol):
    """Converts a numeric amount to its textual form."""

    def convert(self, value, language: str, currency_name: str) -> str:
        """Return ``value`` spelled in ``language`` with ``currency_name``."""


__all__ = ["AmountToWordsPort"]
