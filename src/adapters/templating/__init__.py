"""Template integration package."""

from .filters import register_finance_filters

__all__ = ["register_finance_filters"]
