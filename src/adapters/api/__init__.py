"""HTTP adapter package."""

__all__ = []
