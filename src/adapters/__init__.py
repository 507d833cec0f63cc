"""Adapters exposing use cases to HTTP, templates and the command line."""

__all__ = []
