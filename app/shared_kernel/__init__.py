"""Shared kernel primitives (errors)."""

from .exceptions import DomainException

__all__ = ["DomainException"]
