"""Dependency injection container and scopes."""

from .container import Container
from .scopes import Scope

__all__ = [
    "Container",
    "Scope",
]
