"""Shared kernel exception hierarchy."""
from typing import Optional, Dict, Any


class DomainException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
