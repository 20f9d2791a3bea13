"""Errors raised while registering or resolving CQRS handlers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence, Type

from app.shared_kernel.exceptions import DomainException

if TYPE_CHECKING:
    from .registry import HandlerKey


class CQRSError(DomainException):
    """Base class for dispatcher configuration and resolution errors."""


class HandlerNotFoundError(CQRSError):
    """No handler is registered for the requested key."""

    def __init__(self, key: "HandlerKey") -> None:
        super().__init__(
            f"No handler registered for {key.describe()}",
            code="HANDLER_NOT_FOUND",
            details={"kind": key.kind.value, "request_type": key.request_type.__name__},
        )
        self.key = key


class HandlerResolutionAmbiguousError(CQRSError):
    """More than one handler is registered for the same key."""

    def __init__(self, key: "HandlerKey", handler_types: Sequence[Type[Any]]) -> None:
        names = ", ".join(handler_type.__qualname__ for handler_type in handler_types)
        super().__init__(
            f"{len(handler_types)} handlers registered for {key.describe()}: {names}",
            code="HANDLER_RESOLUTION_AMBIGUOUS",
            details={
                "kind": key.kind.value,
                "request_type": key.request_type.__name__,
                "handlers": [handler_type.__qualname__ for handler_type in handler_types],
            },
        )
        self.key = key
        self.handler_types = tuple(handler_types)


class HandlerRegistrationError(CQRSError):
    """A handler or request class declares an unusable binding."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="HANDLER_REGISTRATION_INVALID")
