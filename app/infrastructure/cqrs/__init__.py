"""CQRS infrastructure for commands and queries."""

from .commands import Command, ResultCommand, CommandHandler, ResultCommandHandler
from .queries import Query, QueryResult, QueryHandler
from .registry import (
    HandlerKind,
    HandlerKey,
    HandlerRegistry,
    HandlerRegistryBuilder,
    declared_result_type,
    discover_handlers,
    handler_key_for,
)
from .dispatcher import Dispatcher
from .exceptions import (
    CQRSError,
    HandlerNotFoundError,
    HandlerResolutionAmbiguousError,
    HandlerRegistrationError,
)

__all__ = [
    "Command",
    "ResultCommand",
    "CommandHandler",
    "ResultCommandHandler",
    "Query",
    "QueryResult",
    "QueryHandler",
    "HandlerKind",
    "HandlerKey",
    "HandlerRegistry",
    "HandlerRegistryBuilder",
    "declared_result_type",
    "discover_handlers",
    "handler_key_for",
    "Dispatcher",
    "CQRSError",
    "HandlerNotFoundError",
    "HandlerResolutionAmbiguousError",
    "HandlerRegistrationError",
]
