"""Dispatcher routing commands and queries to their registered handler."""
from __future__ import annotations

import logging
from typing import Any, TypeVar

from app.infrastructure.di.container import Container

from .commands import Command, ResultCommand
from .queries import Query
from .registry import HandlerKey, HandlerRegistry

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class Dispatcher:
    """Single entry point for sending commands and queries.

    Handlers are looked up by the concrete runtime type of the request (plus
    the result type that request class declares) and instantiated through
    the container. Whatever the handler raises reaches the caller unchanged.
    """

    def __init__(self, registry: HandlerRegistry, container: Container) -> None:
        self._registry = registry
        self._container = container

    async def dispatch(self, command: Command) -> None:
        if not isinstance(command, Command):
            raise TypeError(f"dispatch() expects a Command, got {type(command).__name__}")
        handler = self._resolve(command)
        await handler.execute(command)

    async def dispatch_with_result(self, command: ResultCommand[TResult]) -> TResult:
        if not isinstance(command, ResultCommand):
            raise TypeError(
                f"dispatch_with_result() expects a ResultCommand, got {type(command).__name__}"
            )
        handler = self._resolve(command)
        return await handler.execute(command)

    async def retrieve(self, query: Query[TResult]) -> TResult:
        if not isinstance(query, Query):
            raise TypeError(f"retrieve() expects a Query, got {type(query).__name__}")
        handler = self._resolve(query)
        return await handler.retrieve(query)

    def _resolve(self, request: Any) -> Any:
        key = HandlerKey.for_request(request)
        handler_type = self._registry.lookup(key)
        logger.debug("Dispatching %s to %s", key.describe(), handler_type.__qualname__)
        return self._container.resolve(handler_type)
