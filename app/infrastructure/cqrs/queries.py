"""Query contracts for CQRS."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


class Query(ABC, Generic[TResult]):
    """Base class for queries. ``Query[R]`` declares the result type ``R``."""


class QueryResult(ABC):
    """Marker base class for query and command result payloads."""


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Handler for a single query type. Must not mutate observable state."""

    @abstractmethod
    async def retrieve(self, query: TQuery) -> TResult:
        raise NotImplementedError
