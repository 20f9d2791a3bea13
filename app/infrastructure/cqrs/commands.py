"""Command contracts for CQRS."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

TCommand = TypeVar("TCommand", bound="Command")
TResultCommand = TypeVar("TResultCommand", bound="ResultCommand")
TResult = TypeVar("TResult")


class Command(ABC):
    """Marker base class for commands that produce no result."""


class ResultCommand(ABC, Generic[TResult]):
    """Base class for commands producing a result.

    The subscript names the result type, e.g. ``ResultCommand[UUID]``, and
    is part of the command's identity: only a handler declaring the same
    result type can serve it.
    """


class CommandHandler(ABC, Generic[TCommand]):
    @abstractmethod
    async def execute(self, command: TCommand) -> None:
        raise NotImplementedError


class ResultCommandHandler(ABC, Generic[TResultCommand, TResult]):
    @abstractmethod
    async def execute(self, command: TResultCommand) -> TResult:
        raise NotImplementedError
