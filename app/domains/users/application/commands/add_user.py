"""Command creating a user."""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from app.infrastructure.cqrs import ResultCommand


@dataclass(frozen=True)
class AddUserCommand(ResultCommand[UUID]):
    name: Optional[str] = None
