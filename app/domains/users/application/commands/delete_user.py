"""Command deleting a user."""
from dataclasses import dataclass
from uuid import UUID

from app.infrastructure.cqrs import Command


@dataclass(frozen=True)
class DeleteUserCommand(Command):
    user_id: UUID
