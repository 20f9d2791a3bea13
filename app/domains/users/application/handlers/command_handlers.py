"""Command handlers for the users context."""
from __future__ import annotations

import logging
from uuid import UUID, uuid4

from app.infrastructure.cqrs import CommandHandler, ResultCommandHandler
from app.domains.users.application.commands.add_user import AddUserCommand
from app.domains.users.application.commands.delete_user import DeleteUserCommand

logger = logging.getLogger(__name__)


class AddUserCommandHandler(ResultCommandHandler[AddUserCommand, UUID]):
    async def execute(self, command: AddUserCommand) -> UUID:
        user_id = uuid4()
        logger.info("Added user %s", user_id)
        return user_id


class DeleteUserCommandHandler(CommandHandler[DeleteUserCommand]):
    async def execute(self, command: DeleteUserCommand) -> None:
        logger.info("Deleted user %s", command.user_id)
