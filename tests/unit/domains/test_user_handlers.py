import logging
from uuid import UUID, uuid4

import pytest

from app.domains.users import (
    AddUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    GetUserQueryResult,
    GetUsersQuery,
    GetUsersQueryResult,
)
from app.domains.users.application.handlers.command_handlers import (
    AddUserCommandHandler,
    DeleteUserCommandHandler,
)
from app.domains.users.application.handlers.query_handlers import (
    GetUserQueryHandler,
    GetUsersQueryHandler,
)


@pytest.mark.asyncio
async def test_add_user_returns_new_id_each_time():
    handler = AddUserCommandHandler()
    first = await handler.execute(AddUserCommand(name="Ada"))
    second = await handler.execute(AddUserCommand(name="Ada"))
    assert isinstance(first, UUID)
    assert first != second


@pytest.mark.asyncio
async def test_delete_user_logs_user_id(caplog):
    user_id = uuid4()
    with caplog.at_level(logging.INFO):
        result = await DeleteUserCommandHandler().execute(DeleteUserCommand(user_id=user_id))
    assert result is None
    assert f"Deleted user {user_id}" in caplog.text


@pytest.mark.asyncio
async def test_get_user_returns_empty_result():
    result = await GetUserQueryHandler().retrieve(GetUserQuery(id=uuid4()))
    assert result == GetUserQueryResult()


@pytest.mark.asyncio
async def test_get_users_returns_empty_listing():
    result = await GetUsersQueryHandler().retrieve(GetUsersQuery())
    assert result == GetUsersQueryResult()
    assert result.users == ()


def test_requests_are_immutable():
    command = AddUserCommand(name="Ada")
    with pytest.raises(AttributeError):
        command.name = "Grace"
