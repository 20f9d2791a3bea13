from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

import pytest

from app.domains.users import (
    AddUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    GetUserQueryResult,
    GetUsersQuery,
    GetUsersQueryResult,
)
from app.domains.users.application.handlers import query_handlers
from app.domains.users.application.handlers.command_handlers import (
    AddUserCommandHandler,
    DeleteUserCommandHandler,
)
from app.domains.users.application.handlers.query_handlers import (
    GetUserQueryHandler,
    GetUsersQueryHandler,
)
from app.infrastructure.cqrs import (
    Command,
    CommandHandler,
    HandlerKey,
    HandlerKind,
    HandlerNotFoundError,
    HandlerRegistrationError,
    HandlerRegistry,
    HandlerRegistryBuilder,
    Query,
    QueryHandler,
    ResultCommandHandler,
    declared_result_type,
    discover_handlers,
    handler_key_for,
)
from app.infrastructure.di.container import Container

TItem = TypeVar("TItem")


@dataclass(frozen=True)
class PagedQuery(Query[TItem]):
    page: int = 1


@dataclass(frozen=True)
class CountUsersQuery(PagedQuery[int]):
    pass


@dataclass(frozen=True)
class LooseQuery(Query):
    pass


class Ambivalent(Command, Query[int]):
    pass


def test_declared_result_type_for_each_family():
    assert declared_result_type(DeleteUserCommand) is None
    assert declared_result_type(AddUserCommand) is UUID
    assert declared_result_type(GetUserQuery) is GetUserQueryResult


def test_declared_result_type_through_generic_intermediate():
    assert declared_result_type(CountUsersQuery) is int


def test_declared_result_type_requires_binding():
    with pytest.raises(HandlerRegistrationError):
        declared_result_type(LooseQuery)


def test_request_in_two_families_is_rejected():
    with pytest.raises(HandlerRegistrationError):
        declared_result_type(Ambivalent)


def test_handler_key_for_each_capability():
    assert handler_key_for(DeleteUserCommandHandler) == HandlerKey(
        HandlerKind.COMMAND, DeleteUserCommand, None
    )
    assert handler_key_for(AddUserCommandHandler) == HandlerKey(
        HandlerKind.RESULT_COMMAND, AddUserCommand, UUID
    )
    assert handler_key_for(GetUserQueryHandler) == HandlerKey(
        HandlerKind.QUERY, GetUserQuery, GetUserQueryResult
    )


def test_handler_key_matches_request_key():
    key = HandlerKey.for_request(GetUsersQuery())
    assert key == handler_key_for(GetUsersQueryHandler)


def test_handler_result_must_match_request_declaration():
    class WrongResultHandler(ResultCommandHandler[AddUserCommand, str]):
        async def execute(self, command):
            return "nope"

    with pytest.raises(HandlerRegistrationError, match="declares UUID"):
        handler_key_for(WrongResultHandler)


def test_handler_request_must_belong_to_capability_family():
    class ConfusedHandler(CommandHandler[GetUserQuery]):
        async def execute(self, command):
            return None

    with pytest.raises(HandlerRegistrationError):
        handler_key_for(ConfusedHandler)


def test_handler_must_bind_concrete_types():
    TQ = TypeVar("TQ")

    class TemplateHandler(QueryHandler[TQ, int]):
        async def retrieve(self, query):
            return 0

    with pytest.raises(HandlerRegistrationError):
        handler_key_for(TemplateHandler)


def test_plain_class_is_not_a_handler():
    class NotAHandler:
        pass

    with pytest.raises(HandlerRegistrationError):
        handler_key_for(NotAHandler)


def test_describe_mentions_request_and_result():
    key = handler_key_for(AddUserCommandHandler)
    assert key.describe() == "result_command AddUserCommand -> UUID"
    assert handler_key_for(DeleteUserCommandHandler).describe() == "command DeleteUserCommand"


def test_scan_registers_users_handlers():
    container = Container()
    registry = (
        HandlerRegistryBuilder(container)
        .scan("app.domains.users.application.handlers")
        .build()
    )

    assert len(registry) == 4
    assert HandlerKey(HandlerKind.RESULT_COMMAND, AddUserCommand, UUID) in registry
    assert registry.lookup(HandlerKey(HandlerKind.QUERY, GetUsersQuery, GetUsersQueryResult)) is GetUsersQueryHandler
    assert container.is_registered(AddUserCommandHandler)
    assert isinstance(container.resolve(DeleteUserCommandHandler), DeleteUserCommandHandler)


def test_discover_handlers_ignores_imported_classes():
    found = discover_handlers(query_handlers)
    assert found == [GetUserQueryHandler, GetUsersQueryHandler]


def test_adding_same_handler_twice_is_idempotent():
    registry = (
        HandlerRegistryBuilder(Container())
        .add(AddUserCommandHandler)
        .add(AddUserCommandHandler)
        .build()
    )
    assert registry.lookup(handler_key_for(AddUserCommandHandler)) is AddUserCommandHandler


def test_registry_is_frozen_after_build():
    builder = HandlerRegistryBuilder(Container()).add(AddUserCommandHandler)
    registry = builder.build()
    builder.add(DeleteUserCommandHandler)

    assert handler_key_for(DeleteUserCommandHandler) not in registry
    with pytest.raises(HandlerNotFoundError):
        registry.lookup(handler_key_for(DeleteUserCommandHandler))


def test_empty_registry_reports_not_found():
    registry = HandlerRegistry({})
    with pytest.raises(HandlerNotFoundError):
        registry.lookup(HandlerKey.for_request(GetUsersQuery()))
