"""Query model for the user listing."""
from dataclasses import dataclass
from typing import Tuple
from uuid import UUID

from app.infrastructure.cqrs import Query, QueryResult


@dataclass(frozen=True)
class GetUsersQueryResult(QueryResult):
    users: Tuple[UUID, ...] = ()


@dataclass(frozen=True)
class GetUsersQuery(Query[GetUsersQueryResult]):
    pass
