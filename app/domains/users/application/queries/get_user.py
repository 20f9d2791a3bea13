"""Query model for a single user."""
from dataclasses import dataclass
from uuid import UUID

from app.infrastructure.cqrs import Query, QueryResult


@dataclass(frozen=True)
class GetUserQueryResult(QueryResult):
    pass


@dataclass(frozen=True)
class GetUserQuery(Query[GetUserQueryResult]):
    id: UUID
