"""Query handlers for the users context."""
from __future__ import annotations

import logging

from app.infrastructure.cqrs import QueryHandler
from app.domains.users.application.queries.get_user import GetUserQuery, GetUserQueryResult
from app.domains.users.application.queries.get_users import GetUsersQuery, GetUsersQueryResult

logger = logging.getLogger(__name__)


class GetUserQueryHandler(QueryHandler[GetUserQuery, GetUserQueryResult]):
    async def retrieve(self, query: GetUserQuery) -> GetUserQueryResult:
        logger.info("Retrieved user %s", query.id)
        return GetUserQueryResult()


class GetUsersQueryHandler(QueryHandler[GetUsersQuery, GetUsersQueryResult]):
    async def retrieve(self, query: GetUsersQuery) -> GetUsersQueryResult:
        logger.info("Retrieved users")
        return GetUsersQueryResult()
