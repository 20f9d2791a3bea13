"""Users bounded context."""

from .application.commands.add_user import AddUserCommand
from .application.commands.delete_user import DeleteUserCommand
from .application.queries.get_user import GetUserQuery, GetUserQueryResult
from .application.queries.get_users import GetUsersQuery, GetUsersQueryResult

__all__ = [
    "AddUserCommand",
    "DeleteUserCommand",
    "GetUserQuery",
    "GetUserQueryResult",
    "GetUsersQuery",
    "GetUsersQueryResult",
]
