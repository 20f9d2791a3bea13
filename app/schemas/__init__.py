"""Pydantic schemas for the HTTP API."""

from .users import AddUserRequest, AddUserResponse, UserResponse, UsersResponse

__all__ = [
    "AddUserRequest",
    "AddUserResponse",
    "UserResponse",
    "UsersResponse",
]
