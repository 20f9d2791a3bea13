"""Schemas for user endpoints."""
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class AddUserRequest(BaseModel):
    """Request body for creating a user."""
    name: Optional[str] = None


class AddUserResponse(BaseModel):
    id: UUID


class UserResponse(BaseModel):
    """Payload returned for a single user."""


class UsersResponse(BaseModel):
    users: List[UUID] = Field(default_factory=list)
