"""User endpoints backed by the CQRS dispatcher."""
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_dispatcher
from app.domains.users import (
    AddUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    GetUsersQuery,
)
from app.infrastructure.cqrs import Dispatcher
from app.schemas.users import AddUserRequest, AddUserResponse, UserResponse, UsersResponse

router = APIRouter()


@router.get("", response_model=UsersResponse)
async def list_users(dispatcher: Dispatcher = Depends(get_dispatcher)):
    result = await dispatcher.retrieve(GetUsersQuery())
    return UsersResponse(users=list(result.users))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    result = await dispatcher.retrieve(GetUserQuery(id=user_id))
    return UserResponse(**asdict(result))


@router.post("", response_model=AddUserResponse, status_code=status.HTTP_201_CREATED)
async def add_user(request: AddUserRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    user_id = await dispatcher.dispatch_with_result(AddUserCommand(name=request.name))
    return AddUserResponse(id=user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    await dispatcher.dispatch(DeleteUserCommand(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
