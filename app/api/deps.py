"""Shared FastAPI dependencies."""
from fastapi import Request

from app.infrastructure.cqrs import Dispatcher


def get_dispatcher(request: Request) -> Dispatcher:
    """Return the dispatcher from the container attached at startup."""
    return request.app.state.container.resolve(Dispatcher)
