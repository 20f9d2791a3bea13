"""Service registration for the DI container."""
from __future__ import annotations

from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.infrastructure.di.container import Container
from app.infrastructure.di.scopes import Scope
from app.infrastructure.cqrs import Dispatcher, HandlerRegistry, HandlerRegistryBuilder


def configure_container(container: Container, settings: Optional[Settings] = None) -> None:
    """Configure application dependencies."""
    settings = settings or default_settings

    # Handlers: discovered once at startup, read-only afterwards
    registry = (
        HandlerRegistryBuilder(container)
        .scan(*settings.CQRS_HANDLER_MODULES)
        .build(validate=settings.CQRS_VALIDATE_ON_STARTUP)
    )
    container.register_instance(HandlerRegistry, registry)

    container.register(
        Dispatcher,
        lambda c: Dispatcher(c.resolve(HandlerRegistry), c),
        Scope.SINGLETON,
    )


def get_configured_container() -> Container:
    """Return a configured container instance."""
    container = Container.get_instance()
    if not container.is_registered(Dispatcher):
        configure_container(container)
    return container
