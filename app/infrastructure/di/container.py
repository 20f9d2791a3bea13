"""Simple dependency injection container."""
from __future__ import annotations

from typing import TypeVar, Type, Dict, Callable, Any, Iterator, Optional
import threading
from contextlib import contextmanager
from contextvars import ContextVar

from .scopes import Scope

T = TypeVar("T")


class Registration:
    def __init__(self, factory: Callable[["Container"], Any], scope: Scope) -> None:
        self.factory = factory
        self.scope = scope


class Container:
    _instance: Optional["Container"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._registrations: Dict[Type, Registration] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_lock = threading.RLock()
        # Scoped instances are held per execution context so that concurrent
        # requests each see their own scope.
        self._scoped_instances: ContextVar[Optional[Dict[Type, Any]]] = ContextVar(
            f"container_scope_{id(self)}", default=None
        )

    @classmethod
    def get_instance(cls) -> "Container":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (tests only)."""
        cls._instance = None

    def register(
        self,
        interface: Type[T],
        factory: Callable[["Container"], T],
        scope: Scope = Scope.SINGLETON,
    ) -> None:
        self._registrations[interface] = Registration(factory, scope)
        self._singletons.pop(interface, None)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Register an already built object as a singleton."""
        self._registrations[interface] = Registration(lambda c: instance, Scope.SINGLETON)
        self._singletons[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        registration = self._registrations.get(interface)
        if registration is None:
            name = getattr(interface, "__qualname__", repr(interface))
            raise KeyError(f"No registration found for {name}")

        if registration.scope == Scope.SINGLETON:
            if interface not in self._singletons:
                with self._singleton_lock:
                    if interface not in self._singletons:
                        self._singletons[interface] = registration.factory(self)
            return self._singletons[interface]

        if registration.scope == Scope.SCOPED:
            instances = self._scoped_instances.get()
            if instances is None:
                raise RuntimeError("Cannot resolve scoped service outside of scope")
            if interface not in instances:
                instances[interface] = registration.factory(self)
            return instances[interface]

        return registration.factory(self)

    @contextmanager
    def create_scope(self) -> Iterator["Container"]:
        """Create a scope for scoped services (per request)."""
        token = self._scoped_instances.set({})
        try:
            yield self
        finally:
            self._scoped_instances.reset(token)

    def is_registered(self, interface: Type) -> bool:
        return interface in self._registrations
