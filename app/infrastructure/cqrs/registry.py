"""Handler keys and the handler registry built once at startup."""
from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from enum import Enum
from functools import lru_cache
from types import MappingProxyType, ModuleType
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    KeysView,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from app.infrastructure.di.container import Container
from app.infrastructure.di.scopes import Scope

from .commands import Command, CommandHandler, ResultCommand, ResultCommandHandler
from .exceptions import (
    HandlerNotFoundError,
    HandlerRegistrationError,
    HandlerResolutionAmbiguousError,
)
from .queries import Query, QueryHandler

logger = logging.getLogger(__name__)


class HandlerKind(Enum):
    COMMAND = "command"
    RESULT_COMMAND = "result_command"
    QUERY = "query"


_REQUEST_FAMILIES: Tuple[Tuple[type, HandlerKind], ...] = (
    (Command, HandlerKind.COMMAND),
    (ResultCommand, HandlerKind.RESULT_COMMAND),
    (Query, HandlerKind.QUERY),
)

# capability base -> (kind, request family)
_CAPABILITIES: Dict[type, Tuple[HandlerKind, type]] = {
    CommandHandler: (HandlerKind.COMMAND, Command),
    ResultCommandHandler: (HandlerKind.RESULT_COMMAND, ResultCommand),
    QueryHandler: (HandlerKind.QUERY, Query),
}


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def _bound_args(
    cls: type, generic_base: type, bindings: Optional[Dict[Any, Any]] = None
) -> Optional[Tuple[Any, ...]]:
    """Return the type arguments ``cls`` passes to ``generic_base``.

    Type variables bound by intermediate generic classes are substituted on
    the way down. Returns ``None`` when ``cls`` does not derive from
    ``generic_base`` and ``()`` when it derives from it unparametrised.
    """
    bindings = bindings or {}
    for base in cls.__dict__.get("__orig_bases__", cls.__bases__):
        origin = get_origin(base) or base
        args = tuple(
            bindings.get(arg, arg) if isinstance(arg, TypeVar) else arg
            for arg in get_args(base)
        )
        if origin is generic_base:
            return args
        if isinstance(origin, type) and origin is not object and issubclass(origin, generic_base):
            params = getattr(origin, "__parameters__", ())
            found = _bound_args(origin, generic_base, dict(zip(params, args)))
            if found is not None:
                return found
    return None


def request_kind(request_type: type) -> HandlerKind:
    """Return which request family ``request_type`` belongs to."""
    kinds = [kind for family, kind in _REQUEST_FAMILIES if issubclass(request_type, family)]
    if len(kinds) != 1:
        raise HandlerRegistrationError(
            f"{_type_name(request_type)} must derive from exactly one of "
            "Command, ResultCommand or Query"
        )
    return kinds[0]


@lru_cache(maxsize=None)
def declared_result_type(request_type: type) -> Optional[Any]:
    """Return the result type a request class declares, ``None`` for void commands."""
    kind = request_kind(request_type)
    if kind is HandlerKind.COMMAND:
        return None
    family = ResultCommand if kind is HandlerKind.RESULT_COMMAND else Query
    args = _bound_args(request_type, family)
    if not args or isinstance(args[0], TypeVar):
        raise HandlerRegistrationError(
            f"{_type_name(request_type)} does not bind a result type; "
            f"declare it as {family.__name__}[ResultType]"
        )
    return args[0]


class HandlerKey(NamedTuple):
    kind: HandlerKind
    request_type: type
    result_type: Optional[Any] = None

    @classmethod
    def for_request(cls, request: Any) -> "HandlerKey":
        """Key for a request value, taken from its concrete runtime type."""
        request_type = type(request)
        return cls(request_kind(request_type), request_type, declared_result_type(request_type))

    def describe(self) -> str:
        if self.result_type is None:
            return f"{self.kind.value} {_type_name(self.request_type)}"
        return (
            f"{self.kind.value} {_type_name(self.request_type)} "
            f"-> {_type_name(self.result_type)}"
        )


def handler_key_for(handler_type: type) -> HandlerKey:
    """Return the key a handler class serves, read from its capability base."""
    name = _type_name(handler_type)
    matches = [
        (capability, kind, family)
        for capability, (kind, family) in _CAPABILITIES.items()
        if issubclass(handler_type, capability)
    ]
    if not matches:
        raise HandlerRegistrationError(f"{name} implements no handler capability")
    if len(matches) > 1:
        raise HandlerRegistrationError(f"{name} implements more than one handler capability")
    capability, kind, family = matches[0]

    args = _bound_args(handler_type, capability) or ()
    expected = 1 if kind is HandlerKind.COMMAND else 2
    if len(args) != expected or any(isinstance(arg, TypeVar) for arg in args):
        raise HandlerRegistrationError(
            f"{name} must bind concrete types on {capability.__name__}[...]"
        )

    request_type = args[0]
    if not (isinstance(request_type, type) and issubclass(request_type, family)):
        raise HandlerRegistrationError(
            f"{name} handles {_type_name(request_type)}, which is not a {family.__name__}"
        )
    if request_kind(request_type) is not kind:
        raise HandlerRegistrationError(
            f"{name} handles {_type_name(request_type)}, which is not a {family.__name__}"
        )

    result_type = declared_result_type(request_type)
    if kind is not HandlerKind.COMMAND and args[1] != result_type:
        raise HandlerRegistrationError(
            f"{name} returns {_type_name(args[1])} but {_type_name(request_type)} "
            f"declares {_type_name(result_type)}"
        )
    return HandlerKey(kind, request_type, result_type)


class HandlerRegistry:
    """Read-only mapping from handler key to the handler types registered for it."""

    def __init__(self, registrations: Mapping[HandlerKey, Iterable[type]]) -> None:
        self._registrations: Mapping[HandlerKey, Tuple[type, ...]] = MappingProxyType(
            {key: tuple(handler_types) for key, handler_types in registrations.items()}
        )

    def lookup(self, key: HandlerKey) -> type:
        handler_types = self._registrations.get(key, ())
        if not handler_types:
            raise HandlerNotFoundError(key)
        if len(handler_types) > 1:
            raise HandlerResolutionAmbiguousError(key, handler_types)
        return handler_types[0]

    def validate(self) -> None:
        """Fail on the first key served by more than one handler."""
        for key, handler_types in self._registrations.items():
            if len(handler_types) > 1:
                raise HandlerResolutionAmbiguousError(key, handler_types)

    def keys(self) -> KeysView[HandlerKey]:
        return self._registrations.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)


def _iter_modules(module: Union[str, ModuleType]) -> Iterator[ModuleType]:
    if isinstance(module, str):
        module = importlib.import_module(module)
    yield module
    path = getattr(module, "__path__", None)
    if path is not None:
        for info in pkgutil.walk_packages(path, prefix=f"{module.__name__}."):
            yield importlib.import_module(info.name)


def discover_handlers(*modules: Union[str, ModuleType]) -> List[type]:
    """Find concrete handler classes defined in the given modules and packages."""
    capabilities = tuple(_CAPABILITIES)
    found: List[type] = []
    for module in modules:
        for scanned in _iter_modules(module):
            for _, obj in inspect.getmembers(scanned, inspect.isclass):
                if obj.__module__ != scanned.__name__ or inspect.isabstract(obj):
                    continue
                # generic templates such as ``class Base(QueryHandler[TQ, TR])``
                if getattr(obj, "__parameters__", ()):
                    continue
                if issubclass(obj, capabilities) and obj not in found:
                    found.append(obj)
    return found


class HandlerRegistryBuilder:
    """Collects handlers at startup and freezes them into a HandlerRegistry.

    Each handler class is also registered in the container so the dispatcher
    can resolve a fresh instance (or a shared one, depending on ``scope``).
    """

    def __init__(self, container: Container) -> None:
        self._container = container
        self._registrations: Dict[HandlerKey, List[type]] = {}

    def add(
        self,
        handler_type: Type[Any],
        factory: Optional[Callable[[Container], Any]] = None,
        scope: Scope = Scope.TRANSIENT,
    ) -> "HandlerRegistryBuilder":
        key = handler_key_for(handler_type)
        handler_types = self._registrations.setdefault(key, [])
        if handler_type in handler_types:
            return self
        handler_types.append(handler_type)
        self._container.register(
            handler_type,
            factory or (lambda c, cls=handler_type: cls()),
            scope,
        )
        logger.debug("Registered %s for %s", _type_name(handler_type), key.describe())
        return self

    def scan(self, *modules: Union[str, ModuleType]) -> "HandlerRegistryBuilder":
        for handler_type in discover_handlers(*modules):
            self.add(handler_type)
        return self

    def build(self, validate: bool = True) -> HandlerRegistry:
        registry = HandlerRegistry(self._registrations)
        if validate:
            registry.validate()
        logger.info("Handler registry built with %d handler key(s)", len(registry))
        return registry
