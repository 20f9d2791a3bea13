"""Service lifetimes for the DI container."""
from enum import Enum


class Scope(Enum):
    SINGLETON = "singleton"  # one instance per container
    SCOPED = "scoped"  # one instance per create_scope() block
    TRANSIENT = "transient"  # new instance per resolve()
