"""Infrastructure adapters (CQRS, DI, observability)."""
