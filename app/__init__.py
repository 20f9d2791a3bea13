"""Demo CQRS web API."""
