"""Handlers for the users context, discovered by scanning this package."""
