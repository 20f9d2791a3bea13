"""Queries for the users context."""
