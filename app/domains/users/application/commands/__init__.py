"""Commands for the users context."""
