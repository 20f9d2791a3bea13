"""Domain bounded contexts."""
