"""Core infrastructure: configuration and database access."""
