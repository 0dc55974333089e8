"""Core client infrastructure: configuration, errors, observability and transport."""
