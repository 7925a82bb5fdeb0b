"""Core domain types, codec, configuration and logging."""
